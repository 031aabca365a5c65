"""Conversation controller.

Owns the transcript, the active and staged configuration, and the busy
flag. Turns user actions into request descriptors, hands them to the
bridge, and turns results (or failures) into transcript entries.

Concurrency model: everything runs on one asyncio event loop. The busy
flag is checked and set before the first ``await`` of an operation, so
two operations can never both pass the check. A second attempt while
busy is dropped, not queued.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from ..bridge.base import Bridge
from ..bridge.models import HttpMethod, RelayResult, RequestDescriptor
from ..config.base import ConfigLoadError, ConfigPersistenceError, ConfigStore
from ..config.models import DEFAULT_CONFIG, ChatConfig
from ..relay.errors import ProtocolError
from .models import Message, Role

TEMPERATURE = 0.7
MAX_TOKENS = 1000

EMPTY_RESPONSE_PLACEHOLDER = "Error: the response was empty"


class ControllerEvent(str, Enum):
    """State-change notifications delivered to listeners."""

    TRANSCRIPT = "transcript"
    BUSY = "busy"
    CONFIG = "config"


Listener = Callable[[ControllerEvent], None]
NoticeHandler = Callable[[str], None]
DebugCallback = Callable[[str, str, str], None]


def _error_text(error: BaseException) -> str:
    return str(error) or "Unknown error"


def _config_lines(config: ChatConfig) -> str:
    return f"- API URL: {config.base_url}\n- Model: {config.model}"


def extract_reply(data: Any) -> str:
    """Pull the assistant text out of a chat-completions response body.

    A missing or empty ``choices[0].message.content`` degrades to a
    placeholder. A body that is not an object, or has no ``choices`` list,
    is a protocol error.

    Raises:
        ProtocolError: If the response shape is unusable
    """
    if not isinstance(data, dict) or not data:
        raise ProtocolError("body is not a JSON object")

    choices = data.get("choices")
    if not isinstance(choices, list):
        raise ProtocolError("missing 'choices'")

    if not choices or not isinstance(choices[0], dict):
        return EMPTY_RESPONSE_PLACEHOLDER

    message = choices[0].get("message")
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        return EMPTY_RESPONSE_PLACEHOLDER
    return content


def extract_model_ids(data: Any) -> list[str]:
    """List model identifiers from a ``/v1/models`` response, if any."""
    if not isinstance(data, dict) or not isinstance(data.get("data"), list):
        return []
    ids = []
    for entry in data["data"]:
        if isinstance(entry, dict) and isinstance(entry.get("id"), str):
            ids.append(entry["id"])
    return ids


class ConversationController:
    """Single owner of conversation state.

    Constructed at process start with a bridge and a config store, torn
    down with ``close()``. The presentation layer reads ``transcript``,
    ``config``, ``staged_config``, ``busy`` and ``input_text`` and
    subscribes with ``add_listener`` to redraw, scroll and refocus.

    Example:
        async with ConversationController(bridge, store) as controller:
            await controller.send("hello")
            print(controller.transcript[-1].content)
    """

    def __init__(
        self,
        bridge: Bridge,
        store: ConfigStore,
        config: ChatConfig | None = None,
        notice_handler: NoticeHandler | None = None,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._bridge = bridge
        self._store = store
        self._notice_handler = notice_handler
        self._debug_callback = debug_callback
        self._listeners: list[Listener] = []

        self._messages: list[Message] = []
        self._busy = False
        self.input_text = ""

        self._config = config if config is not None else self._load_config()
        self._staged = self._config

    def _load_config(self) -> ChatConfig:
        try:
            loaded = self._store.load()
        except ConfigLoadError as e:
            self._debug("warning", str(e))
            return DEFAULT_CONFIG
        if loaded is None:
            return DEFAULT_CONFIG
        self._debug("info", f"Loaded settings from {self._store.location}")
        return loaded

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def transcript(self) -> tuple[Message, ...]:
        """Snapshot of the transcript, oldest first."""
        return tuple(self._messages)

    @property
    def config(self) -> ChatConfig:
        return self._config

    @property
    def staged_config(self) -> ChatConfig:
        return self._staged

    @property
    def busy(self) -> bool:
        return self._busy

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to state changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_notice_handler(self, handler: NoticeHandler | None) -> None:
        """Set the handler for blocking notices (e.g. settings not saved)."""
        self._notice_handler = handler

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route trace messages here and through the bridge."""
        self._debug_callback = callback
        self._bridge.set_debug_callback(callback)

    def _emit(self, event: ControllerEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Chat", message)

    def _notice(self, text: str) -> None:
        self._debug("error", text)
        if self._notice_handler is not None:
            self._notice_handler(text)

    def _append(self, role: Role, content: str) -> Message:
        message = Message(role=role, content=content)
        self._messages.append(message)
        self._emit(ControllerEvent.TRANSCRIPT)
        return message

    def _set_busy(self, value: bool) -> None:
        self._busy = value
        self._emit(ControllerEvent.BUSY)

    # ------------------------------------------------------------------
    # User-initiated network operations
    # ------------------------------------------------------------------

    def build_chat_request(self, config: ChatConfig | None = None) -> RequestDescriptor:
        """Descriptor for a chat completion over the whole transcript."""
        config = config or self._config
        return RequestDescriptor(
            endpoint=config.chat_completions_url,
            method=HttpMethod.POST,
            body={
                "model": config.model,
                "messages": [m.to_payload() for m in self._messages],
                "temperature": TEMPERATURE,
                "max_tokens": MAX_TOKENS,
                "stream": False,
            },
        )

    def build_models_request(self) -> RequestDescriptor:
        return RequestDescriptor(endpoint=self._config.models_url, method=HttpMethod.GET)

    async def send(self, text: str | None = None) -> bool:
        """Send a user message and append the assistant's reply.

        Args:
            text: Message text; when omitted the input buffer is used

        Silently does nothing when the trimmed text is empty or another
        operation is in flight.

        Returns:
            True if a reply was appended, False if nothing was sent or the
            call failed (the failure is still appended as an entry)
        """
        raw = self.input_text if text is None else text
        content = raw.strip()
        if not content or self._busy:
            return False

        # Errors report the config the request was built with
        config = self._config
        self._append(Role.USER, content)
        self.input_text = ""
        self._set_busy(True)

        try:
            descriptor = self.build_chat_request(config)
            self._debug("info", f"Sending {len(descriptor.body['messages'])} message(s) to {descriptor.endpoint}")
            result = await self._bridge.invoke(descriptor)
            reply = extract_reply(self._result_data(result))
            self._append(Role.ASSISTANT, reply)
            return True
        except Exception as e:
            self._debug("error", f"API call failed: {e}")
            self._append(
                Role.ASSISTANT,
                f"An error occurred: {_error_text(e)}\n\n"
                f"Please check your settings:\n{_config_lines(config)}",
            )
            return False
        finally:
            self._set_busy(False)

    async def test_connection(self) -> bool:
        """Query the models listing and report reachability in the transcript.

        Returns:
            True if the server answered with a JSON body
        """
        if self._busy:
            return False

        base_url = self._config.base_url
        self._set_busy(True)

        try:
            result = await self._bridge.invoke(self.build_models_request())
            data = self._result_data(result)
            if data is None:
                raise ProtocolError("empty body")

            content = f"Connection succeeded!\n\nAPI URL: {base_url}"
            model_ids = extract_model_ids(data)
            if model_ids:
                listing = "\n".join(f"- {model_id}" for model_id in model_ids)
                content += f"\n\nAvailable models:\n{listing}"
            self._append(Role.ASSISTANT, content)
            return True
        except Exception as e:
            self._debug("error", f"Connection test failed: {e}")
            self._append(
                Role.ASSISTANT,
                f"Connection error\n\nAPI URL: {base_url}\n"
                f"Error: {_error_text(e)}\n\nPlease check your settings.",
            )
            return False
        finally:
            self._set_busy(False)

    @staticmethod
    def _result_data(result: RelayResult) -> Any:
        if not isinstance(result, RelayResult) or result.kind != "json":
            raise ProtocolError(f"unexpected result {result!r}")
        return result.data

    # ------------------------------------------------------------------
    # Local operations
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Empty the transcript. No confirmation, no undo."""
        self._messages = []
        self._emit(ControllerEvent.TRANSCRIPT)

    def open_settings(self) -> ChatConfig:
        """Start editing: the staged copy becomes the active configuration."""
        self._staged = self._config
        return self._staged

    def stage_configuration(self, **fields: str) -> ChatConfig:
        """Edit the staged copy without touching the active configuration.

        Args:
            **fields: ``base_url`` and/or ``model``
        """
        self._staged = self._staged.model_copy(update=fields)
        return self._staged

    def save_configuration(self, staged: ChatConfig | None = None) -> bool:
        """Normalize and activate the staged configuration, then persist it.

        The active configuration is replaced even if persisting fails; the
        failure is raised as a blocking notice instead of a transcript entry.

        Returns:
            True if the configuration was persisted
        """
        final = (staged if staged is not None else self._staged).normalized()
        self._config = final
        self._staged = final
        self._emit(ControllerEvent.CONFIG)

        try:
            self._store.save(final)
        except ConfigPersistenceError as e:
            self._notice(str(e))
            return False

        self._debug("info", f"Settings saved to {self._store.location}")
        self._append(Role.ASSISTANT, f"Settings saved\n{_config_lines(final)}")
        return True

    def reset_configuration(self) -> None:
        """Restore defaults and delete the persisted copy."""
        self._config = DEFAULT_CONFIG
        self._staged = DEFAULT_CONFIG
        self._emit(ControllerEvent.CONFIG)

        try:
            self._store.remove()
        except ConfigPersistenceError as e:
            self._notice(str(e))

        self._append(
            Role.ASSISTANT,
            f"Settings reset to defaults\n{_config_lines(DEFAULT_CONFIG)}",
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Tear down the bridge (and the relay behind it)."""
        await self._bridge.close()

    async def __aenter__(self) -> "ConversationController":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

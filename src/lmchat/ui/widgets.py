"""Custom Textual widgets for the chat window.

Hides widget implementation details:
- Input history management
- Transcript rendering and scrolling
- Status line formatting
- Log rendering with level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..config.models import ChatConfig
from ..conversation.models import Message, Role
from .config import (
    COMPONENT_STYLES,
    EMPTY_TRANSCRIPT_HINT,
    INPUT_HISTORY_MAX_SIZE,
    LEVEL_STYLES,
    TIMESTAMP_FORMAT,
    LogLevel,
)


class ClickableMessage(Vertical):
    """A chat message container that copies its content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class InputHistory:
    """Recall buffer for submitted messages, newest last.

    ``back``/``forward`` walk the entries; walking forward past the newest
    returns to an empty draft.
    """

    def __init__(self, max_size: int = INPUT_HISTORY_MAX_SIZE) -> None:
        self._entries: list[str] = []
        self._max_size = max_size
        self._cursor: int | None = None

    def push(self, entry: str) -> None:
        if not self._entries or self._entries[-1] != entry:
            self._entries.append(entry)
            del self._entries[:-self._max_size]
        self._cursor = None

    def back(self) -> str | None:
        if not self._entries:
            return None
        if self._cursor is None:
            self._cursor = len(self._entries) - 1
        else:
            self._cursor = max(self._cursor - 1, 0)
        return self._entries[self._cursor]

    def forward(self) -> str | None:
        if self._cursor is None:
            return None
        if self._cursor >= len(self._entries) - 1:
            self._cursor = None
            return ""
        self._cursor += 1
        return self._entries[self._cursor]


class ChatInputBar(Horizontal):
    """Multi-line message area with a Send button.

    Ctrl+J or the button posts ``Submitted`` with the raw text. The text is
    left in place; the app clears it once the controller has accepted it.
    Up on the first line and Down on the last line walk the history.
    """

    class Submitted(TextualMessage):
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.history = InputHistory()

    def compose(self):
        yield TextArea(id="chat-input", show_line_numbers=False)
        yield Button("Send", id="send-btn", variant="success").with_tooltip("Send (Ctrl+J)")

    @property
    def _area(self) -> TextArea:
        return self.query_one("#chat-input", TextArea)

    def on_mount(self) -> None:
        self._area.cursor_blink = False
        self._area.highlight_cursor_line = False
        self._area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()

    def on_key(self, event) -> None:
        # Terminals report Ctrl+Enter as plain Enter, so Ctrl+J submits
        if event.key == "ctrl+j":
            self._submit()
        elif event.key == "up" and self._area.cursor_location[0] == 0:
            self._recall(self.history.back())
        elif event.key == "down" and self._area.cursor_location[0] == self._area.document.line_count - 1:
            self._recall(self.history.forward())
        else:
            return
        event.prevent_default()
        event.stop()

    def _recall(self, entry: str | None) -> None:
        if entry is not None:
            self._area.text = entry
            self._area.move_cursor(self._area.document.end)

    def _submit(self) -> None:
        value = self._area.text
        if not value.strip():
            return
        self.history.push(value.strip())
        self.post_message(self.Submitted(value))

    @property
    def text(self) -> str:
        return self._area.text

    @text.setter
    def text(self, value: str) -> None:
        self._area.text = value

    def set_busy(self, busy: bool) -> None:
        """Disable input and the Send button while a request is pending."""
        self._area.disabled = busy
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        self._area.focus()


class StatusPanel(Static):
    """One-line connection summary: API URL, model and busy state."""

    def update_status(self, config: ChatConfig, busy: bool) -> None:
        state = "[bold yellow]waiting for reply...[/]" if busy else "[green]idle[/]"
        self.set_class(busy, "busy")
        self.update(
            f"[bold cyan]API:[/] {config.base_url}  "
            f"[bold magenta]Model:[/] {config.model}  "
            f"{state}"
        )


class TypingIndicator(Static):
    """Shown under the transcript while a request is in flight."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("[dim]Assistant is typing...[/]", *args, **kwargs)

    def set_visible(self, visible: bool) -> None:
        self.set_class(visible, "visible")


class DebugPanel(RichLog):
    """Trace log for the controller, bridge and relay.

    Hidden until ``--log-level`` is given or Ctrl+D is pressed. Lines
    below ``log_level`` are discarded, not just hidden.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "hidden"

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, highlight=False, auto_scroll=True, wrap=True, **kwargs)
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._refresh_subtitle()

    def _refresh_subtitle(self) -> None:
        self.border_subtitle = f"≥ {self._log_level.name}" if self.display else "hidden"

    def log_entry(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Append one trace line if ``level`` passes the threshold.

        The message is appended as plain text, so brackets in server
        output are not read as markup.
        """
        if level < self._log_level:
            return

        line = Text()
        line.append(datetime.now().strftime(TIMESTAMP_FORMAT), style="dim")
        line.append(f" {LogLevel(level).name:<7} ", style=LEVEL_STYLES.get(level, "white"))
        line.append(f"[{component}] ", style=COMPONENT_STYLES.get(component, "white"))
        line.append(message)
        self.write(line)

    def toggle(self) -> bool:
        """Flip visibility and return whether the panel is now shown."""
        self.display = not self.display
        self._refresh_subtitle()
        return self.display

    def show(self) -> None:
        if not self.display:
            self.toggle()


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript view.

    Mirrors the controller's append-only transcript: new entries are
    mounted incrementally and a shorter transcript (a clear) rebuilds
    the view.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered_ids: list[str] = []
        self._last_response: str | None = None

    def compose(self):
        yield Static(EMPTY_TRANSCRIPT_HINT, id="empty-hint")

    def sync(self, messages: Sequence[Message]) -> None:
        """Bring the view in line with a transcript snapshot."""
        known = len(self._rendered_ids)
        if len(messages) < known or [m.id for m in messages[:known]] != self._rendered_ids:
            self.query(ClickableMessage).remove()
            self._rendered_ids = []
            known = 0

        for message in messages[known:]:
            self._render_message(message)
            self._rendered_ids.append(message.id)

        self._last_response = next(
            (m.content for m in reversed(messages) if m.role == Role.ASSISTANT),
            None,
        )
        self.query_one("#empty-hint", Static).display = not messages
        self.border_subtitle = f"{len(messages)} messages" if messages else "Conversation history"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        return self._last_response

    def _render_message(self, msg: Message) -> None:
        if msg.role == Role.USER:
            prefix, border_class, icon = "You", "user-message", ">"
        else:
            prefix, border_class, icon = "Assistant", "assistant-message", "<"

        header_text = f"{icon} {prefix} [{msg.timestamp.strftime(TIMESTAMP_FORMAT)}]"
        container = ClickableMessage(content=msg.content, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(Text(header_text), classes="message-header"))
        # Text keeps the content verbatim (no markup parsing, newlines kept)
        container.compose_add_child(Static(Text(msg.content), classes="message-content"))
        self.mount(container)

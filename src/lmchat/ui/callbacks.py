"""Controller integration for the TUI.

Hides the details of how the TUI receives updates from the controller:
state-change events, trace messages and blocking notices all arrive
through this one object. Updates are marshalled onto the app's thread
when they originate elsewhere.
"""

import threading
from typing import TYPE_CHECKING, Any

from ..conversation.controller import ControllerEvent, ConversationController
from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, StatusPanel, TypingIndicator


class TUICallback:
    """Routes controller events into widgets.

    Registered with ``controller.add_listener`` and used as the
    controller's debug callback and notice handler.
    """

    def __init__(
        self,
        controller: ConversationController,
        chat: "ChatHistoryWidget",
        input_bar: "ChatInputBar",
        status: "StatusPanel",
        typing: "TypingIndicator",
        log_panel: "DebugPanel",
        app: "App",
    ) -> None:
        self.controller = controller
        self.chat = chat
        self.input_bar = input_bar
        self.status = status
        self.typing = typing
        self.log_panel = log_panel
        self.app = app

    def _call_thread_safe(self, func: Any, *args: Any, **kwargs: Any) -> None:
        """Call a function in a thread-safe manner for UI updates."""
        if self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(func, *args, **kwargs)
        else:
            func(*args, **kwargs)

    def __call__(self, event: ControllerEvent) -> None:
        self._call_thread_safe(self._apply, event)

    def _apply(self, event: ControllerEvent) -> None:
        if event == ControllerEvent.TRANSCRIPT:
            self.chat.sync(self.controller.transcript)
        elif event == ControllerEvent.BUSY:
            busy = self.controller.busy
            self.input_bar.set_busy(busy)
            self.typing.set_visible(busy)
            self.status.update_status(self.controller.config, busy)
            if busy:
                # send() clears the buffer it accepted; mirror that
                if self.input_bar.text != self.controller.input_text:
                    self.input_bar.text = self.controller.input_text
            else:
                self.input_bar.focus_input()
                self.chat.scroll_end(animate=False)
        elif event == ControllerEvent.CONFIG:
            self.status.update_status(self.controller.config, self.controller.busy)

    def refresh_all(self) -> None:
        """Render the full controller state (used once at mount)."""
        for event in ControllerEvent:
            self._apply(event)

    def handle_debug(self, level: str, component: str, message: str) -> None:
        """Route a trace message to the log panel."""
        self._call_thread_safe(
            self.log_panel.log_entry, component, message, LogLevel.from_string(level)
        )

    def handle_notice(self, text: str) -> None:
        """Show a blocking notice."""
        from .screens import NoticeScreen
        self._call_thread_safe(self.app.push_screen, NoticeScreen(text, title="Settings error"))

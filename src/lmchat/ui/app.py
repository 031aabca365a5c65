"""Main Textual TUI application.

Orchestrates the UI components around a ConversationController. The app
holds no conversation state of its own: it forwards user actions to the
controller and redraws when the controller reports a change.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, TextArea

from ..conversation.controller import ConversationController
from .callbacks import TUICallback
from .config import LogLevel
from .screens import SettingsResult, SettingsScreen
from .styles import APP_CSS
from .themes import SLATE
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    StatusPanel,
    TypingIndicator,
)


class ChatApp(App):
    """Textual chat window for a local language-model server."""

    CSS = APP_CSS
    TITLE = "lmchat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "open_settings", "Settings"),
        Binding("ctrl+t", "test_connection", "Test Connection"),
        Binding("ctrl+k", "clear_chat", "Clear"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(self, controller: ConversationController, log_level: str | None = None) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._callback: TUICallback | None = None

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield StatusPanel(id="status")
        with Vertical(id="body"):
            yield ChatHistoryWidget(id="chat-history")
            yield TypingIndicator(id="typing-indicator")
            yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(SLATE)
        self.theme = "lmchat-slate"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()

        self._callback = TUICallback(
            controller=self._controller,
            chat=self.query_one("#chat-history", ChatHistoryWidget),
            input_bar=self.query_one("#chat-input-bar", ChatInputBar),
            status=self.query_one("#status", StatusPanel),
            typing=self.query_one("#typing-indicator", TypingIndicator),
            log_panel=log_panel,
            app=self,
        )
        self._controller.add_listener(self._callback)
        self._controller.set_debug_callback(self._callback.handle_debug)
        self._controller.set_notice_handler(self._callback.handle_notice)
        self._callback.refresh_all()

        self.sub_title = self._controller.config.base_url
        log_panel.log_entry("TUI", f"Using {self._controller.config.base_url}", LogLevel.INFO)

    def on_unmount(self) -> None:
        if self._callback is not None:
            self._controller.remove_listener(self._callback)
            self._controller.set_debug_callback(None)
            self._controller.set_notice_handler(None)
            self._callback = None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the controller's input buffer in step with the input area."""
        if event.text_area.id == "chat-input":
            self._controller.input_text = event.text_area.text

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Hand the input buffer to the controller."""
        self._controller.input_text = event.value
        self._send()

    @work(group="relay")
    async def _send(self) -> None:
        await self._controller.send()

    @work(group="relay")
    async def _test_connection(self) -> None:
        await self._controller.test_connection()

    def action_test_connection(self) -> None:
        self._test_connection()

    def action_clear_chat(self) -> None:
        self._controller.clear()
        self.notify("Chat cleared", timeout=2)

    def action_open_settings(self) -> None:
        staged = self._controller.open_settings()
        self.push_screen(SettingsScreen(staged), self._on_settings_closed)

    def _on_settings_closed(self, result: SettingsResult | None) -> None:
        if result is None or result.action == "cancel":
            return
        if result.action == "reset":
            self._controller.reset_configuration()
        elif result.action == "save":
            self._controller.stage_configuration(base_url=result.base_url, model=result.model)
            if self._controller.save_configuration():
                self.notify("Settings saved", timeout=2)
        self.sub_title = self._controller.config.base_url

    def action_toggle_debug(self) -> None:
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(controller: ConversationController, log_level: str | None = None) -> None:
    """Run the chat window until the user quits, then tear down the controller.

    Args:
        controller: Conversation controller wired to a bridge and store
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ChatApp(controller, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await controller.close()

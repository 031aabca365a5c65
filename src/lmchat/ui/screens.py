"""Modal screens for the chat window.

This module hides the design decisions about:
- How the staged settings copy is edited (fields, buttons, shortcuts)
- How blocking notices are presented

To change how dialogs look, modify only this file and MODAL_CSS.
"""

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..config.models import DEFAULT_BASE_URL, DEFAULT_MODEL, ChatConfig
from .styles import MODAL_CSS


@dataclass
class SettingsResult:
    """What the user chose in the settings dialog."""

    action: str  # "save", "reset" or "cancel"
    base_url: str = ""
    model: str = ""


class SettingsScreen(ModalScreen[SettingsResult]):
    """Settings dialog editing a staged copy of the configuration.

    Nothing is applied until Save; blank fields fall back to defaults.
    """

    CSS = MODAL_CSS

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, staged: ChatConfig) -> None:
        super().__init__()
        self._staged = staged

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("Settings", classes="dialog-title")
            yield Static("API URL:", classes="field-label")
            yield Input(self._staged.base_url, placeholder=DEFAULT_BASE_URL, id="base-url")
            yield Static(f"If empty: {DEFAULT_BASE_URL}", classes="field-hint")
            yield Static("Model:", classes="field-label")
            yield Input(self._staged.model, placeholder=DEFAULT_MODEL, id="model")
            yield Static(f"If empty: {DEFAULT_MODEL}", classes="field-hint")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Save", id="btn-save", variant="primary")
                yield Button("Reset to defaults", id="btn-reset", variant="warning")
                yield Button("Cancel", id="btn-cancel")

    def on_mount(self) -> None:
        self.query_one("#base-url", Input).focus()

    def _fields(self) -> tuple[str, str]:
        return (
            self.query_one("#base-url", Input).value,
            self.query_one("#model", Input).value,
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "btn-save":
            base_url, model = self._fields()
            self.dismiss(SettingsResult("save", base_url, model))
        elif button_id == "btn-reset":
            self.dismiss(SettingsResult("reset"))
        elif button_id == "btn-cancel":
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in either field saves."""
        base_url, model = self._fields()
        self.dismiss(SettingsResult("save", base_url, model))

    def action_cancel(self) -> None:
        self.dismiss(SettingsResult("cancel"))


class NoticeScreen(ModalScreen[None]):
    """Blocking notice that must be acknowledged."""

    CSS = MODAL_CSS

    BINDINGS = [
        Binding("escape", "acknowledge", "OK", show=False),
        Binding("enter", "acknowledge", "OK", show=False),
    ]

    def __init__(self, text: str, title: str = "Notice") -> None:
        super().__init__()
        self._text = text
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(self._title, classes="dialog-title")
            yield Static(self._text, id="notice-text", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="btn-ok", variant="error")

    def on_mount(self) -> None:
        self.query_one("#btn-ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.action_acknowledge()

    def action_acknowledge(self) -> None:
        self.dismiss(None)

"""Terminal UI module for lmchat.

Provides a Textual-based chat window over a ConversationController.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (transcript view, input bar, status, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- screens.py: Modal dialogs (settings, blocking notices)
- callbacks.py: Controller integration (how the TUI receives updates)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_textual_tui
from .callbacks import TUICallback
from .config import LogLevel
from .screens import NoticeScreen, SettingsResult, SettingsScreen
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, StatusPanel, TypingIndicator

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "NoticeScreen",
    "SettingsResult",
    "SettingsScreen",
    "StatusPanel",
    "TUICallback",
    "TypingIndicator",
    "run_textual_tui",
]

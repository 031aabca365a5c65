"""CSS styles for the chat window.

Hides layout and styling decisions from the application logic.
Styling has no behavioral consequence; everything visible here can be
changed without touching the controller.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - single column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Status Bar - connection details + busy state
   ============================================ */
#status {
    height: 1;
    padding: 0 2;
    background: $surface;
    color: $foreground;

    &.busy {
        background: $warning 20%;
    }
}

/* ============================================
   Body - chat history + optional log panel
   ============================================ */
#body {
    height: 1fr;
}

#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#empty-hint {
    width: 100%;
    margin-top: 2;
    text-align: center;
    color: $text-muted;
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Typing indicator while a request is pending
   ============================================ */
#typing-indicator {
    height: 1;
    padding: 0 2;
    color: $text-muted;
    display: none;

    &.visible {
        display: block;
    }
}

/* ============================================
   Input Bar
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    background: $success;
    color: $background;
    text-style: bold;
}
"""

MODAL_CSS = """
SettingsScreen, NoticeScreen {
    align: center middle;
    background: $background 70%;
}

.dialog {
    width: 64;
    height: auto;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}

.dialog-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding-bottom: 1;
    border-bottom: solid $border;
    margin-bottom: 1;
}

.field-label {
    margin-top: 1;
    text-style: bold;
}

.field-hint {
    color: $text-muted;
}

.dialog-buttons {
    width: 100%;
    height: 3;
    align: center middle;
    margin-top: 1;

    & Button {
        margin: 0 1;
    }
}

#notice-text {
    width: 100%;
    padding: 1 2;
    background: $error 15%;
    border: round $error;
}
"""

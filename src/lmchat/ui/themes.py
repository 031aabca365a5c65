"""Theme definitions for the chat window.

SLATE is registered and selected in ChatApp.on_mount.
"""

from textual.theme import Theme

# Muted slate palette
SLATE = Theme(
    name="lmchat-slate",
    primary="#60a5fa",      # Blue - user actions, focus
    secondary="#a78bfa",    # Violet - assistant replies
    accent="#fbbf24",       # Amber - dialogs
    foreground="#e5e7eb",
    background="#111827",
    success="#34d399",
    warning="#f59e0b",
    error="#f87171",
    surface="#1f2937",
    panel="#161e2b",
    dark=True,
    variables={
        "border": "#4b5563",
        "border-blurred": "#374151",
        "text-muted": "#9ca3af",
        "scrollbar": "#374151",
        "scrollbar-hover": "#4b5563",
        "scrollbar-active": "#60a5fa",
        "footer-key-foreground": "#fbbf24",
        "input-selection-background": "#60a5fa 30%",
    },
)

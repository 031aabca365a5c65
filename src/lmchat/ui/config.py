"""UI configuration constants.

Trace levels, colors for the log panel, and the small fixed values the
widgets share.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel threshold. A line is shown when its level >= the threshold."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Parse a trace level name ("warn" is accepted). Unknown names give DEBUG."""
        key = level_str.strip().upper()
        if key == "WARN":
            key = "WARNING"
        return cls.__members__.get(key, cls.DEBUG)


LEVEL_STYLES = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}

# Keyed by the component name passed to debug callbacks
COMPONENT_STYLES = {
    "TUI": "cyan",
    "Chat": "green",
    "Bridge": "blue",
    "Relay": "magenta",
}

INPUT_HISTORY_MAX_SIZE = 100

TIMESTAMP_FORMAT = "%H:%M:%S"

EMPTY_TRANSCRIPT_HINT = "Start a conversation!"

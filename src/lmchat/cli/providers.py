"""Provider factory functions for CLI.

Centralizes creation of the config store, bridge and controller from
environment variables. Hides configuration details from command
implementations.
"""

import os

from rich.console import Console

from ..bridge import Bridge, create_bridge
from ..config import ConfigStore, create_config_store
from ..config.json_file import DEFAULT_CONFIG_PATH
from ..conversation import ConversationController
from ..conversation.controller import DebugCallback

# Default console for output
_console = Console()


def get_store() -> ConfigStore:
    """Create the configuration store from environment variables.

    Environment variables:
        LMCHAT_CONFIG_PATH: Settings file (default: ~/.config/lmchat/settings.json)
    """
    path = os.getenv("LMCHAT_CONFIG_PATH") or DEFAULT_CONFIG_PATH
    return create_config_store("file", path=path)


def get_bridge(console: Console | None = None) -> Bridge:
    """Create the relay bridge from environment variables.

    Environment variables:
        LMCHAT_BRIDGE: 'process' (default, relay in a worker process)
            or 'inprocess'

    Raises:
        SystemExit: If LMCHAT_BRIDGE names an unknown bridge
    """
    import typer

    con = console or _console
    kind = os.getenv("LMCHAT_BRIDGE", "process")
    try:
        return create_bridge(kind)
    except ValueError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def get_controller(console: Console | None = None, verbose: bool = False) -> ConversationController:
    """Wire a controller to the environment's store and bridge.

    Args:
        console: Optional Rich console for output
        verbose: Print trace messages to the console

    Returns:
        ConversationController ready to use
    """
    con = console or _console
    store = get_store()
    bridge = get_bridge(con)

    def _print_notice(text: str) -> None:
        con.print(text, style="bold red", markup=False)

    debug_callback: DebugCallback | None = None
    if verbose:
        def debug_callback(level: str, component: str, message: str) -> None:
            """Route trace messages to the console."""
            con.print(f"{level.upper():<7} [{component}] {message}", style="dim", markup=False)

    controller = ConversationController(
        bridge,
        store,
        notice_handler=_print_notice,
        debug_callback=debug_callback,
    )
    if debug_callback is not None:
        bridge.set_debug_callback(debug_callback)
    return controller


def get_log_level() -> str | None:
    """Log panel level from the environment.

    Environment variables:
        LMCHAT_LOG_LEVEL: debug, info, warning or error (unset hides the panel)
    """
    return os.getenv("LMCHAT_LOG_LEVEL") or None

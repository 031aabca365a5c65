"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..conversation import ConversationController, Role
from .providers import get_controller, get_log_level

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="lmchat",
    help="Chat with a locally running language-model server",
    no_args_is_help=True,
    add_completion=True,
)
config_app = typer.Typer(help="Show or change the saved connection settings", no_args_is_help=True)
app.add_typer(config_app, name="config")

# Console for rich output
console = Console()


def _print_last_reply(controller: ConversationController, failed: bool = False) -> None:
    transcript = controller.transcript
    if not transcript or transcript[-1].role != Role.ASSISTANT:
        return
    if failed:
        console.print(Panel(transcript[-1].content, title="Error", border_style="red", style="red"))
    else:
        console.print(Panel(transcript[-1].content, title="Assistant", border_style="magenta"))


def _print_config(controller: ConversationController) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="dim")
    table.add_column("Value", style="green")
    table.add_row("API URL", controller.config.base_url)
    table.add_row("Model", controller.config.model)
    table.add_row("Chat endpoint", controller.config.chat_completions_url)
    table.add_row("Models endpoint", controller.config.models_url)
    console.print(table)


@app.command()
def tui(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
):
    """Open the chat window."""
    from ..ui import run_textual_tui

    controller = get_controller(console)
    asyncio.run(run_textual_tui(controller, log_level=log_level or get_log_level()))


@app.command()
def send(
    text: str = typer.Argument(..., help="Message to send"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show relay trace messages"
    ),
):
    """Send one message and print the reply."""
    async def _send():
        controller = get_controller(console, verbose=verbose)
        try:
            if not text.strip():
                console.print("[yellow]Nothing to send[/yellow]")
                return
            console.print(f"[dim]Sending to {controller.config.chat_completions_url}[/dim]")
            ok = await controller.send(text)
            _print_last_reply(controller, failed=not ok)
            if not ok:
                raise typer.Exit(code=1)
        finally:
            await controller.close()

    asyncio.run(_send())


@app.command("test-connection")
def test_connection(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show relay trace messages"
    ),
):
    """Check that the server answers on its models endpoint."""
    async def _test():
        controller = get_controller(console, verbose=verbose)
        try:
            ok = await controller.test_connection()
            _print_last_reply(controller, failed=not ok)
            if not ok:
                raise typer.Exit(code=1)
        finally:
            await controller.close()

    asyncio.run(_test())


@config_app.command("show")
def config_show():
    """Print the active connection settings."""
    controller = get_controller(console)
    try:
        _print_config(controller)
    finally:
        asyncio.run(controller.close())


@config_app.command("set")
def config_set(
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Server root URL (blank restores the default)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (blank restores the default)"
    ),
):
    """Save new connection settings."""
    controller = get_controller(console)
    try:
        controller.open_settings()
        if base_url is not None:
            controller.stage_configuration(base_url=base_url)
        if model is not None:
            controller.stage_configuration(model=model)

        if not controller.save_configuration():
            raise typer.Exit(code=1)
        _print_last_reply(controller)
    finally:
        asyncio.run(controller.close())


@config_app.command("reset")
def config_reset():
    """Restore the default connection settings."""
    controller = get_controller(console)
    try:
        controller.reset_configuration()
        _print_last_reply(controller)
    finally:
        asyncio.run(controller.close())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""CLI entry point for sinkpick.

Provides the `sinkpick` command: without a subcommand it launches the
picker, `sinkpick list` prints the parsed sinks.
"""

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sinkpick import __version__
from sinkpick.app import SinkPickApp
from sinkpick.config import PickerConfig
from sinkpick.logging_config import get_logger, setup_logging
from sinkpick.models import SinkRecord
from sinkpick.services.parser import SinkParseError, retrieve_sinks
from sinkpick.services.wpctl import CommandExecutionError, WpctlClient

app = typer.Typer(
    name="sinkpick",
    help="Pick the default audio sink (PipeWire / WirePlumber)",
    no_args_is_help=False,
)
console = Console()
logger = get_logger(__name__)


def _load_config(
    config_path: Optional[Path],
    rows: Optional[int],
    width: Optional[int],
    wpctl: Optional[str],
) -> PickerConfig:
    """Build the picker config from an optional file and CLI overrides.

    Exits with code 1 if the config can't be loaded.
    """
    try:
        config = PickerConfig.load(config_path) if config_path else PickerConfig()
        return config.override(visible_row_count=rows, item_width=width, wpctl_path=wpctl)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _load_sinks(client: WpctlClient) -> tuple[SinkRecord, ...]:
    """Query and parse the sinks, exiting with code 1 on failure."""
    try:
        return retrieve_sinks(client)
    except (CommandExecutionError, SinkParseError) as e:
        logger.error(f"Could not list sinks: {e}")
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    rows: Optional[int] = typer.Option(
        None,
        "--rows",
        "-r",
        help="Number of sinks shown per page",
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width",
        "-w",
        help="Maximum width of a row (cut further on narrow terminals)",
    ),
    wpctl: Optional[str] = typer.Option(
        None,
        "--wpctl",
        help="Name or path of the wpctl binary",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML file with picker and theme settings",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append a session log to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """Pick the default audio sink."""
    if version:
        console.print(f"sinkpick version {__version__}")
        raise typer.Exit()

    config = _load_config(config_path, rows, width, wpctl)
    setup_logging(log_file)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        run_picker(config)


def run_picker(config: PickerConfig) -> None:
    """Launch the picker and report its outcome.

    Args:
        config: Picker configuration
    """
    client = WpctlClient(config.wpctl_path)
    sinks = _load_sinks(client)

    try:
        app_instance = SinkPickApp(sinks, client, config)
        logger.info("Launching TUI application")
        outcome = app_instance.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user (Ctrl+C)")
        console.print("Skipping for now...", style=config.theme.message)
        return
    except Exception as e:
        logger.exception(f"Application error: {e}")
        console.print(f"[red]Error running program: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    error = app_instance.error
    if isinstance(error, CommandExecutionError):
        console.print(f"[red]{escape(str(error))}[/red]")
        raise typer.Exit(1)
    if error is not None:
        console.print(f"[red]Error running program: {escape(str(error))}[/red]")
        raise typer.Exit(1)

    if app_instance.return_code:
        logger.error(f"Application exited with code {app_instance.return_code}")
        console.print(
            f"[red]Error running program: exited with code {app_instance.return_code}[/red]"
        )
        raise typer.Exit(app_instance.return_code)

    logger.info(f"Application exited normally: {outcome}")
    if outcome:
        console.print(outcome, style=config.theme.message, markup=False)


@app.command("list")
def list_sinks(ctx: typer.Context) -> None:
    """Print the sinks reported by wpctl."""
    config: PickerConfig = ctx.obj
    sinks = _load_sinks(WpctlClient(config.wpctl_path))

    if not sinks:
        console.print("[yellow]No audio sinks found.[/yellow]")
        return

    table = Table(title="Audio Sinks", box=box.SIMPLE_HEAVY)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Default", style="green", justify="center")
    table.add_column("Volume", style="dim")

    for sink in sinks:
        table.add_row(
            sink.identifier or "-",
            escape(sink.name),
            "*" if sink.is_default else "",
            sink.volume or "-",
        )

    console.print(table)


def cli_entry() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli_entry()

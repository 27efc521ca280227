"""Main CLI entry point for scripter."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from scripter import __version__
from scripter.cli.commands import batch_command, convert_command
from scripter.cli.utils.error_handler import handle_cli_error
from scripter.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scripter",
    help="Convert PDF screenplays to Fountain format",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="convert")(convert_command)
app.command(name="batch")(batch_command)


@app.command()
def version() -> None:
    """Show scripter version."""
    console.print(f"scripter v{__version__}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            envvar="SCRIPTER_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, Any] = {}
    if debug:
        overrides.update(debug=True, log_level="DEBUG")
    elif verbose:
        overrides["log_level"] = "INFO"

    if config is None and not overrides:
        return

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        handle_cli_error(e, verbose=debug)

    set_settings(settings)
    configure_logging(settings)
    logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()

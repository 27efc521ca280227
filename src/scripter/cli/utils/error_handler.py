"""Report conversion and command errors on the console."""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from scripter.api.converter import ConversionResult
from scripter.config import get_logger
from scripter.exceptions import FileSystemError, PDFReadError, ScripterError

logger = get_logger(__name__)
console = Console(stderr=True)


def _print_hint(hint: str | None) -> None:
    if hint:
        console.print(f"[yellow]→ {hint}[/yellow]")


def report_conversion_failure(
    result: ConversionResult, input_path: Path, exit_code: int = 1
) -> NoReturn:
    """Print the errors of a failed conversion and exit.

    Args:
        result: The failed conversion result
        input_path: PDF that was being converted
        exit_code: Exit code to use when exiting
    """
    console.print(f"[red]✗ Conversion failed: {input_path}[/red]")
    console.print("[red]Errors:[/red]")
    for error in result.errors:
        console.print(f"[red]  - {error}[/red]")
    _print_hint(result.hint)

    logger.error(
        "Conversion failed",
        input=str(input_path),
        errors=result.errors,
        exit_code=exit_code,
    )
    raise typer.Exit(exit_code)


def handle_cli_error(
    error: Exception, verbose: bool = False, exit_code: int = 1
) -> NoReturn:
    """Report an error raised by a CLI command and exit.

    Args:
        error: The exception that was raised
        verbose: Whether to show details and tracebacks
        exit_code: Exit code to use when exiting
    """
    if isinstance(error, PDFReadError):
        details = error.details or {}
        console.print(f"[red]✗ Could not read PDF: {error.message}[/red]")
        _print_hint(error.hint)
        if verbose and "parser_error" in details:
            console.print(f"  [dim]pdfminer:[/dim] {details['parser_error']}")
        logger.error(
            "PDF could not be read",
            error_type=type(error).__name__,
            file=details.get("file"),
            exit_code=exit_code,
        )

    elif isinstance(error, ScripterError):
        prefix = ""
        if isinstance(error, FileSystemError):
            prefix = "Could not write output: "
        console.print(f"[red]✗ {prefix}{error.message}[/red]")
        _print_hint(error.hint)

        if verbose and error.details:
            console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                console.print(f"  [dim]{key}:[/dim] {value}")

        logger.error(
            "Scripter error occurred",
            error_type=type(error).__name__,
            message=error.message,
            details=error.details,
            exit_code=exit_code,
        )

    elif isinstance(error, FileNotFoundError):
        console.print(f"[red]✗ File not found: {error}[/red]")
        _print_hint("Check that the file path is correct")
        logger.error(
            "File not found",
            filename=getattr(error, "filename", None),
            exit_code=exit_code,
        )

    else:
        console.print(f"[red]✗ Unexpected error: {error!s}[/red]")

        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(traceback.format_exc())
        else:
            console.print("[dim]Run with --debug for full error details[/dim]")

        logger.error(
            "Unexpected error occurred",
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)

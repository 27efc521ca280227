"""CLI command for scripter batch."""

from __future__ import annotations

import asyncio
import glob
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from scripter.api.converter import ConversionResult, convert_pdf_to_fountain
from scripter.cli.commands.convert import (
    NoCharacterDetectionOption,
    NoMetadataOption,
    NoSceneDetectionOption,
    StrictOption,
    conversion_overrides,
)
from scripter.cli.utils.error_handler import handle_cli_error
from scripter.config import get_logger, get_settings_for_cli
from scripter.exceptions import ScripterError
from scripter.fountain.generator import generate_fountain
from scripter.parser.models import ConversionOptions
from scripter.utils.file_writer import generate_output_path, write_fountain_file

logger = get_logger(__name__)
console = Console()


@dataclass
class BatchFileResult:
    """Outcome of converting one file in a batch."""

    path: Path
    success: bool
    output_path: Path | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class BatchResult:
    """Aggregated outcome of a batch conversion."""

    files: list[BatchFileResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        """Number of files converted."""
        return sum(1 for f in self.files if f.success)

    @property
    def failed(self) -> int:
        """Number of files that could not be converted."""
        return sum(1 for f in self.files if not f.success)


def find_pdf_files(pattern: str) -> list[Path]:
    """Expand a glob pattern into a sorted list of absolute file paths."""
    matches = glob.glob(pattern, recursive=True)
    return sorted(Path(match).resolve() for match in matches if Path(match).is_file())


def convert_file(
    path: Path, options: ConversionOptions, output_dir: Path | None
) -> BatchFileResult:
    """Convert and write a single file, capturing any failure."""
    try:
        result: ConversionResult = asyncio.run(convert_pdf_to_fountain(path, options))
        if not result.success or result.document is None:
            return BatchFileResult(
                path=path,
                success=False,
                error="; ".join(result.errors) or "Unknown error",
            )

        output_path = generate_output_path(path, output_dir)
        write_fountain_file(output_path, generate_fountain(result.document))
    except ScripterError as e:
        return BatchFileResult(path=path, success=False, error=e.message)

    return BatchFileResult(
        path=path,
        success=True,
        output_path=output_path,
        warnings=result.warnings,
    )


def _display_summary(results: BatchResult, total: int) -> None:
    console.print("\n[bold]Batch Conversion Summary:[/bold]")
    console.print(f"[green]  ✓ Succeeded: {results.succeeded}[/green]")
    if results.failed:
        console.print(f"[red]  ✗ Failed: {results.failed}[/red]")
    console.print(f"[cyan]  Total: {total}[/cyan]")

    if results.failed:
        console.print("\n[yellow]Failed files:[/yellow]")
        for file_result in results.files:
            if not file_result.success:
                console.print(f"[yellow]  - {file_result.path}[/yellow]")
                if file_result.error:
                    console.print(f"[yellow]    {file_result.error}[/yellow]")


def batch_command(
    pattern: Annotated[
        str,
        typer.Argument(help="Glob pattern matching PDF files (e.g. 'scripts/*.pdf')"),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-d", help="Output directory"),
    ] = None,
    continue_on_error: Annotated[
        bool,
        typer.Option(
            "--continue-on-error",
            help="Continue converting remaining files when one fails",
        ),
    ] = False,
    no_scene_detection: NoSceneDetectionOption = False,
    no_character_detection: NoCharacterDetectionOption = False,
    strict: StrictOption = False,
    no_metadata: NoMetadataOption = False,
) -> None:
    """Convert every PDF screenplay matching a glob pattern."""
    verbose = False
    try:
        overrides = conversion_overrides(
            no_scene_detection, no_character_detection, strict, no_metadata
        )
        if continue_on_error:
            overrides["continue_on_error"] = True
        settings = get_settings_for_cli(cli_overrides=overrides)
        verbose = settings.debug
        options = settings.conversion_options()
        target_dir = output_dir or settings.output_dir

        files = find_pdf_files(pattern)
        if not files:
            console.print(
                f"[red]✗ No PDF files found matching pattern: {pattern}[/red]"
            )
            raise typer.Exit(1)

        console.print(f"Found [cyan]{len(files)}[/cyan] PDF files to convert\n")

        results = BatchResult()
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Converting...", total=len(files))

            for number, path in enumerate(files, start=1):
                progress.update(
                    task, description=f"Converting [{number}/{len(files)}] {path.name}"
                )
                file_result = convert_file(path, options, target_dir)
                results.files.append(file_result)
                progress.advance(task)

                if file_result.success:
                    progress.console.print(
                        f"[green]✓ {path}[/green] → "
                        f"[cyan]{file_result.output_path}[/cyan]"
                    )
                    if file_result.warnings:
                        progress.console.print(
                            f"[yellow]  ⚠ Warnings for {path}:[/yellow]"
                        )
                        for warning in file_result.warnings:
                            progress.console.print(f"[yellow]    - {warning}[/yellow]")
                    continue

                progress.console.print(f"[red]✗ {path}: {file_result.error}[/red]")
                logger.warning(
                    "Batch item failed", path=str(path), error=file_result.error
                )
                if not settings.continue_on_error:
                    break

        _display_summary(results, len(files))
        logger.info(
            "Batch conversion finished",
            succeeded=results.succeeded,
            failed=results.failed,
            total=len(files),
        )

        if results.failed:
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, verbose=verbose)

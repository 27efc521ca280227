"""CLI command for scripter convert."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from scripter.api.converter import ConversionResult, convert_pdf_to_fountain
from scripter.cli.utils.error_handler import (
    handle_cli_error,
    report_conversion_failure,
)
from scripter.config import get_logger, get_settings_for_cli
from scripter.fountain.generator import generate_fountain
from scripter.utils.file_writer import generate_output_path, write_fountain_file

logger = get_logger(__name__)
console = Console()

NoSceneDetectionOption = Annotated[
    bool,
    typer.Option(
        "--no-scene-detection",
        help="Disable automatic scene heading detection",
    ),
]
NoCharacterDetectionOption = Annotated[
    bool,
    typer.Option(
        "--no-character-detection",
        help="Disable automatic character name detection",
    ),
]
StrictOption = Annotated[
    bool,
    typer.Option("--strict", help="Enable strict parsing mode"),
]
NoMetadataOption = Annotated[
    bool,
    typer.Option("--no-metadata", help="Exclude conversion metadata"),
]


def conversion_overrides(
    no_scene_detection: bool,
    no_character_detection: bool,
    strict: bool,
    no_metadata: bool,
) -> dict[str, Any]:
    """Map CLI flags to settings overrides.

    Flags that were not given map to None so configured values are kept.
    """
    return {
        "detect_scene_headings": False if no_scene_detection else None,
        "detect_character_names": False if no_character_detection else None,
        "strict_mode": True if strict else None,
        "include_metadata": False if no_metadata else None,
    }


def print_warnings(warnings: list[str], indent: str = "  ") -> None:
    """Print conversion warnings."""
    for warning in warnings:
        console.print(f"[yellow]{indent}⚠ {warning}[/yellow]")


def _display_result(result: ConversionResult, output_path: Path) -> None:
    console.print(f"[green]✓ Converted successfully: {output_path}[/green]")

    if result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        print_warnings(result.warnings)

    document = result.document
    if document is not None and document.metadata is not None:
        console.print("\n[blue]Conversion Info:[/blue]")
        if document.metadata.page_count:
            console.print(f"[blue]  Pages: {document.metadata.page_count}[/blue]")
        console.print(f"[blue]  Elements: {len(document.elements)}[/blue]")
        console.print(f"[blue]  Converted: {document.metadata.converted_at}[/blue]")


def convert_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Path to input PDF file", metavar="INPUT"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: same name with .fountain extension)",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-d", help="Output directory"),
    ] = None,
    no_scene_detection: NoSceneDetectionOption = False,
    no_character_detection: NoCharacterDetectionOption = False,
    strict: StrictOption = False,
    no_metadata: NoMetadataOption = False,
) -> None:
    """Convert a PDF screenplay to Fountain format."""
    verbose = False
    try:
        settings = get_settings_for_cli(
            cli_overrides=conversion_overrides(
                no_scene_detection, no_character_detection, strict, no_metadata
            )
        )
        verbose = settings.debug
        options = settings.conversion_options()

        with console.status("Converting to Fountain format..."):
            result = asyncio.run(convert_pdf_to_fountain(input_path, options))

        if not result.success or result.document is None:
            report_conversion_failure(result, input_path)

        fountain_text = generate_fountain(result.document)
        output_path = output or generate_output_path(
            input_path, output_dir or settings.output_dir
        )
        write_fountain_file(output_path, fountain_text)

        logger.info(
            "Converted PDF",
            input=str(input_path),
            output=str(output_path),
            elements=len(result.document.elements),
        )
        _display_result(result, output_path)

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, verbose=verbose)

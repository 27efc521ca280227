"""Tests for CLI error reporting."""

from pathlib import Path

import pytest
import typer

from scripter.api.converter import ConversionResult
from scripter.cli.utils.error_handler import (
    handle_cli_error,
    report_conversion_failure,
)
from scripter.exceptions import (
    FileSystemError,
    PDFCorruptedError,
    PDFPasswordError,
)


def _stderr(capsys):
    return " ".join(capsys.readouterr().err.split())


class TestHandleCliError:
    """Test reporting of exceptions raised by commands."""

    def test_password_error_shows_hint(self, capsys):
        """Test that encrypted PDFs are reported with their hint."""
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(PDFPasswordError("locked.pdf"))

        assert exc_info.value.exit_code == 1
        output = _stderr(capsys)
        assert "Could not read PDF" in output
        assert "Remove the password protection" in output

    def test_corrupted_reason_only_when_verbose(self, capsys):
        """Test that the pdfminer reason is shown with verbose output."""
        error = PDFCorruptedError("bad.pdf", reason="No /Root object")

        with pytest.raises(typer.Exit):
            handle_cli_error(error)
        assert "No /Root object" not in _stderr(capsys)

        with pytest.raises(typer.Exit):
            handle_cli_error(error, verbose=True)
        assert "No /Root object" in _stderr(capsys)

    def test_file_system_error_prefix(self, capsys):
        """Test that output write failures are labelled."""
        with pytest.raises(typer.Exit):
            handle_cli_error(FileSystemError(message="Permission denied"))

        assert "Could not write output: Permission denied" in _stderr(capsys)

    def test_unexpected_error_exit_code(self, capsys):
        """Test custom exit codes for unexpected errors."""
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(RuntimeError("boom"), exit_code=2)

        assert exc_info.value.exit_code == 2
        assert "Unexpected error: boom" in _stderr(capsys)


class TestReportConversionFailure:
    """Test reporting of failed conversion results."""

    def test_errors_and_hint_printed(self, capsys):
        """Test that every error and the hint are printed."""
        result = ConversionResult.failure(
            "PDF file has no pages", hint="Try another export"
        )

        with pytest.raises(typer.Exit) as exc_info:
            report_conversion_failure(result, Path("empty.pdf"))

        assert exc_info.value.exit_code == 1
        output = _stderr(capsys)
        assert "Conversion failed: empty.pdf" in output
        assert "PDF file has no pages" in output
        assert "Try another export" in output

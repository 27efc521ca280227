"""Tests for the scripter CLI commands."""

from pathlib import Path

import pytest

import scripter.api.converter as converter_module
import scripter.cli.commands.convert as convert_module
from scripter import __version__
from scripter.api.converter import ConversionResult
from scripter.cli.main import app
from scripter.exceptions import PDFCorruptedError, PDFNotFoundError
from tests.factories import PDFContentFactory


@pytest.fixture
def fake_reader(monkeypatch):
    """Replace PDF extraction with the sample screenplay."""
    calls = []

    def read(path):
        calls.append(Path(path))
        return PDFContentFactory.screenplay()

    monkeypatch.setattr(converter_module, "read_pdf", read)
    return calls


@pytest.fixture
def captured_options(monkeypatch):
    """Record the options passed to the converter by the convert command."""
    captured = []

    async def fake_convert(path, options=None):
        captured.append(options)
        return ConversionResult(success=False, errors=["stopped"])

    monkeypatch.setattr(convert_module, "convert_pdf_to_fountain", fake_convert)
    return captured


class TestVersion:
    """Test the version command."""

    def test_version(self, clean_runner):
        """Test that the version is printed."""
        result = clean_runner.invoke(app, ["version"])
        result.assert_success().assert_contains(f"scripter v{__version__}")


class TestConvertCommand:
    """Test scripter convert."""

    def test_convert_default_output(self, clean_runner, fake_reader, tmp_path):
        """Test conversion next to the working directory."""
        result = clean_runner.invoke(app, ["convert", "script.pdf"])

        result.assert_success().assert_contains(
            "Converted successfully", "Conversion Info", "Elements: 8"
        )
        output = (tmp_path / "script.fountain").read_text(encoding="utf-8")
        assert output.startswith("Title: The Coffee Shop\nAuthor: Jane Doe\n\n")
        assert "INT. COFFEE SHOP - DAY" in output
        assert "CUSTOMER (O.S.)\n(smiling)\nThanks." in output
        assert "[[Converted from PDF: PDF Screenplay" in output

    def test_convert_explicit_output(self, clean_runner, fake_reader, tmp_path):
        """Test the --output option."""
        target = tmp_path / "out" / "custom.fountain"

        result = clean_runner.invoke(app, ["convert", "script.pdf", "-o", str(target)])

        result.assert_success()
        assert target.exists()

    def test_convert_output_dir(self, clean_runner, fake_reader, tmp_path):
        """Test the --output-dir option."""
        result = clean_runner.invoke(
            app, ["convert", "drafts/script.pdf", "--output-dir", "converted"]
        )

        result.assert_success()
        assert (tmp_path / "converted" / "script.fountain").exists()

    def test_convert_no_metadata(self, clean_runner, fake_reader, tmp_path):
        """Test that --no-metadata drops the trailing note."""
        result = clean_runner.invoke(app, ["convert", "script.pdf", "--no-metadata"])

        result.assert_success()
        output = (tmp_path / "script.fountain").read_text(encoding="utf-8")
        assert "[[Converted from PDF" not in output
        assert "Conversion Info" not in result.output

    def test_convert_flags_reach_options(self, clean_runner, captured_options):
        """Test that detection flags are mapped onto conversion options."""
        result = clean_runner.invoke(
            app,
            [
                "convert",
                "script.pdf",
                "--no-scene-detection",
                "--no-character-detection",
                "--strict",
            ],
        )

        result.assert_failure(exit_code=1)
        options = captured_options[0]
        assert options.detect_scene_headings is False
        assert options.detect_character_names is False
        assert options.strict_mode is True
        assert options.include_metadata is True

    def test_convert_failure(self, clean_runner, monkeypatch):
        """Test that conversion errors are reported with exit code 1."""

        def missing(path):
            raise PDFNotFoundError(path)

        monkeypatch.setattr(converter_module, "read_pdf", missing)

        result = clean_runner.invoke(app, ["convert", "missing.pdf"])

        result.assert_failure(exit_code=1).assert_contains(
            "Conversion failed",
            "PDF file not found: missing.pdf",
            "Check that the file path is correct",
        )

    def test_convert_warnings_are_shown(self, clean_runner, monkeypatch):
        """Test that heuristic warnings are printed."""
        monkeypatch.setattr(
            converter_module,
            "read_pdf",
            lambda path: PDFContentFactory.create(["Just some prose."]),
        )

        result = clean_runner.invoke(app, ["convert", "notes.pdf"])

        result.assert_success().assert_contains("Warnings:", "No dialogue detected.")


class TestBatchCommand:
    """Test scripter batch."""

    @pytest.fixture
    def pdfs(self, tmp_path):
        """Create two input files."""
        paths = []
        for name in ("a.pdf", "b.pdf"):
            path = tmp_path / name
            path.write_bytes(b"%PDF-1.4\n")
            paths.append(path)
        return paths

    def test_batch_converts_all(self, clean_runner, fake_reader, pdfs, tmp_path):
        """Test a successful batch into an output directory."""
        result = clean_runner.invoke(app, ["batch", "*.pdf", "-d", "out"])

        result.assert_success().assert_contains(
            "Found 2 PDF files", "Succeeded: 2", "Total: 2"
        )
        assert (tmp_path / "out" / "a.fountain").exists()
        assert (tmp_path / "out" / "b.fountain").exists()
        assert [path.name for path in fake_reader] == ["a.pdf", "b.pdf"]

    def test_batch_no_matches(self, clean_runner):
        """Test that an empty match is an error."""
        result = clean_runner.invoke(app, ["batch", "*.pdf"])

        result.assert_failure(exit_code=1).assert_contains("No PDF files found")

    def test_batch_stops_on_first_failure(self, clean_runner, monkeypatch, pdfs):
        """Test that the batch aborts on failure by default."""
        calls = []

        def read(path):
            calls.append(Path(path).name)
            raise PDFCorruptedError(path)

        monkeypatch.setattr(converter_module, "read_pdf", read)

        result = clean_runner.invoke(app, ["batch", "*.pdf"])

        result.assert_failure(exit_code=1).assert_contains("Failed: 1")
        assert calls == ["a.pdf"]

    def test_batch_continue_on_error(
        self, clean_runner, monkeypatch, pdfs, tmp_path
    ):
        """Test that --continue-on-error converts the remaining files."""

        def read(path):
            if Path(path).name == "a.pdf":
                raise PDFCorruptedError(path)
            return PDFContentFactory.screenplay()

        monkeypatch.setattr(converter_module, "read_pdf", read)

        result = clean_runner.invoke(app, ["batch", "*.pdf", "--continue-on-error"])

        result.assert_failure(exit_code=1).assert_contains(
            "Succeeded: 1", "Failed: 1", "Invalid or corrupted PDF file"
        )
        assert (tmp_path / "b.fountain").exists()
        assert not (tmp_path / "a.fountain").exists()


class TestGlobalOptions:
    """Test options handled by the main callback."""

    def test_config_file_sets_defaults(self, clean_runner, captured_options, tmp_path):
        """Test that --config values feed the conversion options."""
        config = tmp_path / "scripter.yaml"
        config.write_text("strict_mode: true\ninclude_metadata: false\n")

        clean_runner.invoke(app, ["--config", str(config), "convert", "script.pdf"])

        options = captured_options[0]
        assert options.strict_mode is True
        assert options.include_metadata is False

    def test_missing_config_file(self, clean_runner, tmp_path):
        """Test that a missing config file is an error."""
        result = clean_runner.invoke(
            app, ["--config", str(tmp_path / "nope.yaml"), "version"]
        )

        result.assert_failure(exit_code=1).assert_contains("File not found")

    def test_invalid_config_key(self, clean_runner, tmp_path):
        """Test that CLI-style keys in config files are rejected with a hint."""
        config = tmp_path / "scripter.yaml"
        config.write_text("strict: true\n")

        result = clean_runner.invoke(app, ["--config", str(config), "version"])

        result.assert_failure(exit_code=1).assert_contains(
            "Invalid configuration key 'strict'", "Use 'strict_mode'"
        )

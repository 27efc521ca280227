"""Tests for PDF text extraction."""

import pytest
from pdfminer.pdfdocument import PDFPasswordIncorrect
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

import scripter.pdf.reader as reader_module
from scripter.exceptions import (
    PDFCorruptedError,
    PDFNotFoundError,
    PDFPasswordError,
    PDFReadError,
)
from scripter.pdf.reader import extract_metadata, read_pdf, split_lines


class FakePage:
    """Stand-in for a pdfplumber page."""

    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePDF:
    """Stand-in for an open pdfplumber document."""

    def __init__(self, texts, metadata=None):
        self.pages = [FakePage(text) for text in texts]
        self.metadata = metadata or {}

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


@pytest.fixture
def pdf_file(tmp_path):
    """Create a placeholder file for the reader's existence check."""
    path = tmp_path / "script.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


def _fake_open(monkeypatch, fake=None, error=None):
    def open_pdf(path):
        if error is not None:
            raise error
        return fake

    monkeypatch.setattr(reader_module.pdfplumber, "open", open_pdf)


class TestReadPDF:
    """Test read_pdf with a faked pdfplumber."""

    def test_missing_file(self, tmp_path):
        """Test that a missing path raises PDFNotFoundError."""
        missing = tmp_path / "missing.pdf"
        with pytest.raises(PDFNotFoundError) as exc_info:
            read_pdf(missing)
        assert exc_info.value.message == f"PDF file not found: {missing}"

    def test_pages_and_lines(self, monkeypatch, pdf_file):
        """Test page numbering, blank page skipping and line splitting."""
        texts = ["INT. ROOM - DAY   \n  Action.  ", "   ", "Page three text"]
        _fake_open(monkeypatch, FakePDF(texts))

        content = read_pdf(pdf_file)

        assert [page.page_number for page in content.pages] == [1, 3]
        assert content.pages[0].lines == ["INT. ROOM - DAY", "  Action."]
        assert content.pages[0].text == texts[0]
        assert content.text == "\f".join(texts)

    def test_page_without_text(self, monkeypatch, pdf_file):
        """Test that pages returning None are treated as blank."""
        _fake_open(monkeypatch, FakePDF([None, "Hello"]))

        content = read_pdf(pdf_file)

        assert [page.page_number for page in content.pages] == [2]
        assert content.text == "\fHello"

    def test_metadata(self, monkeypatch, pdf_file):
        """Test that document info is mapped to metadata keys."""
        info = {"Title": "My Film", "Author": b"Jane", "Keywords": "ignored"}
        _fake_open(monkeypatch, FakePDF(["Text"], metadata=info))

        content = read_pdf(pdf_file)

        assert content.metadata == {"title": "My Film", "author": "Jane"}

    def test_password_protected(self, monkeypatch, pdf_file):
        """Test that encryption failures raise PDFPasswordError."""
        _fake_open(monkeypatch, error=PdfminerException(PDFPasswordIncorrect()))

        with pytest.raises(PDFPasswordError) as exc_info:
            read_pdf(pdf_file)
        assert "password-protected" in exc_info.value.message

    @pytest.mark.parametrize(
        "error",
        [
            PdfminerException(PDFSyntaxError("No /Root object!")),
            PDFSyntaxError("No /Root object!"),
        ],
    )
    def test_corrupted(self, monkeypatch, pdf_file, error):
        """Test that parser failures raise PDFCorruptedError."""
        _fake_open(monkeypatch, error=error)

        with pytest.raises(PDFCorruptedError) as exc_info:
            read_pdf(pdf_file)
        assert exc_info.value.message == f"Invalid or corrupted PDF file: {pdf_file}"

    def test_os_error(self, monkeypatch, pdf_file):
        """Test that I/O failures raise a generic PDFReadError."""
        _fake_open(monkeypatch, error=PermissionError("denied"))

        with pytest.raises(PDFReadError) as exc_info:
            read_pdf(pdf_file)
        assert exc_info.value.message.startswith("Failed to read PDF file")

    def test_real_parser_rejects_garbage(self, tmp_path):
        """Test a file that is not a PDF with the real pdfplumber."""
        path = tmp_path / "fake.pdf"
        path.write_text("this is not a pdf", encoding="utf-8")

        with pytest.raises(PDFCorruptedError):
            read_pdf(path)


class TestHelpers:
    """Test reader helper functions."""

    def test_split_lines_keeps_leading_whitespace(self):
        """Test that only trailing whitespace is stripped."""
        assert split_lines("  A  \nB\t\n\nC") == ["  A", "B", "", "C"]

    def test_extract_metadata_all_keys(self):
        """Test the full info key mapping."""
        info = {
            "Title": "T",
            "Author": "A",
            "Subject": "S",
            "Creator": "C",
            "Producer": "P",
            "CreationDate": "D:2024",
            "ModDate": "D:2025",
        }
        assert extract_metadata(info) == {
            "title": "T",
            "author": "A",
            "subject": "S",
            "creator": "C",
            "producer": "P",
            "creation_date": "D:2024",
            "modification_date": "D:2025",
        }

    def test_extract_metadata_skips_empty(self):
        """Test that missing and blank entries are dropped."""
        assert extract_metadata(None) == {}
        assert extract_metadata({"Title": "  ", "Author": ""}) == {}

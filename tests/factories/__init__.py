"""Test data factories for Scripter testing."""

from tests.factories.document_factory import DocumentFactory
from tests.factories.pdf_content_factory import PDFContentFactory

__all__ = ["DocumentFactory", "PDFContentFactory"]

"""
Tests for file validation and text extraction.
"""

import asyncio
import io
from unittest.mock import Mock, patch
import pytest
from docx import Document
from pypdf import PdfWriter
from backend.docsim.data.document_loader import load_document, load_documents
from backend.docsim.services import file_processor
from backend.docsim.services.file_processor import (
    EMPTY_TEXT_MESSAGE,
    UNSUPPORTED_TYPE_MESSAGE,
    FileProcessingError,
    get_extension,
    process_file,
    validate_file,
)

TEN_MB = 10 * 1024 * 1024


def make_docx(*paragraphs: str) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TestValidation:
    """Test extension and size checks."""

    @pytest.mark.parametrize("name, expected", [
        ("report.PDF", "pdf"),
        ("notes.final.txt", "txt"),
        ("README", None),
        ("trailing.", None),
    ])
    def test_get_extension(self, name, expected):
        assert get_extension(name) == expected

    @pytest.mark.parametrize("name", ["a.docx", "b.pdf", "c.txt", "D.TXT"])
    def test_accepts_supported_types(self, name):
        assert validate_file(name, 100) == (True, None)

    @pytest.mark.parametrize("name", ["image.png", "legacy.doc", "noextension"])
    def test_rejects_unsupported_types(self, name):
        assert validate_file(name, 100) == (False, UNSUPPORTED_TYPE_MESSAGE)

    def test_size_limit(self):
        assert validate_file("big.txt", TEN_MB) == (True, None)
        assert validate_file("big.txt", TEN_MB + 1) == (False, "File size must be less than 10MB")

    def test_custom_size_limit(self):
        is_valid, error = validate_file("big.txt", 2048, max_size=1024 * 1024 // 2)
        assert is_valid
        is_valid, error = validate_file("big.txt", 1024 * 1024, max_size=1024 * 1024 // 2)
        assert not is_valid
        assert error == "File size must be less than 0.5MB"


class TestProcessFile:
    """Test extraction for each supported format."""

    def test_text_file(self):
        result = process_file("notes.txt", "  Hello wörld\n".encode("utf-8"))

        assert result.ok
        assert result.text == "Hello wörld"
        assert result.file_name == "notes.txt"
        assert result.file_type == "Text Document"
        assert result.error is None

    def test_invalid_utf8_bytes_are_replaced(self):
        result = process_file("notes.txt", b"caf\xe9 ok")

        assert result.ok
        assert result.text == "caf\ufffd ok"
        assert result.file_type == "Text Document"

    def test_byte_order_mark_is_dropped(self):
        result = process_file("notes.txt", b"\xef\xbb\xbfthe cat sat")

        assert result.ok
        assert result.text == "the cat sat"

    def test_bom_text_compares_as_identical(self):
        with_bom = process_file("a.txt", b"\xef\xbb\xbfThe cat sat").text
        plain = process_file("b.txt", b"the cat sat").text

        assert with_bom.lower() == plain.lower()

    def test_failed_extraction_result_shape(self):
        result = process_file("broken.docx", b"not a zip archive")

        assert result.text == ""
        assert result.file_type == "Unknown"

    def test_word_document(self):
        result = process_file("essay.docx", make_docx("First paragraph.", "Second paragraph."))

        assert result.ok
        assert result.file_type == "Word Document"
        assert result.text == "First paragraph.\nSecond paragraph."

    def test_corrupt_word_document(self):
        result = process_file("broken.docx", b"not a zip archive")

        assert not result.ok
        assert result.error.startswith("Failed to process Word document")

    def test_pdf_document(self):
        page = Mock()
        page.extract_text.return_value = "Page one text"
        reader = Mock(pages=[page, page])

        with patch.object(file_processor, "PdfReader", return_value=reader):
            result = process_file("paper.pdf", b"%PDF-1.4 stub")

        assert result.ok
        assert result.file_type == "PDF Document"
        assert result.text == "Page one text\nPage one text"

    def test_pdf_without_text(self):
        result = process_file("blank.pdf", make_blank_pdf())

        assert not result.ok
        assert result.error == EMPTY_TEXT_MESSAGE

    def test_corrupt_pdf(self):
        result = process_file("broken.pdf", b"garbage bytes that are not a pdf")

        assert not result.ok
        assert result.error.startswith("Failed to process PDF document")

    def test_empty_text_file(self):
        result = process_file("empty.txt", b"   \n ")
        assert result.error == EMPTY_TEXT_MESSAGE

    def test_invalid_file_is_not_extracted(self):
        extractor = Mock(return_value="never used")
        with patch.dict(file_processor.EXTRACTORS, {"txt": ("Text Document", extractor)}):
            result = process_file("big.txt", b"x" * 11, max_size=10)

        extractor.assert_not_called()
        assert not result.ok

    def test_unsupported_type(self):
        result = process_file("image.png", b"data")

        assert result.error == UNSUPPORTED_TYPE_MESSAGE
        assert result.file_type == "Unknown"

    def test_oversized_file(self):
        result = process_file("big.txt", b"x" * 11, max_size=10)
        assert result.error.startswith("File size must be less than")

    def test_serializes_with_camel_case(self):
        dumped = process_file("notes.txt", b"hello there").model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"text": "hello there", "fileName": "notes.txt", "fileType": "Text Document"}

    def test_processing_error_hierarchy(self):
        assert issubclass(FileProcessingError, file_processor.DocSimError)


class TestDocumentLoader:
    """Test loading documents from disk."""

    def test_load_text_document(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("the cat sat", encoding="utf-8")

        result = asyncio.run(load_document(str(path)))

        assert result.ok
        assert result.text == "the cat sat"
        assert result.file_name == "doc.txt"

    def test_missing_file(self, tmp_path):
        result = asyncio.run(load_document(str(tmp_path / "missing.txt")))

        assert not result.ok
        assert result.file_name == "missing.txt"
        assert result.error.startswith("Could not read file")

    def test_load_documents_keeps_order(self, tmp_path):
        first = tmp_path / "first.txt"
        second = tmp_path / "second.docx"
        first.write_text("alpha beta", encoding="utf-8")
        second.write_bytes(make_docx("gamma delta"))

        results = asyncio.run(load_documents(str(first), str(second)))

        assert [result.file_name for result in results] == ["first.txt", "second.docx"]
        assert [result.text for result in results] == ["alpha beta", "gamma delta"]

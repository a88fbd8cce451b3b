# File: backend/docsim/services/file_processor.py

import io
from typing import Callable, Dict, Optional, Tuple
from docx import Document
from pypdf import PdfReader
from backend.docsim.config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE
from backend.docsim.models.model_definitions import ExtractionResult
from backend.docsim.utils.logger import logger

class DocSimError(Exception):
    """Base exception for the document similarity service."""
    pass

class FileProcessingError(DocSimError):
    """Raised when text cannot be extracted from an uploaded file."""
    pass

UNSUPPORTED_TYPE_MESSAGE = "Please upload a Word (.docx), PDF (.pdf), or Text (.txt) file"
EMPTY_TEXT_MESSAGE = "No readable text found in the document"

def get_extension(file_name: str) -> Optional[str]:
    """Return the lowercased text after the final dot, or None when there is none."""
    if "." not in file_name:
        return None
    extension = file_name.rsplit(".", 1)[1].lower()
    return extension or None

def _format_size(size_bytes: int) -> str:
    size_mb = size_bytes / (1024 * 1024)
    return f"{size_mb:g}MB"

def validate_file(file_name: str, size: int, max_size: int = MAX_FILE_SIZE) -> Tuple[bool, Optional[str]]:
    """
    Checks the extension and size of an upload before any extraction happens.

    Args:
        file_name (str): Name of the uploaded file.
        size (int): Size of the upload in bytes.
        max_size (int): Largest accepted upload in bytes.

    Returns:
        Tuple[bool, Optional[str]]: Whether the file is valid and, if not, why.
    """
    extension = get_extension(file_name)
    if extension not in ALLOWED_EXTENSIONS:
        return False, UNSUPPORTED_TYPE_MESSAGE
    if size > max_size:
        return False, f"File size must be less than {_format_size(max_size)}"
    return True, None

def extract_docx_text(content: bytes) -> str:
    """Extract paragraph text from a Word document."""
    try:
        document = Document(io.BytesIO(content))
    except Exception as e:
        raise FileProcessingError(f"Failed to process Word document: {e}") from e
    return "\n".join(paragraph.text for paragraph in document.paragraphs)

def extract_pdf_text(content: bytes) -> str:
    """Extract text from every page of a PDF document."""
    try:
        reader = PdfReader(io.BytesIO(content))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise FileProcessingError(f"Failed to process PDF document: {e}") from e
    return "\n".join(pages)

def extract_txt_text(content: bytes) -> str:
    """Decode a plain text document as UTF-8, dropping a leading BOM and replacing invalid bytes."""
    return content.decode("utf-8-sig", errors="replace")

# Extension -> (human readable type, extractor)
EXTRACTORS: Dict[str, Tuple[str, Callable[[bytes], str]]] = {
    "docx": ("Word Document", extract_docx_text),
    "pdf": ("PDF Document", extract_pdf_text),
    "txt": ("Text Document", extract_txt_text),
}

def process_file(file_name: str, content: bytes, max_size: int = MAX_FILE_SIZE) -> ExtractionResult:
    """
    Validates an uploaded file and extracts its plain text.

    Failures never raise; they are reported through the `error` field with an
    empty `text` and an "Unknown" file type.

    Args:
        file_name (str): Name of the uploaded file, used to pick the extractor.
        content (bytes): Raw file contents.
        max_size (int): Largest accepted upload in bytes.

    Returns:
        ExtractionResult: Extracted text and file metadata, or the error.
    """
    is_valid, error = validate_file(file_name, len(content), max_size)
    if not is_valid:
        logger.warning(f"Rejected upload '{file_name}': {error}")
        return ExtractionResult(file_name=file_name, error=error)

    file_type, extractor = EXTRACTORS[get_extension(file_name)]
    try:
        text = extractor(content)
        if not text.strip():
            raise FileProcessingError(EMPTY_TEXT_MESSAGE)
    except FileProcessingError as e:
        logger.warning(f"Extraction failed for '{file_name}': {e}")
        return ExtractionResult(file_name=file_name, error=str(e))

    logger.info(f"Extracted {len(text)} characters from {file_type.lower()} '{file_name}'.")
    return ExtractionResult(text=text.strip(), file_name=file_name, file_type=file_type)

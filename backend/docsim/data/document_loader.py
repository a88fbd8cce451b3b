# File: backend/docsim/data/document_loader.py

import asyncio
import os
from typing import List
import aiofiles
from backend.docsim.models.model_definitions import ExtractionResult
from backend.docsim.services.file_processor import process_file
from backend.docsim.utils.logger import logger

async def load_document(file_path: str) -> ExtractionResult:
    """
    Loads a document from disk and extracts its text.

    Args:
        file_path (str): Path to a .docx, .pdf or .txt file.

    Returns:
        ExtractionResult: Extracted text, or the reason extraction failed.
    """
    file_name = os.path.basename(file_path)
    try:
        async with aiofiles.open(file_path, mode='rb') as document_file:
            content = await document_file.read()
    except OSError as e:
        logger.error(f"Failed to read document '{file_path}': {e}")
        return ExtractionResult(file_name=file_name, error=f"Could not read file: {e.strerror or e}")

    # Parsing docx/pdf is CPU bound, keep it off the event loop
    return await asyncio.to_thread(process_file, file_name, content)

async def load_documents(*file_paths: str) -> List[ExtractionResult]:
    """Loads several documents concurrently, preserving argument order."""
    return list(await asyncio.gather(*(load_document(path) for path in file_paths)))

import asyncio
import time
import uuid
from typing import Dict, List
from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from backend.docsim.config import CORS_ORIGINS, MAX_FILE_SIZE
from backend.docsim.models.model_definitions import (
    CompareRequest,
    ExtractionResult,
    FileComparison,
    SimilarityResult,
)
from backend.docsim.services.examples_manager import get_example_documents
from backend.docsim.services.file_processor import process_file, validate_file
from backend.docsim.services.similarity_service import compute_similarity
from backend.docsim.utils.logger import logger

# Initialize FastAPI app
app = FastAPI(docs_url="/api/docs", redoc_url="/api/redoc", openapi_url="/api/openapi.json")

# Configure CORS
app.add_middleware(CORSMiddleware, allow_origins=CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

async def extract_upload(upload: UploadFile) -> ExtractionResult:
    """Read an uploaded file and extract its text in a worker thread."""
    file_name = upload.filename or ""
    # Reject by declared size before pulling the body into memory
    if upload.size is not None:
        is_valid, error = validate_file(file_name, upload.size, MAX_FILE_SIZE)
        if not is_valid:
            return ExtractionResult(file_name=file_name, error=error)
    content = await upload.read()
    return await asyncio.to_thread(process_file, file_name, content, MAX_FILE_SIZE)

@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}

@app.get("/api/examples")
def examples() -> List[Dict[str, str]]:
    """Return the bundled example document pairs."""
    return get_example_documents()

@app.post("/api/similarity", response_model=SimilarityResult)
def similarity(request: CompareRequest) -> SimilarityResult:
    """Compute the similarity between two raw documents."""
    request_uuid = uuid.uuid4()
    start_time = time.time()
    logger.info(f"{request_uuid} [Similarity Endpoint] Comparing documents of {len(request.doc1)} and {len(request.doc2)} characters...")

    try:
        result = compute_similarity(request.doc1, request.doc2)
    except Exception as e:
        logger.error(f"{request_uuid} [Similarity Error] {e}")
        raise HTTPException(status_code=500, detail="Similarity computation failed.")

    logger.info(f"{request_uuid} [Similarity Endpoint] Score {result.score:.4f} computed in {time.time() - start_time:.4f} seconds.")
    return result

@app.post("/api/extract", response_model=ExtractionResult, response_model_exclude_none=True)
async def extract(file: UploadFile = File(...)) -> ExtractionResult:
    """Extract plain text from an uploaded .docx, .pdf or .txt file."""
    request_uuid = uuid.uuid4()
    logger.info(f"{request_uuid} [Extract Endpoint] Received '{file.filename}'.")

    document = await extract_upload(file)
    if not document.ok:
        logger.warning(f"{request_uuid} [Extract Endpoint] {document.error}")
        raise HTTPException(status_code=400, detail=document.error)
    return document

@app.post("/api/similarity/files", response_model=FileComparison, response_model_exclude_none=True)
async def similarity_files(file1: UploadFile = File(...), file2: UploadFile = File(...)) -> FileComparison:
    """Extract text from two uploaded files and compare them."""
    request_uuid = uuid.uuid4()
    start_time = time.time()
    logger.info(f"{request_uuid} [File Similarity Endpoint] Comparing '{file1.filename}' and '{file2.filename}'...")

    documents = await asyncio.gather(extract_upload(file1), extract_upload(file2))
    for document in documents:
        if not document.ok:
            logger.warning(f"{request_uuid} [File Similarity Endpoint] {document.file_name}: {document.error}")
            raise HTTPException(status_code=400, detail=f"{document.file_name}: {document.error}")

    try:
        result = compute_similarity(documents[0].text, documents[1].text)
    except Exception as e:
        logger.error(f"{request_uuid} [Similarity Error] {e}")
        raise HTTPException(status_code=500, detail="Similarity computation failed.")

    logger.info(f"{request_uuid} [File Similarity Endpoint] Score {result.score:.4f} computed in {time.time() - start_time:.4f} seconds.")
    return FileComparison(result=result, documents=list(documents))

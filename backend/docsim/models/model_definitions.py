# File: backend/docsim/models/model_definitions.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class CamelModel(BaseModel):
    """Base model that accepts snake_case or camelCase input; dump with by_alias=True for camelCase."""
    model_config = ConfigDict(populate_by_name=True)

class DocumentStats(CamelModel):
    word_count: int = Field(0, alias="wordCount", ge=0)
    unique_words: int = Field(0, alias="uniqueWords", ge=0)
    common_words: int = Field(0, alias="commonWords", ge=0)

class SimilarityStats(CamelModel):
    document1: DocumentStats = Field(default_factory=DocumentStats)
    document2: DocumentStats = Field(default_factory=DocumentStats)
    shared_words: List[str] = Field(default_factory=list, alias="sharedWords")

class SimilarityResult(CamelModel):
    """Similarity score for a document pair plus the statistics behind it."""
    score: float = Field(0.0, ge=0.0, le=1.0)
    stats: SimilarityStats = Field(default_factory=SimilarityStats)

class ExtractionResult(CamelModel):
    """Outcome of extracting plain text from an uploaded file."""
    text: str = ""
    file_name: str = Field(..., alias="fileName")
    file_type: str = Field("Unknown", alias="fileType")
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

class CompareRequest(BaseModel):
    doc1: str = ""
    doc2: str = ""

class FileComparison(BaseModel):
    result: SimilarityResult
    documents: List[ExtractionResult]

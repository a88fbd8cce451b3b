# File: backend/docsim/services/similarity_service.py

from typing import List, Optional, Set
from backend.docsim.config import COSINE_WEIGHT, JACCARD_WEIGHT
from backend.docsim.models.model_definitions import DocumentStats, SimilarityResult, SimilarityStats
from backend.docsim.utils.logger import logger
from backend.docsim.utils.text_processing import (
    build_vectors,
    compute_tf,
    cosine_similarity,
    jaccard_similarity,
    preprocess,
)

def _document_stats(tokens: List[str], unique: Set[str], common_words: int) -> DocumentStats:
    return DocumentStats(word_count=len(tokens), unique_words=len(unique), common_words=common_words)

def _empty_result() -> SimilarityResult:
    return SimilarityResult(score=0.0, stats=SimilarityStats())

def combine_scores(cosine: float, jaccard: float, cosine_weight: float = COSINE_WEIGHT, jaccard_weight: float = JACCARD_WEIGHT) -> float:
    """
    Weights the cosine and Jaccard similarities into a single score clamped to [0, 1].

    Args:
        cosine (float): Cosine similarity of the term frequency vectors.
        jaccard (float): Jaccard similarity of the unique token sets.
        cosine_weight (float): Weight applied to the cosine similarity.
        jaccard_weight (float): Weight applied to the Jaccard similarity.

    Returns:
        float: Combined similarity score.
    """
    final_score = cosine * cosine_weight + jaccard * jaccard_weight
    return max(0.0, min(1.0, final_score))

def compute_similarity(
    doc1: str,
    doc2: str,
    cosine_weight: Optional[float] = None,
    jaccard_weight: Optional[float] = None,
) -> SimilarityResult:
    """
    Computes the similarity between two raw documents.

    The first matching rule decides the result:
    empty input scores 0 with zeroed stats, texts equal after trimming and
    lowercasing score exactly 1.0, documents without a shared token score 0,
    and anything else is scored by weighting cosine and Jaccard similarity.

    Args:
        doc1 (str): Raw text of the first document.
        doc2 (str): Raw text of the second document.
        cosine_weight (Optional[float]): Overrides the configured cosine weight.
        jaccard_weight (Optional[float]): Overrides the configured Jaccard weight.

    Returns:
        SimilarityResult: Score and per-document statistics.
    """
    cosine_weight = COSINE_WEIGHT if cosine_weight is None else cosine_weight
    jaccard_weight = JACCARD_WEIGHT if jaccard_weight is None else jaccard_weight

    trimmed1 = doc1.strip()
    trimmed2 = doc2.strip()
    if not trimmed1 or not trimmed2:
        logger.debug("One of the documents is empty; returning zero similarity.")
        return _empty_result()

    tokens1 = preprocess(doc1)
    tokens2 = preprocess(doc2)
    unique1 = set(tokens1)
    unique2 = set(tokens2)
    shared_words = sorted(unique1 & unique2)
    common_words = len(shared_words)

    if trimmed1.lower() == trimmed2.lower():
        logger.debug(f"Documents are identical ({len(tokens1)} tokens); returning full similarity.")
        return SimilarityResult(
            score=1.0,
            stats=SimilarityStats(
                document1=_document_stats(tokens1, unique1, common_words),
                document2=_document_stats(tokens2, unique2, common_words),
                shared_words=shared_words,
            ),
        )

    if not shared_words:
        logger.debug("Documents share no tokens; returning zero similarity.")
        return SimilarityResult(
            score=0.0,
            stats=SimilarityStats(
                document1=_document_stats(tokens1, unique1, 0),
                document2=_document_stats(tokens2, unique2, 0),
                shared_words=[],
            ),
        )

    vec1, vec2 = build_vectors(compute_tf(tokens1), compute_tf(tokens2))
    cosine = cosine_similarity(vec1, vec2)
    jaccard = jaccard_similarity(unique1, unique2)
    score = combine_scores(cosine, jaccard, cosine_weight, jaccard_weight)
    logger.debug(
        f"Vocabulary size: {vec1.size}, cosine: {cosine:.4f}, jaccard: {jaccard:.4f}, combined: {score:.4f}"
    )

    return SimilarityResult(
        score=score,
        stats=SimilarityStats(
            document1=_document_stats(tokens1, unique1, common_words),
            document2=_document_stats(tokens2, unique2, common_words),
            shared_words=shared_words,
        ),
    )

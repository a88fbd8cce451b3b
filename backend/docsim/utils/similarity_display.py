# File: backend/docsim/utils/similarity_display.py

import argparse
import asyncio
import sys
from typing import List, Optional
from backend.docsim.data.document_loader import load_documents
from backend.docsim.models.model_definitions import DocumentStats, SimilarityResult
from backend.docsim.services.examples_manager import get_example
from backend.docsim.services.similarity_service import compute_similarity
from backend.docsim.utils.logger import get_logger, set_log_level

logger = get_logger("cli")

# (lower bound, label), checked top to bottom
SCORE_BANDS = [
    (0.8, "Very Similar"),
    (0.6, "Moderately Similar"),
    (0.4, "Somewhat Similar"),
    (0.2, "Slightly Similar"),
]

def describe_score(score: float) -> str:
    """Map a similarity score to a qualitative band."""
    for lower_bound, label in SCORE_BANDS:
        if score >= lower_bound:
            return label
    return "Very Different"

def format_document_stats(name: str, stats: DocumentStats) -> str:
    return (
        f"{name}: {stats.word_count} words, {stats.unique_words} unique, "
        f"{stats.common_words} in common"
    )

def display_similarity_result(result: SimilarityResult, max_shared: int = 20):
    """Display the similarity result in a readable format."""
    print("\nSimilarity Score")
    print("-" * 16)
    print(f"Score: {result.score:.4f} ({result.score * 100:.1f}%) - {describe_score(result.score)}")
    print(format_document_stats("Document 1", result.stats.document1))
    print(format_document_stats("Document 2", result.stats.document2))
    shared = result.stats.shared_words
    if not shared:
        print("Shared words: none")
        return
    preview = ", ".join(shared[:max_shared])
    remainder = len(shared) - max_shared
    suffix = f" (+{remainder} more)" if remainder > 0 else ""
    print(f"Shared words ({len(shared)}): {preview}{suffix}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare two documents (.docx, .pdf or .txt) for similarity.")
    parser.add_argument("files", nargs="*", help="Exactly two document paths to compare.")
    parser.add_argument("--example", type=int, help="Compare a bundled example pair instead of files.")
    parser.add_argument("--max-shared", type=int, default=20, help="Maximum number of shared words to print.")
    parser.add_argument("--log-level", default="WARNING", help="Log level for the comparison run (default: WARNING).")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    if args.example is not None:
        try:
            example = get_example(args.example)
        except IndexError as e:
            parser.error(str(e))
        print(f"Example: {example['title']} - {example['description']}")
        result = compute_similarity(example["doc1"], example["doc2"])
        display_similarity_result(result, args.max_shared)
        return 0

    if len(args.files) != 2:
        parser.error("provide exactly two files, or --example N")

    documents = asyncio.run(load_documents(*args.files))
    failed = [document for document in documents if not document.ok]
    for document in failed:
        print(f"{document.file_name}: {document.error}", file=sys.stderr)
    if failed:
        return 1

    for document in documents:
        logger.info(f"Loaded {document.file_type} '{document.file_name}'.")
    result = compute_similarity(documents[0].text, documents[1].text)
    display_similarity_result(result, args.max_shared)
    return 0

if __name__ == "__main__":
    sys.exit(main())

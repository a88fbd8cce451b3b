# File: backend/docsim/utils/text_processing.py

import re
from collections import Counter
from typing import Dict, Iterable, List, Set, Tuple
import numpy as np

# ASCII word characters: accented and non-Latin letters act as separators
_NON_WORD_PATTERN = re.compile(r'[^\w\s]', re.ASCII)
_WHITESPACE_PATTERN = re.compile(r'\s+')

def preprocess(text: str) -> List[str]:
    """
    Preprocesses the input text by lowercasing, replacing punctuation with spaces,
    and tokenizing into words of at least two characters.

    Args:
        text (str): The input text.

    Returns:
        List[str]: List of tokens, in source order, duplicates kept.
    """
    text = text.lower()
    text = _NON_WORD_PATTERN.sub(' ', text)
    text = _WHITESPACE_PATTERN.sub(' ', text).strip()
    if not text:
        return []
    return [token for token in text.split(' ') if len(token) > 1]

def compute_tf(tokens: Iterable[str]) -> Dict[str, int]:
    """
    Computes raw term frequency for each token in the document.

    Args:
        tokens (Iterable[str]): List of tokens.

    Returns:
        Dict[str, int]: Term frequency dictionary mapping token to occurrence count.
    """
    return dict(Counter(tokens))

def build_vocabulary(tf1: Dict[str, int], tf2: Dict[str, int]) -> Dict[str, int]:
    """
    Builds the shared vocabulary of two documents as a token -> index mapping.

    Tokens are enumerated in sorted order so both vectors (and repeated calls)
    use the same layout.

    Args:
        tf1 (Dict[str, int]): Term frequencies of the first document.
        tf2 (Dict[str, int]): Term frequencies of the second document.

    Returns:
        Dict[str, int]: Vocabulary dictionary.
    """
    return {term: index for index, term in enumerate(sorted(set(tf1) | set(tf2)))}

def build_vectors(tf1: Dict[str, int], tf2: Dict[str, int]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Aligns two term frequency dictionaries onto a shared vocabulary.

    Args:
        tf1 (Dict[str, int]): Term frequencies of the first document.
        tf2 (Dict[str, int]): Term frequencies of the second document.

    Returns:
        Tuple[np.ndarray, np.ndarray]: Frequency vectors of length |vocabulary|.
    """
    vocabulary = build_vocabulary(tf1, tf2)
    vec1 = np.zeros(len(vocabulary))
    vec2 = np.zeros(len(vocabulary))
    for term, index in vocabulary.items():
        vec1[index] = tf1.get(term, 0)
        vec2[index] = tf2.get(term, 0)
    return vec1, vec2

def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """
    Computes the cosine similarity between two vectors.

    Args:
        vec1 (np.ndarray): First vector.
        vec2 (np.ndarray): Second vector.

    Returns:
        float: Cosine similarity score, 0.0 for empty or zero-magnitude vectors.
    """
    if vec1.size == 0 or vec2.size == 0:
        return 0.0
    dot_product = np.dot(vec1, vec2)
    magnitude1 = np.linalg.norm(vec1)
    magnitude2 = np.linalg.norm(vec2)
    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0
    return float(dot_product / (magnitude1 * magnitude2))

def jaccard_similarity(words1: Set[str], words2: Set[str]) -> float:
    """
    Computes the Jaccard similarity between two sets of unique tokens.

    Args:
        words1 (Set[str]): Unique tokens of the first document.
        words2 (Set[str]): Unique tokens of the second document.

    Returns:
        float: |intersection| / |union|, 0.0 when both sets are empty.
    """
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)

# File: backend/docsim/services/examples_manager.py

from typing import Dict, List
from backend.docsim.utils.logger import logger  # Import the centralized logger

def get_example_documents() -> List[Dict[str, str]]:
    """
    Retrieves the bundled example document pairs.

    Returns:
        List[Dict[str, str]]: Examples with 'title', 'description', 'doc1' and 'doc2'.
    """
    logger.info("Retrieving example documents.")
    from backend.docsim.data.example_documents import example_documents
    return [dict(example) for example in example_documents]

def get_example(index: int) -> Dict[str, str]:
    """Returns the example at `index`, raising IndexError when it doesn't exist."""
    examples = get_example_documents()
    if not 0 <= index < len(examples):
        raise IndexError(f"Example {index} does not exist; choose 0-{len(examples) - 1}.")
    return examples[index]

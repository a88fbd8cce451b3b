# File: backend/docsim/config.py

import math
import os
from typing import List, Tuple
from backend.docsim.utils.logger import logger

# Weighting between the two similarity measures. Weights that do not sum to 1
# are accepted with a warning; the combined score is clamped to [0, 1].
DEFAULT_COSINE_WEIGHT = 0.7
DEFAULT_JACCARD_WEIGHT = 0.3
DEFAULT_MAX_FILE_SIZE_MB = 10

ALLOWED_EXTENSIONS: Tuple[str, ...] = ("docx", "pdf", "txt")

def _float_from_env(name: str, default: float) -> float:
    """Read a float from the environment, falling back to `default` on bad input."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed {name}={raw!r}; using default {default}.")
        return default

def check_weights(cosine_weight: float, jaccard_weight: float) -> bool:
    """Warn when the configured weights do not sum to 1; returns whether they do."""
    total = cosine_weight + jaccard_weight
    if math.isclose(total, 1.0):
        return True
    logger.warning(
        f"Similarity weights sum to {total:g} (cosine={cosine_weight:g}, jaccard={jaccard_weight:g}); "
        "combined scores will be clamped to [0, 1]."
    )
    return False

def _origins_from_env(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or [default]

COSINE_WEIGHT = _float_from_env("DOCSIM_COSINE_WEIGHT", DEFAULT_COSINE_WEIGHT)
JACCARD_WEIGHT = _float_from_env("DOCSIM_JACCARD_WEIGHT", DEFAULT_JACCARD_WEIGHT)
check_weights(COSINE_WEIGHT, JACCARD_WEIGHT)

MAX_FILE_SIZE_MB = _float_from_env("DOCSIM_MAX_FILE_SIZE_MB", DEFAULT_MAX_FILE_SIZE_MB)
MAX_FILE_SIZE = int(MAX_FILE_SIZE_MB * 1024 * 1024)

CORS_ORIGINS = _origins_from_env("DOCSIM_CORS_ORIGINS")

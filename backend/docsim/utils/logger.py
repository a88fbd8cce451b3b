# File: backend/docsim/utils/logger.py

import logging
import os
import sys
from typing import Union
from colorlog import ColoredFormatter

LOGGER_NAME = "docsim"
DEFAULT_LOG_LEVEL = "DEBUG"

def _build_formatter() -> ColoredFormatter:
    """Colorized levels, prefixed with the emitting logger name."""
    return ColoredFormatter(
        fmt="%(asctime)s - %(name)s %(filename)s:%(lineno)d - %(log_color)s%(levelname)s%(reset)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )

def resolve_level(level: Union[str, int, None]) -> int:
    """Turn a level name or number into a logging level; unknown names resolve to CRITICAL."""
    if isinstance(level, int):
        return level
    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.CRITICAL

def set_log_level(level: Union[str, int, None]) -> int:
    """Set the level of the service logger and return the numeric level applied."""
    resolved = resolve_level(level)
    logger.setLevel(resolved)
    return resolved

def get_logger(name: str) -> logging.Logger:
    """Child logger that shares the service handler, e.g. `get_logger("cli")` -> `docsim.cli`."""
    return logger.getChild(name)

logger = logging.getLogger(LOGGER_NAME)

# A single stdout handler, even if the module is reloaded
if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(_build_formatter())
    logger.addHandler(console_handler)

# DOCSIM_LOG_LEVEL wins over the generic PYTHON_LOGGER_LEVEL
log_level = os.getenv("DOCSIM_LOG_LEVEL") or os.getenv("PYTHON_LOGGER_LEVEL", DEFAULT_LOG_LEVEL)
set_log_level(log_level)

logger.debug(f"Logger initialized with level: {logging.getLevelName(logger.level)}")

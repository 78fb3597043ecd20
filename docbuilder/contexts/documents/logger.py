"""
Documents context logger.

Provides logging interface for the documents context with automatic [documents] prefix.
All documents modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from docbuilder.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[documents]"


def setup_documents_logger(log_dir: Path) -> Path:
    """
    Setup logger for the documents context.

    Args:
        log_dir: Directory for this session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="documents", log_dir=log_dir)


# Wrapper functions with automatic [documents] prefix


def _log_info(message: str) -> None:
    """Log info message with [documents] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [documents] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [documents] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_validation_result(kind: str, missing: list) -> None:
    """Log the outcome of a required-field check."""
    if missing:
        _log_info(f"{kind}: missing required fields: {', '.join(missing)}")
    else:
        _log_debug(f"{kind}: all required fields present")

"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from docbuilder.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, document_type: str = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        document_type: Document type tag for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Document type": document_type} if document_type else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_layout_result(document_type: str, node_count: int) -> None:
    """Log a finished print layout."""
    _log_debug(f"Built {document_type} print layout ({node_count} nodes)")


def log_export_result(file_name: str, output_path: Path, size_bytes: int) -> None:
    """Log a written PDF file."""
    _log_success(f"Exported {file_name} ({size_bytes} bytes)")
    _log_info(f"  Output: {output_path}")

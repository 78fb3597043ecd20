"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(document_type: str, html: str, escaped: bool) -> None:
    """Log a finished HTML preview."""
    _log_debug(
        f"Rendered {document_type} preview ({len(html)} chars, "
        f"{'escaped' if escaped else 'unescaped'} field values)"
    )

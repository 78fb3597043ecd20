"""
Logger setup shared by every context.

One log directory per CLI session (outs/logs/<command>_<timestamp>/), holding one
<context>.log file with every record. The console sink writes to stderr, leaving
stdout to command output, and only shows records at DOCBUILDER_LOG_LEVEL and above.
Context-specific wrappers with a [prefix] live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()
CONSOLE_LEVEL = os.getenv("DOCBUILDER_LOG_LEVEL", "INFO").upper()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(command: str, logs_path: Path) -> Path:
    """
    Directory for one CLI session's logs.

    Example:
        session_log_dir("export", Path("outs/logs"))
        # outs/logs/export_20240615_103000
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return logs_path / f"{command}_{timestamp}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any sinks configured earlier, so each CLI command starts with a
    clean setup. Library code never calls this; it only emits records.

    Args:
        context_name: Log file stem (e.g., "render", "documents")
        log_dir: Session directory, created if missing
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum console level (defaults to DOCBUILDER_LOG_LEVEL)

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level or CONSOLE_LEVEL, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write a provenance header: command line, working directory, Python version,
    then any extra key-value pairs. Goes to the file only (DEBUG) except for the
    command line.
    """
    logger.debug("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)

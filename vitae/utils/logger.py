"""
Session logging for VITAE command-line runs.

Each script run gets its own log directory holding one `<context>.log` file.
The file sink records everything at DEBUG; the console shows VITAE_LOG_LEVEL
and above (INFO unless set). Every session opens with a provenance block so a
log file can be traced back to the command and package version that wrote it.

Context wrappers with [prefix] helpers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

from vitae import __version__

load_dotenv()

CONSOLE_LEVEL = os.getenv("VITAE_LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

PROVENANCE_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Route loguru output for one script run to a session log file and the console.

    Any previously configured sinks are removed, so the last call wins.

    Args:
        context_name: Log file stem (e.g., "target", "store")
        log_dir: Session directory, created if missing
        extra_provenance: Run-specific lines for the provenance block
        level_colors: Console colors overriding LEVEL_COLORS

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            context_name="target",
            log_dir=Path("outs/logs/match_20251114_123456"),
            extra_provenance={"Job description": "sample: Product Intern"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LEVEL, colorize=True)

    log_provenance({"Context": context_name, **(extra_provenance or {})})
    return log_file


def provenance_lines(extra_context: Optional[Dict[str, str]] = None) -> List[str]:
    """Build the `key: value` lines of a provenance block."""
    context = {
        "VITAE": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }
    return [f"{key}: {value}" for key, value in context.items()]


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """Write a provenance block to the configured sinks."""
    logger.info(PROVENANCE_RULE)
    for line in provenance_lines(extra_context):
        logger.info(line)
    logger.info(PROVENANCE_RULE)

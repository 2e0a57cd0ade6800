"""
Persistence context logger.

Provides logging interface for persistence context with automatic [store] prefix.
All persistence modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[store]"


def setup_persistence_logger(log_dir: Path, data_dir: Path) -> Path:
    """
    Setup logger for persistence context.

    Args:
        log_dir: Directory for this session's logs
        data_dir: Directory holding the JSON record files

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="store",
        log_dir=log_dir,
        extra_provenance={"Data directory": str(data_dir)},
    )


# Wrapper functions with automatic [store] prefix


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [store] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level persistence-specific logging helpers


def log_unreadable_collection(location: str, problem: str) -> None:
    """Log a stored collection that could not be read and is treated as empty."""
    _log_warning(f"Unreadable collection at {location} ({problem}); treating as empty")


def log_record_saved(kind: str, record_id: str, replaced: bool) -> None:
    action = "Replaced" if replaced else "Saved"
    _log_debug(f"{action} {kind} '{record_id}'")


def log_record_removed(kind: str, record_id: str, found: bool) -> None:
    if found:
        _log_debug(f"Removed {kind} '{record_id}'")
    else:
        _log_debug(f"No {kind} '{record_id}' to remove")

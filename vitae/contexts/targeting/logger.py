"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.

Targeting functions only emit records; sinks are configured by the calling
script via setup_targeting_logger().
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, job_label: str = "") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        job_label: Job description label or file for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Job description": job_label or "(pasted)"},
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_match_summary(bullet_count: int, positive_count: int, token_count: int) -> None:
    """Log the outcome of one scoring pass."""
    _log_debug(
        f"Scored {bullet_count} bullets against job description "
        f"({token_count} distinct tokens, {positive_count} with positive score)"
    )
    if bullet_count and not token_count:
        _log_warning("Job description has no usable tokens; keyword overlap cannot score")


def log_selection(selected_count: int, used_fallback: bool) -> None:
    """Log how the initial selection was made."""
    if used_fallback:
        _log_debug(f"No positive matches; fell back to top {selected_count} ranked bullets")
    else:
        _log_debug(f"Selected top {selected_count} positive matches")


def log_tailored_build(version_name: str, selected_count: int, entry_count: int) -> None:
    """Log a tailored document build."""
    _log_debug(
        f"Built '{version_name}' with {selected_count} selected bullets "
        f"across {entry_count} included entries"
    )

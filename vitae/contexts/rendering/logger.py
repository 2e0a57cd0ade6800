"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, version_name: str = "") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        version_name: Name of the document being previewed, for provenance

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, "Master Resume")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Document": version_name or "(unnamed)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_preview_summary(version_name: str, entry_count: int, bullet_count: int, skill_count: int) -> None:
    """Log what a derived preview contains."""
    _log_debug(
        f"Preview of '{version_name}': {entry_count} entries, "
        f"{bullet_count} bullets, {skill_count} skills"
    )
    if not entry_count:
        _log_warning(f"Preview of '{version_name}' has no visible entries")


def log_preview_written(output_path: Path) -> None:
    _log_success(f"Preview written to {output_path}")

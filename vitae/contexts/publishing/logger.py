"""
Publishing context logger.

Provides logging interface for publishing context with automatic [build] prefix.
All publishing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[build]"


def setup_build_logger(
    log_dir: Optional[Path] = None, theme: str = "", verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for a build.

    Args:
        log_dir: Directory for this build's log file (None for console only)
        theme: Theme name recorded in the provenance header
        verbose: Show debug messages on the console

    Returns:
        Path to log file, or None
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={"Theme": theme},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [build] prefix


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [build] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level build-specific logging helpers


def log_build_start(resume_path: Path, dist_dir: Path, theme: str) -> None:
    """Log start of a build with context."""
    _log_info("Building resume...")
    _log_debug(f"  Source: {resume_path}")
    _log_debug(f"  Output: {dist_dir}")
    _log_debug(f"  Theme: {theme}")


def log_step(number: int, message: str) -> None:
    """Log a numbered progress line (e.g., "3. Copying resume.json...")."""
    _log_info(f"{number}. {message}")


def log_build_summary(dist_dir: Path, artifacts: List[Path], warnings: List[str], elapsed_time: float) -> None:
    """Log the closing summary listing every artifact in the output set."""
    _log_success(f"Build complete! Output in {dist_dir} ({elapsed_time:.2f}s)")
    for artifact in artifacts:
        try:
            name = artifact.relative_to(dist_dir)
        except ValueError:
            name = artifact
        suffix = "/" if artifact.is_dir() else ""
        _log_info(f"  - {name}{suffix}")

    for warning in warnings:
        _log_warning(warning)

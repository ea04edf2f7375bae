"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console_level: str = "INFO",
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Always sets up console output. When log_dir is given, a DEBUG-level file
    sink is added as well and the execution provenance (script, command,
    working directory, Python version, etc.) is written at the top of it.

    Args:
        context_name: Context identifier (e.g., "build", "render")
        log_dir: Directory for this logging session (None for console only)
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level shown on the console

    Returns:
        Path to log file, or None when logging to the console only

    Example:
        from vitae.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="build",
            log_dir=Path("outs/logs/build_20251114_123456"),
            extra_provenance={"Theme": "jsonresume-theme-even"}
        )
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"

        # File handler captures everything
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}",
            level="DEBUG",
        )

    logger.add(
        sys.stdout,
        format="<level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    if log_file is not None:
        log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger at debug level.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)

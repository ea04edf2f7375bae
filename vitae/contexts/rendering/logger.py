"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(result, verbose: bool = False) -> None:  # RenderResult
    """
    Log the outcome of a single renderer invocation.

    Renderer output is dumped raw at debug level in verbose mode, and always
    when the invocation failed.
    """
    if result.success:
        _log_debug(f"Renderer finished: {result.output_path}")
    else:
        _log_error(f"Renderer failed (exit status {result.returncode})")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")

    # opt(raw=True) keeps multi-line renderer output readable
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDOUT:\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDERR:\n{'=' * 80}\n{result.stderr}\n"
            )

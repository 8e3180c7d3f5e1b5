"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from trellis.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path = None, formula_name: str = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        formula_name: Name of the document being rendered, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from trellis.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, formula_name="homepage")
        _log_info("Starting render...")
    """
    extra = {"Formula": formula_name} if formula_name else None
    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_prerender_result(node_name: str, instruction_count: int, dynamic_count: int) -> None:
    """Log the shape of a freshly compiled formula."""
    _log_debug(
        f"Prerendered {node_name}: {instruction_count} instructions "
        f"({dynamic_count} resolved at render time)"
    )


def log_render_failure(target_name: str, error: Exception) -> None:
    """Log a render aborted by a resolution error."""
    _log_error(f"Failed to render {target_name}")
    _log_error(f"  Error: {type(error).__name__}: {getattr(error, 'message', error)}")
    path = getattr(error, "path", None)
    if path:
        _log_error(f"  Path: {path}")

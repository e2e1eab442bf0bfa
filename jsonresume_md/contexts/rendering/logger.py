"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from jsonresume_md.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path] = None, locale: str = "en") -> Optional[Path]:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session (None: console only)
        locale: Locale recorded in the provenance header

    Returns:
        Path to log file, or None without log_dir
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Locale": locale},
    )


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


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, source: Path) -> None:
    """Log start of a file render."""
    _log_info(f"Rendering {resume_name}")
    _log_debug(f"  Source: {source}")


def log_render_result(
    resume_name: str,
    output_path: Optional[Path],
    num_lines: int,
    elapsed_time: float,
) -> None:
    """
    Log the outcome of a file render.

    Args:
        resume_name: Resume identifier (file stem)
        output_path: Written Markdown file, or None when printed to stdout
        num_lines: Number of lines in the rendered document
        elapsed_time: Time taken
    """
    _log_success(f"{resume_name}: {num_lines} lines rendered ({elapsed_time:.2f}s)")
    if output_path:
        _log_info(f"  Output: {output_path}")

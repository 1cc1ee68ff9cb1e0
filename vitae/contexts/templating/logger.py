"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Optional[Path], source_path: Path) -> Optional[Path]:
    """
    Setup logger for templating context.

    Configures loguru with provenance tracking and templating-specific context.

    Args:
        log_dir: Directory for this generation session (None for console only)
        source_path: Résumé source being rendered (recorded in provenance)

    Returns:
        Path to log file, or None when logging to console only

    Example:
        from vitae.contexts.templating.logger import setup_templating_logger, _log_info

        log_file = setup_templating_logger(log_dir, source_path=Path("cv.json"))
        _log_info("Rendering...")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Source": source_path},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_generation_start(source_path: Path, log_file: Optional[Path]) -> None:
    """Log start of generation with context."""
    _log_info(f"Starting to generate from {source_path.name}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {source_path}")


def log_generation_result(result, elapsed_time: float) -> None:
    """
    Log generation result.

    Args:
        result: ConversionResult from generate_cv()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"Generated {result.tex_path} and {result.text_path} ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Failed to generate from {result.input_path} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")

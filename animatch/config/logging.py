"""Logging configuration and utilities using Loguru.

Public API:
----------
setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Usage: logger = get_logger(__name__)

Library code only ever calls ``get_logger``; handlers are installed by the
CLI (or by an embedding application) through ``setup_loguru_logger``.
"""

from pathlib import Path
import sys
from typing import Any

from loguru import logger

from .settings import settings

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def setup_loguru_logger(verbose: bool = False) -> None:
    """Configure Loguru logger for the application.

    Args:
        verbose: Enable verbose logging with debug level and detailed tracebacks

    Note:
        - Removes default logger and sets up console (stderr) and file handlers
        - The file handler is only installed when ``logging.enable_file`` is set
    """
    logger.remove()

    logger.configure(extra={"service": "animatch", "module": "root"})

    console_level = "DEBUG" if verbose else settings.logging.console_level
    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )

    if not settings.logging.enable_file:
        return

    log_file_path = Path(settings.logging.log_file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        sink=str(log_file_path),
        level=settings.logging.file_level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[service]} | {extra[module]} | {name}:{function}:{line} | {message}",
        rotation="10 MB",
        retention="1 week",
        compression="zip",
        backtrace=True,
        diagnose=True,
        catch=True,
        serialize=True,
    )


# =============================================================================
# LOGGER FACTORY
# =============================================================================


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a pre-configured logger instance for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger bound with module context
    """
    return logger.bind(
        module=name,
        service="animatch",
    )

"""
Logging utilities for web-selection.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from web_selection.config.settings import Settings


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rich_tracebacks: bool = True,
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """
    Configure logging for the web_selection logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        rich_tracebacks: Render tracebacks with rich on the console
        format: Format string for the file handler
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Library logging stays under its own namespace
    logger = logging.getLogger("web_selection")
    logger.setLevel(log_level)

    logger.handlers.clear()

    console = Console(stderr=True)
    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=rich_tracebacks,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(format))
        logger.addHandler(file_handler)


def setup_logging_from_settings(settings: Settings) -> None:
    """
    Configure logging from settings.

    ``settings.debug`` forces the DEBUG level over ``settings.logging.level``.
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.logging.file,
        rich_tracebacks=settings.logging.rich_tracebacks,
        format=settings.logging.format,
    )

"""
Logging configuration for Scryfall Search Stats.

Uses loguru for structured logging with optional rotating file output.
"""

import sys
import time
from typing import Optional

from loguru import logger

from ..config.settings import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging based on settings.

    Sets up:
    - Console output with color and formatting
    - File output with rotation and retention (when enabled)

    Args:
        level: Console level override (defaults to settings.log_level)

    Should be called once at application startup.
    """
    console_level = level or settings.log_level

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        colorize=True,
    )

    if settings.log_to_file:
        log_dir = settings.logs_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "scryfall-stats_{time:YYYY-MM-DD}.log",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="gz",
        )

    logger.debug("Logging initialized (level={})", console_level)


def get_logger(name: str):
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        >>> from scryfall_stats.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Fetched page {}", page_number)
    """
    return logger.bind(module=name)


class log_operation:
    """Context manager for logging operations with timing.

    Example:
        >>> with log_operation("Fetching search results", query="t:goblin"):
        ...     client.fetch_all_cards(url)
        # Logs: "Fetching search results [query=t:goblin] completed in 1.12s"
    """

    def __init__(self, operation: str, **context):
        self.operation = operation
        self.context = context
        self.start_time = None

    def _context_str(self) -> str:
        return " ".join(f"{k}={v}" for k, v in self.context.items())

    def __enter__(self):
        self.start_time = time.time()
        logger.info("{} [{}] starting...", self.operation, self._context_str())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            logger.info(
                "{} [{}] completed in {:.2f}s",
                self.operation,
                self._context_str(),
                duration,
            )
        else:
            logger.error(
                "{} [{}] failed after {:.2f}s: {}",
                self.operation,
                self._context_str(),
                duration,
                exc_val,
            )

        return False  # Don't suppress exceptions

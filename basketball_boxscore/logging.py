"""Logging configuration using Loguru.

This module provides centralized logging setup for the box score normalizer.
Supports both console and file output with rotation and structured JSON format.

Example:
    >>> from basketball_boxscore.logging import setup_logging, get_logger
    >>> setup_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Normalizing {} feed", "nba")

Status Tags:
    >>> from basketball_boxscore.logging import SUCCESS, FAIL, WARN
    >>> logger.info(f"{SUCCESS} Box score normalized")
    >>> logger.warning(f"{WARN} Source not recognized, assuming generic feed")
    >>> logger.error(f"{FAIL} Malformed feed at home.players.player.3")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger

# Color-coded status tags for terminal output
SUCCESS = "\033[92m[SUCCESS]\033[0m"  # Green
FAIL = "\033[91m[FAIL]\033[0m"        # Red
WARN = "\033[93m[WARN]\033[0m"        # Yellow


class InterceptHandler(logging.Handler):
    """Handler to intercept stdlib logging and redirect to loguru.

    Libraries such as pydantic and typer log through the standard library;
    this keeps their records in the same sinks as ours.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record by forwarding to loguru."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the stdlib call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    level: str = "INFO",
    log_dir: str | Path = "logs",
    rotation: str = "1 day",
    retention: str = "30 days",
    serialize: bool = True,
) -> None:
    """Configure application logging.

    Sets up Loguru with console output and rotating file handlers.
    File logs are written in JSON format for easy parsing.
    Also intercepts stdlib logging to route through loguru.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for log files.
        rotation: When to rotate log files (e.g., "1 day", "100 MB").
        retention: How long to keep old log files.
        serialize: Whether to write JSON-formatted logs to file.

    Example:
        >>> setup_logging(level="DEBUG", log_dir="logs")
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path / "basketball_boxscore_{time:YYYY-MM-DD}.log",
        level=level,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        ),
        rotation=rotation,
        retention=retention,
        serialize=serialize,
        enqueue=True,  # Thread-safe
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> Any:
    """Get a logger instance bound with the given name.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Loguru logger bound with the given name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Mapped {} players", 12)
    """
    return logger.bind(name=name)


__all__ = ["get_logger", "logger", "setup_logging", "SUCCESS", "FAIL", "WARN"]

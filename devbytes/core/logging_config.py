"""Structured logging configuration for the DevBytes video cache."""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

ROOT_LOGGER_NAME = "devbytes"

# Module-level logger
logger: logging.Logger | None = None


def setup_logging(
    level: str = "INFO",
    log_file: Path | str | None = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        rich_tracebacks: Enable rich traceback formatting

    Returns:
        Configured logger instance
    """
    global logger

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=(level.upper() == "DEBUG"),
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging initialized (level=%s)", level)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get or create a logger instance.

    Args:
        name: Logger name (default: devbytes)

    Returns:
        Logger instance
    """
    global logger

    if logger is None:
        logger = setup_logging()

    if name == ROOT_LOGGER_NAME:
        return logger

    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_refresh_event(
    logger_instance: logging.Logger,
    event: str,
    videos_fetched: int | None = None,
    error: str | None = None,
) -> None:
    """
    Log playlist refresh events.

    Args:
        logger_instance: Logger to use
        event: Event type (started, completed, failed)
        videos_fetched: Number of videos received from the network
        error: Error message if failed
    """
    extra: dict[str, Any] = {"event": event}

    if videos_fetched is not None:
        extra["videos_fetched"] = videos_fetched
    if error:
        extra["error"] = error

    if event == "failed":
        logger_instance.error("Video refresh failed: %s", error, extra=extra)
    elif event == "completed":
        logger_instance.info(
            "Video refresh complete (%s videos)", videos_fetched, extra=extra
        )
    else:
        logger_instance.info("Video refresh %s", event, extra=extra)

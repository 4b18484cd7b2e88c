"""Logging configuration using Loguru."""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from versegraph.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} - {message}"
LOG_FILE_PATTERN = "versegraph_{time:YYYY-MM-DD}.log"


def _console_handler(level: str) -> dict[str, Any]:
    return {"sink": sys.stderr, "level": level, "format": CONSOLE_FORMAT, "colorize": True}


def _file_handler(
    log_dir: str,
    level: str,
    rotation: str,
    retention: str,
    compression: str,
    serialize: bool,
) -> dict[str, Any]:
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    return {
        "sink": path / LOG_FILE_PATTERN,
        "level": level,
        "format": FILE_FORMAT,
        "rotation": rotation,
        "retention": retention,
        "compression": compression,
        "serialize": serialize,
        "enqueue": True,
    }


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = True,
    log_dir: str = "logs",
    file_rotation: str = "10 MB",
    file_retention: str = "7 days",
    compression: str = "zip",
    serialize: bool = True,
) -> None:
    """
    Replace all Loguru sinks with a colourised stderr sink and, optionally,
    a rotating file sink (JSON lines when ``serialize`` is set).
    """
    handlers = [_console_handler(level)]
    if log_to_file:
        handlers.append(
            _file_handler(log_dir, level, file_rotation, file_retention, compression, serialize)
        )
    # Records logged through the global logger have no bound module
    logger.configure(handlers=handlers, extra={"module": "versegraph"})


def setup_logging_from_config(logging_config: "LoggingConfig") -> None:
    """Configure logging from the ``logging`` section of the app config."""
    setup_logging(**logging_config.model_dump())


def get_logger(name: str):
    """Get a logger bound to a module name."""
    return logger.bind(module=name)

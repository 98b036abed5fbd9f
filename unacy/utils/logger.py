"""Logging configuration using Loguru."""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from unacy.config import LoggingConfig

# Library default: silent until the application opts in.
logger.disable("unacy")

# Sink ids added by setup_logging; host application sinks are never touched
_handler_ids: list[int] = []


def setup_logging(config: "LoggingConfig | None" = None, **overrides) -> None:
    """
    Add Loguru sinks for unacy and enable its log output.

    Calling again replaces the sinks from the previous call.

    Args:
        config: Logging configuration (default: LoggingConfig())
        **overrides: Individual LoggingConfig fields, e.g. ``level="DEBUG"``
    """
    from unacy.config import LoggingConfig

    config = (config or LoggingConfig()).model_copy(update=overrides)

    teardown_logging()
    logger.enable("unacy")

    # Console logging
    _handler_ids.append(
        logger.add(
            sys.stderr,
            level=config.level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
            filter="unacy",
        )
    )

    if config.log_to_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # File logging with JSON serialization
        _handler_ids.append(
            logger.add(
                log_path / "unacy_{time:YYYY-MM-DD}.log",
                level=config.level,
                rotation=config.file_rotation,
                retention=config.file_retention,
                compression=config.compression,
                serialize=config.serialize,
                filter="unacy",
                enqueue=True,
            )
        )


def teardown_logging() -> None:
    """Remove the sinks added by setup_logging and silence unacy again."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("unacy")


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)

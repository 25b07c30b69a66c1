"""Logging configuration."""

import logging
import os
import sys

from pydantic import BaseModel

from stock_agent.errors import ConfigurationError


class LogConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str) -> int:
    """Translate a level name such as ``info`` into its numeric value.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    value = logging.getLevelNamesMapping().get(level.strip().upper())
    if value is None:
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return value


def setup_logging(config: LogConfig | None = None) -> None:
    """Set up logging for the CLI.

    Records go to stderr; stdout is reserved for conversation output.

    Raises:
        ConfigurationError: If the configured level (or LOG_LEVEL) is not a valid level name
    """
    if config is None:
        config = LogConfig(level=os.getenv("LOG_LEVEL", "WARNING"))

    logging.basicConfig(
        level=parse_level(config.level),
        format=config.format,
        datefmt=config.date_format,
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("anthropic").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger for a specific module.

    Called at import time, so an unrecognised LOG_LEVEL is left for
    ``setup_logging`` to report and the logger inherits from root.

    Args:
        name: Module name (typically __name__)
        level: Explicit level; falls back to LOG_LEVEL, otherwise inherits from root

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL")
    if log_level:
        try:
            logger.setLevel(parse_level(log_level))
        except ConfigurationError:
            if level:
                raise

    return logger

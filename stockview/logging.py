from typing import Optional

from loguru import logger
from stockview.config import get_config

# {extra[component]} is the name passed to get_logger, "stockview" otherwise
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class AppLogger:
    """Global logger configuration for stockview.

    The stdout sink follows get_config().log_level. It is only replaced when that
    level changes, so modules can call get_logger at import time.
    """
    _configured_level: Optional[str] = None

    def __init__(self) -> None:
        log_level = get_config().log_level.upper()
        if AppLogger._configured_level != log_level:
            logger.remove()
            logger.configure(extra={"component": "stockview"})
            logger.add(
                sink=lambda msg: print(msg, end=""),
                level=log_level,
                format=LOG_FORMAT,
            )
            AppLogger._configured_level = log_level
        self.logger = logger

    def get_logger(self, name: Optional[str] = None):
        """Get the configured logger, tagged with ``name`` when given.

        Args:
            name (str, optional): Component shown in each line, usually ``__name__``.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(component=name)
        return self.logger


def get_logger(name: Optional[str] = None):
    """Get an application logger using the latest config."""
    return AppLogger().get_logger(name)

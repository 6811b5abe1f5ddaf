"""
Logging infrastructure for SkillMatch.

Uses Loguru for console and rotating file logging with structured,
colourised output.
"""

import sys
from typing import Any

from loguru import logger

from skillmatch.utils.config import get_settings

_SENSITIVE_KEYS = {
    "password", "passwd", "pwd", "secret", "token", "api_key",
    "apikey", "credential", "private_key", "access_token", "refresh_token",
}


def setup_logging() -> None:
    """
    Configure application-wide logging.

    Sets up console and file logging with rotation and retention taken
    from the logging settings.
    """
    settings = get_settings()
    log_settings = settings.logging

    # Remove default handler
    logger.remove()

    # Security: diagnose=False outside development to keep locals out of tracebacks
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            level=log_settings.level,
            colorize=True,
            backtrace=True,
            diagnose=enable_diagnose,
        )

    if log_settings.file_output:
        log_file = log_settings.file_path
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=log_settings.format,
            level=log_settings.level,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=enable_diagnose,
            enqueue=True,  # Thread-safe logging
        )

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A configured logger instance
    """
    return logger.bind(name=name)


def sanitize_for_logging(data: Any) -> Any:
    """
    Sanitize data before logging to prevent sensitive information exposure.

    Redacts passwords, tokens, and other sensitive fields.
    """
    if isinstance(data, dict):
        return {
            k: "***REDACTED***" if any(s in k.lower() for s in _SENSITIVE_KEYS) else sanitize_for_logging(v)
            for k, v in data.items()
        }
    elif isinstance(data, list):
        return [sanitize_for_logging(item) for item in data]
    return data


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Usage:
        class MyClass(LoggerMixin):
            def my_method(self):
                self.logger.info("Doing something...")
    """

    @property
    def logger(self) -> Any:
        """Get a logger instance for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

"""
Utility modules for SkillMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from skillmatch.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from skillmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    INTEREST_BONUS,
    MAX_COMPATIBILITY_SCORE,
    SENSITIVE_PROFILE_FIELDS,
    DirectoryBackend,
    MatchStrength,
)
from skillmatch.utils.logger import (
    setup_logging,
    get_logger,
    sanitize_for_logging,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "INTEREST_BONUS",
    "MAX_COMPATIBILITY_SCORE",
    "SENSITIVE_PROFILE_FIELDS",
    "DirectoryBackend",
    "MatchStrength",
    # Logger
    "setup_logging",
    "get_logger",
    "sanitize_for_logging",
    "LoggerMixin",
]

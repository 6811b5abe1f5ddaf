"""
Application-wide constants for SkillMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "SkillMatch"
APP_DISPLAY_NAME: Final[str] = "SkillMatch Peer Learning Network"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Scoring Constants
# =============================================================================

# Upper bound for a compatibility score; 100 is never reported
MAX_COMPATIBILITY_SCORE: Final[int] = 99

# Flat bonus when requester and candidate share at least one interest
INTEREST_BONUS: Final[int] = 20

# Lower bound for the score denominator (requesters with no skills declared)
MIN_POSSIBLE_MATCHES: Final[int] = 1

# Score thresholds used for display bands
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "strong": 70,
    "good": 40,
    "weak": 1,
}


# =============================================================================
# Privacy Constants
# =============================================================================

# Profile fields that must never leave the service boundary
SENSITIVE_PROFILE_FIELDS: Final[frozenset[str]] = frozenset({"password"})


# =============================================================================
# Enums
# =============================================================================


class DirectoryBackend(str, Enum):
    """Storage backends available for the user directory."""

    MEMORY = "memory"
    MONGODB = "mongodb"


class MatchStrength(Enum):
    """Categorical bands for compatibility scores."""

    STRONG = "strong"
    GOOD = "good"
    WEAK = "weak"
    NONE = "none"

    @classmethod
    def from_score(cls, score: int) -> "MatchStrength":
        """Convert a numeric compatibility score to a band."""
        if score >= SCORE_THRESHOLDS["strong"]:
            return cls.STRONG
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["weak"]:
            return cls.WEAK
        return cls.NONE

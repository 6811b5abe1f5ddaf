"""
Match result models for SkillMatch.

Match results are transient view objects: they are recomputed on every
request from the current directory state and never persisted.
"""

from typing import Any

from pydantic import Field

from skillmatch.utils.constants import (
    MAX_COMPATIBILITY_SCORE,
    SENSITIVE_PROFILE_FIELDS,
    MatchStrength,
)

from .base import EmbeddedModel
from .user import UserProfile


class MatchResult(EmbeddedModel):
    """Compatibility of one candidate with the requesting user."""

    user: UserProfile
    compatibility_score: int = Field(0, ge=0, le=MAX_COMPATIBILITY_SCORE)
    matching_skills: list[str] = Field(default_factory=list)
    skills_they_can_teach: list[str] = Field(default_factory=list)
    skills_you_can_teach: list[str] = Field(default_factory=list)

    @property
    def strength(self) -> MatchStrength:
        """Display band for the compatibility score."""
        return MatchStrength.from_score(self.compatibility_score)

    @property
    def is_mutual(self) -> bool:
        """True when both sides have something to teach the other."""
        return bool(self.skills_they_can_teach and self.skills_you_can_teach)

    def to_public_dict(self) -> dict[str, Any]:
        """
        Serialize for API responses.

        The candidate's credentials are stripped; keys are camelCase.
        """
        return self.to_json_dict(exclude={"user": set(SENSITIVE_PROFILE_FIELDS)})

"""
User profile data models for SkillMatch.

Defines the student profile schema consumed by the matching engine,
along with create/update schemas used by the user directory.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from skillmatch.utils.constants import SENSITIVE_PROFILE_FIELDS

from .base import BaseDocument, EmbeddedModel


def _empty_if_none(v: Any) -> Any:
    """Normalize a missing collection to an empty list."""
    return [] if v is None else v


class UserProfile(BaseDocument):
    """
    Student profile document.

    Skill labels are free text and keep the casing the user typed;
    matching compares them case-insensitively.
    """

    username: str
    password: Optional[str] = None
    full_name: str
    email: str
    academic_year: str = ""
    department: str = ""
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    banner_url: Optional[str] = None

    # Collections read by the matching engine; never None once validated
    skills_to_share: list[str] = Field(default_factory=list)
    skills_to_learn: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    portfolio_links: list[str] = Field(default_factory=list)

    profile_views: int = 0
    connections_count: int = 0

    @field_validator(
        "skills_to_share", "skills_to_learn", "interests", "portfolio_links",
        mode="before",
    )
    @classmethod
    def normalize_collections(cls, v: Any) -> Any:
        """Absent collections become empty lists."""
        return _empty_if_none(v)

    @field_validator("profile_views", "connections_count", mode="before")
    @classmethod
    def normalize_counters(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are stored lower-cased for lookups."""
        return v.strip().lower()

    @property
    def skill_count(self) -> int:
        """Total number of declared skills, shared and wanted."""
        return len(self.skills_to_share) + len(self.skills_to_learn)

    def to_public_dict(self) -> dict[str, Any]:
        """Serialize the profile without credentials."""
        return self.to_json_dict(exclude=set(SENSITIVE_PROFILE_FIELDS))


class UserCreate(EmbeddedModel):
    """Schema for registering a new user."""

    username: str = Field(..., min_length=1)
    password: Optional[str] = None
    full_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    academic_year: str = ""
    department: str = ""
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    banner_url: Optional[str] = None
    skills_to_share: list[str] = Field(default_factory=list)
    skills_to_learn: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    portfolio_links: list[str] = Field(default_factory=list)

    @field_validator(
        "skills_to_share", "skills_to_learn", "interests", "portfolio_links",
        mode="before",
    )
    @classmethod
    def normalize_collections(cls, v: Any) -> Any:
        return _empty_if_none(v)


class UserUpdate(EmbeddedModel):
    """Schema for updating a user profile (all fields optional)."""

    full_name: Optional[str] = None
    academic_year: Optional[str] = None
    department: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    banner_url: Optional[str] = None
    skills_to_share: Optional[list[str]] = None
    skills_to_learn: Optional[list[str]] = None
    interests: Optional[list[str]] = None
    portfolio_links: Optional[list[str]] = None

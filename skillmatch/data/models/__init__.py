"""
Pydantic data models and schemas for SkillMatch.

This module provides the directory documents, input schemas and
match result views used throughout the application.
"""

# Base models
from .base import BaseDocument, EmbeddedModel, TimestampMixin, utcnow

# User models
from .user import UserCreate, UserProfile, UserUpdate

# Match models
from .match import MatchResult

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedModel",
    "TimestampMixin",
    "utcnow",
    # User
    "UserCreate",
    "UserProfile",
    "UserUpdate",
    # Match
    "MatchResult",
]

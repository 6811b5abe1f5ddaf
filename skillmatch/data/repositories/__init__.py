"""
Directory repositories for SkillMatch data access.

This module provides the repository interface and its in-memory and
MongoDB backends, implementing the repository pattern for clean data access.
"""

# Base repository
from .base import BaseRepository

# Backends
from .memory import InMemoryRepository, matches_query
from .mongo import MongoRepository

# Entity repositories
from .user_repository import (
    InMemoryUserRepository,
    MongoUserRepository,
    UserRepository,
    get_user_repository,
    reset_user_repository,
)

__all__ = [
    # Base
    "BaseRepository",
    # Backends
    "InMemoryRepository",
    "MongoRepository",
    "matches_query",
    # User
    "InMemoryUserRepository",
    "MongoUserRepository",
    "UserRepository",
    "get_user_repository",
    "reset_user_repository",
]

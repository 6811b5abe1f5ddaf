"""
Shared test fixtures for the SkillMatch test suite.

Sets environment variables before any skillmatch imports so settings
resolve to the in-memory directory with quiet logging, then provides
profile factories and engine/directory/service fixtures.
"""

import os

# === Set environment BEFORE any skillmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DIRECTORY_BACKEND", "memory")
os.environ.setdefault("DIRECTORY_SEED_DEMO_DATA", "true")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("COLUMNS", "200")

from typing import Optional

import pytest

from skillmatch.core.matching import MatchingEngine, MatchService, reset_match_service
from skillmatch.data.models import UserProfile
from skillmatch.data.repositories import InMemoryUserRepository, reset_user_repository
from skillmatch.data.seed import seed_directory


# ---------------------------------------------------------------------------
# Profile factory
# ---------------------------------------------------------------------------


@pytest.fixture
def make_user():
    """Factory that returns a callable to build UserProfile documents."""

    def _factory(
        user_id: str = "user-x",
        skills_to_share: Optional[list[str]] = None,
        skills_to_learn: Optional[list[str]] = None,
        interests: Optional[list[str]] = None,
        full_name: Optional[str] = None,
        **kwargs,
    ) -> UserProfile:
        return UserProfile(
            id=user_id,
            username=kwargs.pop("username", user_id),
            full_name=full_name or f"Student {user_id}",
            email=kwargs.pop("email", f"{user_id}@university.edu"),
            skills_to_share=skills_to_share or [],
            skills_to_learn=skills_to_learn or [],
            interests=interests or [],
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Engine, directory and service fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    """MatchingEngine with the default scoring parameters."""
    return MatchingEngine(max_score=99, interest_bonus=20)


@pytest.fixture
def memory_repo():
    """Empty in-memory user directory."""
    return InMemoryUserRepository()


@pytest.fixture
def seeded_repo(memory_repo):
    """In-memory user directory holding the demo roster (user-1 .. user-5)."""
    seed_directory(memory_repo)
    return memory_repo


@pytest.fixture
def match_service(seeded_repo, matching_engine):
    return MatchService(seeded_repo, matching_engine)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Each test gets freshly built directory and service singletons."""
    reset_user_repository()
    reset_match_service()
    yield
    reset_user_repository()
    reset_match_service()

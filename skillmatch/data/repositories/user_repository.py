"""
User repository for SkillMatch.

Provides the user directory: profile lookups, registration, search, and
the candidate roster consumed by the matching service.
"""

import re
import uuid
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from skillmatch.core.exceptions import DirectoryError, DuplicateUserError
from skillmatch.data.models import UserCreate, UserProfile, UserUpdate
from skillmatch.data.seed import seed_directory
from skillmatch.utils.config import get_settings
from skillmatch.utils.constants import DirectoryBackend
from skillmatch.utils.logger import get_logger, sanitize_for_logging

from .base import BaseRepository
from .memory import InMemoryRepository
from .mongo import MongoRepository

logger = get_logger(__name__)

# Fields covered by free-text user search
SEARCH_FIELDS = ("fullName", "department", "skillsToShare", "skillsToLearn")

# Fields backed by unique indexes
UNIQUE_USER_FIELDS = ("username", "email")


class UserRepository(BaseRepository[UserProfile]):
    """User directory operations shared by every storage backend."""

    @property
    def model_class(self) -> type[UserProfile]:
        return UserProfile

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        """Get a user by username."""
        return self.find_one({"username": username})

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get a user by email address."""
        return self.find_one({"email": email.strip().lower()})

    def username_exists(self, username: str) -> bool:
        return self.exists({"username": username})

    def email_exists(self, email: str) -> bool:
        return self.exists({"email": email.strip().lower()})

    # -------------------------------------------------------------------------
    # Create / Update
    # -------------------------------------------------------------------------

    def create_from_schema(self, data: UserCreate) -> UserProfile:
        """
        Register a user, generating a new id.

        Raises:
            DuplicateUserError: If the username or email is already taken
        """
        logger.debug(f"Registering user: {sanitize_for_logging(data.model_dump(by_alias=True))}")
        user = UserProfile(id=str(uuid.uuid4()), **data.model_dump())
        return self._register(user)

    def _register(self, user: UserProfile) -> UserProfile:
        """Check username and email uniqueness, then insert."""
        if self.username_exists(user.username):
            raise DuplicateUserError("username", user.username)
        if self.email_exists(user.email):
            raise DuplicateUserError("email", user.email)
        return self.create(user)

    def update_from_schema(self, user_id: str, data: UserUpdate) -> Optional[UserProfile]:
        """Apply a partial profile update."""
        update_data = data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        if not update_data:
            return self.get_by_id(user_id)
        return self.update(user_id, update_data)

    # -------------------------------------------------------------------------
    # Roster & Search
    # -------------------------------------------------------------------------

    def get_all_except(self, user_id: str) -> list[UserProfile]:
        """Every user other than ``user_id``, in registration order."""
        return self.find({"id": {"$ne": user_id}}, limit=0, sort_by="createdAt", sort_order=1)

    def search_users(
        self,
        query: str,
        exclude_id: Optional[str] = None,
        limit: int = 50,
    ) -> list[UserProfile]:
        """
        Case-insensitive substring search over name, department and skills.

        Args:
            query: Text to look for; empty matches everyone
            exclude_id: User to leave out (usually the searcher)
            limit: Maximum number of users returned

        Returns:
            Matching users in registration order
        """
        filters: dict[str, Any] = {}
        if query.strip():
            pattern = re.escape(query.strip())
            filters["$or"] = [
                {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
            ]
        if exclude_id:
            filters["id"] = {"$ne": exclude_id}
        return self.find(filters, limit=limit, sort_by="createdAt", sort_order=1)


class InMemoryUserRepository(UserRepository, InMemoryRepository[UserProfile]):
    """User directory held in process memory."""

    def _register(self, user: UserProfile) -> UserProfile:
        # Uniqueness check and insert happen under one lock
        with self._lock:
            return super()._register(user)


class MongoUserRepository(UserRepository, MongoRepository[UserProfile]):
    """
    User directory stored in MongoDB.

    Uniqueness of ``username`` and ``email`` is enforced by the indexes
    from ``DatabaseManager.ensure_indexes``; a violation that slips past
    the pre-insert check is reported as ``DuplicateUserError``.
    """

    @property
    def collection_name(self) -> str:
        return get_settings().directory.users_collection

    def create(self, model: UserProfile) -> UserProfile:
        """Create a user document, mapping unique index violations."""
        try:
            return super().create(model)
        except DirectoryError as e:
            field = _duplicate_key_field(e.__cause__)
            if field in UNIQUE_USER_FIELDS:
                raise DuplicateUserError(field, getattr(model, field)) from e.__cause__
            raise


def _duplicate_key_field(error: Optional[BaseException]) -> Optional[str]:
    """Name of the indexed field behind a duplicate key error, if known."""
    if not isinstance(error, DuplicateKeyError):
        return None
    key_pattern = (error.details or {}).get("keyPattern") or {}
    return next(iter(key_pattern), None)


# Singleton instance
_user_repository: Optional[UserRepository] = None


def get_user_repository() -> UserRepository:
    """Get the user repository for the configured directory backend."""
    global _user_repository
    if _user_repository is None:
        directory_settings = get_settings().directory
        if directory_settings.backend == DirectoryBackend.MONGODB.value:
            _user_repository = MongoUserRepository()
        else:
            repository = InMemoryUserRepository()
            if directory_settings.seed_demo_data:
                seed_directory(repository)
            _user_repository = repository
        logger.info(f"User directory backend: {directory_settings.backend}")
    return _user_repository


def reset_user_repository() -> None:
    """Drop the cached repository so the next call re-reads settings."""
    global _user_repository
    _user_repository = None

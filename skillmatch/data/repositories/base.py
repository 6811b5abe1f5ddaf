"""
Base repository class defining the directory's CRUD and query operations.

Concrete backends (in-memory, MongoDB) implement the storage primitives;
queries use MongoDB filter syntax so callers stay backend-agnostic.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from skillmatch.data.models.base import BaseDocument

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)

# Stored documents are ordered by creation time unless told otherwise
DEFAULT_SORT_FIELD = "createdAt"


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common directory operations.

    Query dicts support equality (array fields match on membership),
    ``$eq``, ``$ne``, ``$in``, ``$nin``, ``$regex``/``$options`` and
    top-level ``$or``. Field names are the camelCase document keys.
    A ``limit`` of 0 means no limit.
    """

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    # -------------------------------------------------------------------------
    # Storage Primitives
    # -------------------------------------------------------------------------

    @abstractmethod
    def create(self, model: T) -> T:
        """Create a new document."""

    @abstractmethod
    def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a document by its ID, or None if it does not exist."""

    @abstractmethod
    def find(
        self,
        query: dict[str, Any],
        skip: int = 0,
        limit: int = 100,
        sort_by: Optional[str] = None,
        sort_order: int = -1,
    ) -> list[T]:
        """Find documents matching a query."""

    @abstractmethod
    def update(self, id_value: str, update_data: dict[str, Any]) -> Optional[T]:
        """Set fields on a document; returns the updated model or None."""

    @abstractmethod
    def delete(self, id_value: str) -> bool:
        """Delete a document by ID."""

    @abstractmethod
    def count(self, query: Optional[dict[str, Any]] = None) -> int:
        """Count documents matching a query."""

    # -------------------------------------------------------------------------
    # Derived Operations
    # -------------------------------------------------------------------------

    def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        sort_by: Optional[str] = None,
        sort_order: int = -1,
    ) -> list[T]:
        """Get all documents with pagination."""
        return self.find({}, skip=skip, limit=limit, sort_by=sort_by, sort_order=sort_order)

    def find_one(self, query: dict[str, Any]) -> Optional[T]:
        """Find a single document matching a query."""
        results = self.find(query, limit=1)
        return results[0] if results else None

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return every document for which ``predicate`` is true."""
        return [model for model in self.find({}, limit=0) if predicate(model)]

    def exists(self, query: dict[str, Any]) -> bool:
        """Check if any document matches the query."""
        return self.find_one(query) is not None

    def bulk_create(self, models: list[T]) -> list[T]:
        """Create multiple documents at once."""
        return [self.create(model) for model in models]

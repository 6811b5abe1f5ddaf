"""
In-memory repository backend.

Keeps documents in a process-local dict. Used for demos, tests and
single-process deployments; evaluates the same MongoDB-style filters as
the MongoDB backend.
"""

import re
import threading
from typing import Any, Optional

from skillmatch.core.exceptions import DirectoryError
from skillmatch.data.models.base import utcnow
from skillmatch.utils.logger import get_logger

from .base import DEFAULT_SORT_FIELD, BaseRepository, T

logger = get_logger(__name__)


def _equals(value: Any, expected: Any) -> bool:
    """MongoDB equality: an array field matches if it contains the value."""
    if isinstance(value, list) and not isinstance(expected, list):
        return expected in value
    return value == expected


def _regex_matches(value: Any, pattern: str, options: str) -> bool:
    flags = re.IGNORECASE if "i" in options else 0
    values = value if isinstance(value, list) else [value]
    return any(isinstance(v, str) and re.search(pattern, v, flags) for v in values)


def _apply_operators(value: Any, condition: dict[str, Any]) -> bool:
    for op, operand in condition.items():
        if op == "$eq":
            ok = _equals(value, operand)
        elif op == "$ne":
            ok = not _equals(value, operand)
        elif op == "$in":
            ok = any(_equals(value, o) for o in operand)
        elif op == "$nin":
            ok = not any(_equals(value, o) for o in operand)
        elif op == "$regex":
            ok = _regex_matches(value, operand, condition.get("$options", ""))
        elif op == "$options":
            continue
        else:
            raise ValueError(f"Unsupported query operator: {op}")
        if not ok:
            return False
    return True


def matches_query(document: dict[str, Any], query: dict[str, Any]) -> bool:
    """Evaluate a MongoDB-style filter against a document."""
    for field, condition in query.items():
        if field == "$or":
            if not any(matches_query(document, sub) for sub in condition):
                return False
            continue

        value = document.get(field)
        if isinstance(condition, dict) and any(k.startswith("$") for k in condition):
            if not _apply_operators(value, condition):
                return False
        elif not _equals(value, condition):
            return False
    return True


def _sort_key(value: Any) -> tuple:
    # Missing values sort lowest, as in MongoDB
    return (value is not None, value)


class InMemoryRepository(BaseRepository[T]):
    """Dict-backed repository; documents are stored as camelCase dicts."""

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}
        self._lock = threading.RLock()

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        if document is None:
            return None
        return self.model_class.model_validate(document)

    def create(self, model: T) -> T:
        """Create a new document."""
        document = model.model_dump_document()
        with self._lock:
            if model.id in self._documents:
                raise DirectoryError(f"Document already exists: {model.id}")
            self._documents[model.id] = document
        logger.debug(f"Created {self.model_class.__name__} document: {model.id}")
        return model

    def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a document by its ID."""
        with self._lock:
            document = self._documents.get(id_value)
        return self._to_model(document)

    def find(
        self,
        query: dict[str, Any],
        skip: int = 0,
        limit: int = 100,
        sort_by: Optional[str] = None,
        sort_order: int = -1,
    ) -> list[T]:
        """Find documents matching a query."""
        with self._lock:
            documents = [doc for doc in self._documents.values() if matches_query(doc, query)]

        sort_field = sort_by or DEFAULT_SORT_FIELD
        documents.sort(key=lambda doc: _sort_key(doc.get(sort_field)), reverse=sort_order < 0)

        documents = documents[skip:]
        if limit:
            documents = documents[:limit]
        return [self._to_model(doc) for doc in documents]

    def update(self, id_value: str, update_data: dict[str, Any]) -> Optional[T]:
        """Update a document by ID."""
        with self._lock:
            current = self._documents.get(id_value)
            if current is None:
                return None
            merged = {**current, **update_data, "updatedAt": utcnow()}
            model = self.model_class.model_validate(merged)
            self._documents[id_value] = model.model_dump_document()
        logger.debug(f"Updated {self.model_class.__name__} document: {id_value}")
        return model

    def delete(self, id_value: str) -> bool:
        """Delete a document by ID."""
        with self._lock:
            removed = self._documents.pop(id_value, None)
        if removed is not None:
            logger.debug(f"Deleted {self.model_class.__name__} document: {id_value}")
            return True
        return False

    def count(self, query: Optional[dict[str, Any]] = None) -> int:
        """Count documents matching a query."""
        with self._lock:
            if not query:
                return len(self._documents)
            return sum(1 for doc in self._documents.values() if matches_query(doc, query))

    def clear(self) -> None:
        """Remove every document."""
        with self._lock:
            self._documents.clear()

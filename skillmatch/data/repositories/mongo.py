"""
MongoDB repository backend.

Implements the directory operations on a MongoDB collection, with
synchronous (PyMongo) operations and asynchronous (Motor) read paths.
"""

from abc import abstractmethod
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.results import DeleteResult, UpdateResult

from skillmatch.core.exceptions import DirectoryError
from skillmatch.data.database import get_database_manager
from skillmatch.data.models.base import utcnow
from skillmatch.utils.logger import get_logger

from .base import DEFAULT_SORT_FIELD, BaseRepository, T

logger = get_logger(__name__)


class MongoRepository(BaseRepository[T]):
    """
    Repository backed by a MongoDB collection.

    Document ids are stored in ``_id``; queries may use ``id`` and are
    translated before reaching the server.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    def __init__(self) -> None:
        """Initialize repository with database connection."""
        self._db_manager = get_database_manager()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_sync_collection(self) -> Collection:
        """Get synchronous collection instance."""
        return self._db_manager.get_sync_collection(self.collection_name)

    def _get_async_collection(self) -> AsyncIOMotorCollection:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(self.collection_name)

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert MongoDB document to Pydantic model."""
        if document is None:
            return None
        data = dict(document)
        data["id"] = data.pop("_id")
        return self.model_class.model_validate(data)

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert list of MongoDB documents to Pydantic models."""
        return [self._to_model(doc) for doc in documents if doc is not None]

    def _to_document(self, model: T) -> dict[str, Any]:
        """Convert Pydantic model to MongoDB document."""
        document = model.model_dump_document()
        document["_id"] = document.pop("id")
        return document

    @classmethod
    def _translate_query(cls, query: dict[str, Any]) -> dict[str, Any]:
        """Map the public ``id`` key to ``_id``, including inside ``$or``."""
        translated: dict[str, Any] = {}
        for field, condition in query.items():
            if field == "$or":
                translated[field] = [cls._translate_query(sub) for sub in condition]
            elif field == "id":
                translated["_id"] = condition
            else:
                translated[field] = condition
        return translated

    @staticmethod
    def _sort_spec(sort_by: Optional[str], sort_order: int) -> list[tuple[str, int]]:
        direction = DESCENDING if sort_order < 0 else ASCENDING
        return [(sort_by or DEFAULT_SORT_FIELD, direction)]

    # -------------------------------------------------------------------------
    # Synchronous CRUD Operations
    # -------------------------------------------------------------------------

    def create(self, model: T) -> T:
        """Create a new document."""
        collection = self._get_sync_collection()
        try:
            collection.insert_one(self._to_document(model))
        except DuplicateKeyError as e:
            raise DirectoryError(f"Document already exists: {model.id}") from e
        except PyMongoError as e:
            raise DirectoryError(f"Failed to create {self.collection_name} document") from e

        logger.debug(f"Created {self.collection_name} document: {model.id}")
        return model

    def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a document by its ID."""
        collection = self._get_sync_collection()
        try:
            document = collection.find_one({"_id": id_value})
        except PyMongoError as e:
            raise DirectoryError(f"Failed to fetch {self.collection_name} document {id_value}") from e
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
        collection = self._get_sync_collection()
        try:
            cursor = (
                collection.find(self._translate_query(query))
                .sort(self._sort_spec(sort_by, sort_order))
                .skip(skip)
                .limit(limit)
            )
            documents = list(cursor)
        except PyMongoError as e:
            raise DirectoryError(f"Failed to query {self.collection_name}") from e
        return self._to_models(documents)

    def update(self, id_value: str, update_data: dict[str, Any]) -> Optional[T]:
        """Update a document by ID."""
        collection = self._get_sync_collection()
        update_data = {**update_data, "updatedAt": utcnow()}
        try:
            result: UpdateResult = collection.update_one(
                {"_id": id_value},
                {"$set": update_data},
            )
        except PyMongoError as e:
            raise DirectoryError(f"Failed to update {self.collection_name} document {id_value}") from e

        if result.matched_count > 0:
            logger.debug(f"Updated {self.collection_name} document: {id_value}")
            return self.get_by_id(id_value)
        return None

    def delete(self, id_value: str) -> bool:
        """Delete a document by ID."""
        collection = self._get_sync_collection()
        try:
            result: DeleteResult = collection.delete_one({"_id": id_value})
        except PyMongoError as e:
            raise DirectoryError(f"Failed to delete {self.collection_name} document {id_value}") from e
        if result.deleted_count > 0:
            logger.debug(f"Deleted {self.collection_name} document: {id_value}")
            return True
        return False

    def count(self, query: Optional[dict[str, Any]] = None) -> int:
        """Count documents matching a query."""
        collection = self._get_sync_collection()
        try:
            return collection.count_documents(self._translate_query(query or {}))
        except PyMongoError as e:
            raise DirectoryError(f"Failed to count {self.collection_name}") from e

    def bulk_create(self, models: list[T]) -> list[T]:
        """Create multiple documents at once."""
        if not models:
            return []

        collection = self._get_sync_collection()
        try:
            collection.insert_many([self._to_document(model) for model in models])
        except PyMongoError as e:
            raise DirectoryError(f"Failed to bulk create {self.collection_name} documents") from e

        logger.debug(f"Bulk created {len(models)} {self.collection_name} documents")
        return models

    # -------------------------------------------------------------------------
    # Asynchronous Read Operations
    # -------------------------------------------------------------------------

    async def get_by_id_async(self, id_value: str) -> Optional[T]:
        """Get a document by its ID asynchronously."""
        collection = self._get_async_collection()
        try:
            document = await collection.find_one({"_id": id_value})
        except PyMongoError as e:
            raise DirectoryError(f"Failed to fetch {self.collection_name} document {id_value}") from e
        return self._to_model(document)

    async def find_async(
        self,
        query: dict[str, Any],
        skip: int = 0,
        limit: int = 100,
        sort_by: Optional[str] = None,
        sort_order: int = -1,
    ) -> list[T]:
        """Find documents matching a query asynchronously."""
        collection = self._get_async_collection()
        try:
            cursor = (
                collection.find(self._translate_query(query))
                .sort(self._sort_spec(sort_by, sort_order))
                .skip(skip)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit or None)
        except PyMongoError as e:
            raise DirectoryError(f"Failed to query {self.collection_name}") from e
        return self._to_models(documents)

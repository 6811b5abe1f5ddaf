"""
Database connection manager for SkillMatch.

Provides MongoDB connection management with both synchronous (PyMongo)
and asynchronous (Motor) client support for the MongoDB directory backend.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from skillmatch.utils.config import get_settings
from skillmatch.utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Manages MongoDB database connections.

    Clients are created lazily and reused across repositories.
    """

    def __init__(self) -> None:
        """Initialize database manager with settings."""
        self._settings = get_settings()
        self._db_name = self._settings.database.name
        self._uri = self._build_uri()
        self._sync_client: Optional[MongoClient] = None
        self._async_client: Optional[AsyncIOMotorClient] = None

    def _build_uri(self) -> str:
        """
        Build MongoDB connection URI from settings.

        Security: URL-encodes credentials to prevent injection attacks.
        """
        db_settings = self._settings.database

        host = db_settings.host.strip()
        if not host or any(c in host for c in [";", "&", "|", "$", "`"]):
            raise ValueError(f"Invalid database host: {host}")

        auth = ""
        if db_settings.username and db_settings.password:
            encoded_user = quote_plus(db_settings.username)
            encoded_pass = quote_plus(db_settings.password)
            auth = f"{encoded_user}:{encoded_pass}@"

        return f"mongodb://{auth}{host}:{db_settings.port}"

    # -------------------------------------------------------------------------
    # Synchronous Client
    # -------------------------------------------------------------------------

    def get_sync_client(self) -> MongoClient:
        """Get or create synchronous MongoDB client."""
        if self._sync_client is None:
            logger.info("Creating synchronous MongoDB client")
            self._sync_client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                maxPoolSize=50,
            )
        return self._sync_client

    def get_sync_database(self) -> Database:
        """Get synchronous database instance."""
        return self.get_sync_client()[self._db_name]

    def get_sync_collection(self, collection_name: str) -> Any:
        """Get a synchronous collection by name."""
        return self.get_sync_database()[collection_name]

    def check_sync_connection(self) -> bool:
        """Check if synchronous connection is healthy."""
        try:
            self.get_sync_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Sync connection check failed: {e}")
            self._sync_client = None
            return False

    # -------------------------------------------------------------------------
    # Asynchronous Client
    # -------------------------------------------------------------------------

    def get_async_client(self) -> AsyncIOMotorClient:
        """Get or create asynchronous MongoDB client."""
        if self._async_client is None:
            logger.info("Creating asynchronous MongoDB client")
            self._async_client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                maxPoolSize=50,
            )
        return self._async_client

    def get_async_database(self) -> AsyncIOMotorDatabase:
        """Get asynchronous database instance."""
        return self.get_async_client()[self._db_name]

    def get_async_collection(self, collection_name: str) -> Any:
        """Get an asynchronous collection by name."""
        return self.get_async_database()[collection_name]

    # -------------------------------------------------------------------------
    # Lifecycle Management
    # -------------------------------------------------------------------------

    def close_all(self) -> None:
        """Close all database connections."""
        if self._sync_client:
            logger.info("Closing synchronous MongoDB client")
            self._sync_client.close()
            self._sync_client = None
        if self._async_client:
            logger.info("Closing asynchronous MongoDB client")
            self._async_client.close()
            self._async_client = None

    # -------------------------------------------------------------------------
    # Index Management
    # -------------------------------------------------------------------------

    def ensure_indexes(self) -> None:
        """Create indexes for the user directory collection."""
        logger.info("Ensuring database indexes")

        users = self.get_sync_collection(self._settings.directory.users_collection)
        users.create_index("username", unique=True)
        users.create_index("email", unique=True)
        users.create_index("skillsToShare")
        users.create_index("skillsToLearn")
        users.create_index([("createdAt", ASCENDING)])

        logger.info("Database indexes created successfully")


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager

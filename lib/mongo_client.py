# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# Owns the async MongoDB connection for the lifetime of the app.
# The client is created in the FastAPI lifespan, stored on app.state and
# handed to routes through app.dependencies.get_database.
#
# Usage:
#   mongo = MongoClient(settings.MONGODB_URL, settings.MONGODB_DATABASE)
#   await mongo.connect()
#   hotels = mongo.db[HOTELS_COLLECTION]
#   await mongo.close()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

HOTELS_COLLECTION = "hotels"
REVIEWS_COLLECTION = "reviews"


class MongoClientError(Exception):
    """
    Error during MongoDB connection management.

    Carries a suggestion so startup failures say how to fix them.
    """

    def __init__(
        self,
        message: str,
        code: str = "MONGODB_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class MongoClient:
    """
    Thin wrapper around pymongo's AsyncMongoClient.

    One instance per process, created at startup and closed at shutdown.
    """

    def __init__(self, url: str, database_name: str):
        self.url = url
        self.database_name = database_name
        self._client: AsyncMongoClient | None = None

    async def connect(self) -> None:
        """Create the client and verify the server answers."""
        if self._client is not None:
            return

        try:
            self._client = AsyncMongoClient(self.url)
            await self.ping()
            logger.info(f"MongoDB connected: database={self.database_name}")
        except PyMongoError as e:
            raise MongoClientError(
                message=f"Failed to connect to MongoDB: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check MONGODB_URL in your .env file and that mongod is running",
            ) from e

    async def close(self) -> None:
        """Close the connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    @property
    def db(self) -> AsyncDatabase:
        """The application database."""
        if self._client is None:
            raise MongoClientError(
                message="MongoDB client is not connected",
                code="CLIENT_NOT_CONNECTED",
                suggestion="Call connect() during application startup",
            )
        return self._client[self.database_name]

    async def ping(self) -> bool:
        """Round-trip to the server; raises on failure."""
        if self._client is None:
            return False
        await self._client.admin.command("ping")
        return True

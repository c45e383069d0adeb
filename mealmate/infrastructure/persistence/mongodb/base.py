"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Connection management
- Document mapping (domain <-> MongoDB)
- Error handling with logging
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from mealmate.infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Storage errors are logged with the collection name and re-raised.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} "
            f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self._collection

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return await self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _replace_one(
        self,
        filter_dict: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = True,
    ) -> None:
        try:
            await self._collection.replace_one(filter_dict, document, upsert=upsert)
        except Exception as e:
            logger.error(
                f"Error in replace_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        try:
            return await self._collection.count_documents(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")

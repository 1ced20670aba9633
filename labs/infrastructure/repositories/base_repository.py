"""
MongoDB Repository - Infrastructure Layer

Generic MongoDB implementation of the repository interface. Entities are
dataclasses; documents mirror their fields with UUIDs stored as strings and
enums stored by value. Deletes are soft: ``deleted_at`` is set and every
query filters on ``deleted_at: None``.
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar
from uuid import UUID

import structlog
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from labs.domain.entities.base import Entity, utc_now
from labs.domain.entities.errors import NotFoundError, OperationError
from labs.domain.repositories.base import IRepository
from labs.infrastructure.database.mongo_database import MongoDatabase

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=Entity)


def _is_identifier(field_name: str) -> bool:
    return field_name == "id" or field_name.endswith("_id")


class MongoRepository(IRepository[T]):
    """Base class for the collection-backed repositories."""

    COLLECTION_NAME: str = ""
    RESOURCE_NAME: str = "Record"
    ENTITY_CLASS: Type[T]

    def __init__(self, database: MongoDatabase):
        """
        Initialize repository with database connection.

        Args:
            database: MongoDB database client
        """
        self.database = database

    @property
    def collection(self) -> Collection:
        return self.database.get_collection(self.COLLECTION_NAME)

    # ----------------------------------------------------------------- mapping

    @classmethod
    def _encode(cls, value: Any) -> Any:
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (list, tuple)):
            return [cls._encode(item) for item in value]
        if isinstance(value, dict):
            return {key: cls._encode(item) for key, item in value.items()}
        return value

    def _to_document(self, entity: T) -> Dict[str, Any]:
        """Convert an entity to a MongoDB document."""
        return {
            entity_field.name: self._encode(getattr(entity, entity_field.name))
            for entity_field in fields(entity)
        }

    def _to_entity(self, document: Dict[str, Any]) -> T:
        """Convert a MongoDB document to an entity, ignoring unknown keys."""
        values: Dict[str, Any] = {}
        for entity_field in fields(self.ENTITY_CLASS):
            if entity_field.name not in document:
                continue
            value = document[entity_field.name]
            if value is not None:
                field_type = entity_field.type
                if _is_identifier(entity_field.name) and isinstance(value, str):
                    value = UUID(value)
                elif isinstance(field_type, type) and issubclass(field_type, Enum):
                    value = field_type(value)
            values[entity_field.name] = value
        return self.ENTITY_CLASS(**values)

    def _query(self, **filters: Any) -> Dict[str, Any]:
        query = {key: self._encode(value) for key, value in filters.items()}
        query["deleted_at"] = None
        return query

    def _failure(
        self, operation: str, error: Exception, **context: Any
    ) -> OperationError:
        logger.error(
            "repository.operation.failed",
            collection=self.COLLECTION_NAME,
            operation=operation,
            error=str(error),
            **context,
        )
        return OperationError(
            f"Failed to {operation} {self.RESOURCE_NAME.lower()}",
            details={"collection": self.COLLECTION_NAME},
        )

    # -------------------------------------------------------------- operations

    async def create(self, entity: T) -> T:
        try:
            result = self.collection.insert_one(self._to_document(entity))
        except PyMongoError as e:
            raise self._failure("create", e, entity_id=str(entity.id)) from e

        if not result.acknowledged:
            raise OperationError(f"Failed to create {self.RESOURCE_NAME.lower()}")

        logger.debug(
            "repository.created",
            collection=self.COLLECTION_NAME,
            entity_id=str(entity.id),
        )
        return entity

    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        return await self.find_one(id=entity_id)

    async def find_one(self, **filters: Any) -> Optional[T]:
        try:
            document = self.collection.find_one(self._query(**filters))
        except PyMongoError as e:
            raise self._failure("read", e) from e
        return self._to_entity(document) if document else None

    async def find_page(
        self, skip: int = 0, limit: int = 10, **filters: Any
    ) -> List[T]:
        try:
            cursor = (
                self.collection.find(self._query(**filters))
                .sort("created_at", ASCENDING)
                .skip(skip)
                .limit(limit)
            )
            documents = list(cursor)
        except PyMongoError as e:
            raise self._failure("list", e, skip=skip, limit=limit) from e
        return [self._to_entity(document) for document in documents]

    async def find_all(self, **filters: Any) -> List[T]:
        try:
            cursor = self.collection.find(self._query(**filters)).sort(
                "created_at", ASCENDING
            )
            documents = list(cursor)
        except PyMongoError as e:
            raise self._failure("list", e) from e
        return [self._to_entity(document) for document in documents]

    async def count(self, **filters: Any) -> int:
        try:
            return self.collection.count_documents(self._query(**filters))
        except PyMongoError as e:
            raise self._failure("count", e) from e

    async def update(self, entity: T) -> T:
        entity.update_timestamp()
        try:
            result = self.collection.replace_one(
                self._query(id=entity.id), self._to_document(entity)
            )
        except PyMongoError as e:
            raise self._failure("update", e, entity_id=str(entity.id)) from e

        if result.matched_count == 0:
            raise NotFoundError(self.RESOURCE_NAME, entity.id)
        return entity

    async def delete(self, entity_id: UUID) -> bool:
        now = utc_now()
        try:
            result = self.collection.update_one(
                self._query(id=entity_id),
                {"$set": {"deleted_at": now, "updated_at": now}},
            )
        except PyMongoError as e:
            raise self._failure("delete", e, entity_id=str(entity_id)) from e

        deleted = result.modified_count > 0
        if deleted:
            logger.info(
                "repository.deleted",
                collection=self.COLLECTION_NAME,
                entity_id=str(entity_id),
            )
        return deleted

    async def delete_many(self, **filters: Any) -> int:
        now = utc_now()
        try:
            result = self.collection.update_many(
                self._query(**filters),
                {"$set": {"deleted_at": now, "updated_at": now}},
            )
        except PyMongoError as e:
            raise self._failure("delete", e) from e
        return result.modified_count

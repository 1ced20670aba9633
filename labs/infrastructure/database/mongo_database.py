"""
MongoDB Database - Infrastructure Layer

This module owns the MongoDB client used by every repository and the index
definitions of the collections.
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

import pymongo.errors
import structlog
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)

IndexKeys = Union[str, Sequence[Tuple[str, int]]]

_BY_COMPANY_USER = [("company_id", ASCENDING), ("user_id", ASCENDING)]
_BY_TEST_CANDIDATE = [("test_id", ASCENDING), ("candidate_id", ASCENDING)]

# (collection, keys, options)
INDEXES: List[Tuple[str, IndexKeys, Dict[str, Any]]] = [
    ("companies", "id", {"name": "id_idx", "unique": True}),
    ("users", "id", {"name": "id_idx", "unique": True}),
    ("users", "email", {"name": "email_idx"}),
    (
        "users",
        [("company_id", ASCENDING), ("gender", ASCENDING)],
        {"name": "company_gender_idx"},
    ),
    (
        "roles",
        [("company_id", ASCENDING), ("name", ASCENDING)],
        {"name": "company_name_idx"},
    ),
    (
        "features",
        [("company_id", ASCENDING), ("name", ASCENDING)],
        {"name": "company_name_idx"},
    ),
    (
        "permissions",
        [("company_id", ASCENDING), ("role_id", ASCENDING), ("feature_id", ASCENDING)],
        {"name": "company_role_feature_idx"},
    ),
    ("condidats", "email", {"name": "email_idx"}),
    ("condidats", "company_id", {"name": "company_idx"}),
    (
        "interns",
        [("company_id", ASCENDING), ("supervisor_id", ASCENDING)],
        {"name": "company_supervisor_idx"},
    ),
    (
        "projects",
        [("company_id", ASCENDING), ("code", ASCENDING)],
        {"name": "company_code_idx"},
    ),
    (
        "projects_condidats",
        [("candidate_id", ASCENDING), ("created_at", DESCENDING)],
        {"name": "candidate_created_idx"},
    ),
    (
        "questions",
        [("company_id", ASCENDING), ("associated_technology", ASCENDING)],
        {"name": "company_technology_idx"},
    ),
    ("tests", "company_id", {"name": "company_idx"}),
    ("test_questions", _BY_TEST_CANDIDATE, {"name": "test_candidate_idx"}),
    ("test_condidats", _BY_TEST_CANDIDATE, {"name": "test_candidate_idx"}),
    ("presences", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    ("mission_orders", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    ("training_requests", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    (
        "notifications",
        [("user_id", ASCENDING), ("seen", ASCENDING)],
        {"name": "user_seen_idx"},
    ),
    ("user_experiences", "company_id", {"name": "company_idx"}),
    ("leave_requests", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    ("exit_permissions", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    ("advance_salary_requests", _BY_COMPANY_USER, {"name": "company_user_idx"}),
    ("loan_requests", _BY_COMPANY_USER, {"name": "company_user_idx"}),
]


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        The client connects lazily, so building it does not require a running
        server.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    def ping(self) -> None:
        """Round-trip to the server; raises PyMongoError when unreachable."""
        self.client.admin.command("ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create the indexes used by the repositories.

        Called during application startup. A failing index is logged and does
        not prevent the API from starting.
        """
        for collection_name, keys, options in INDEXES:
            try:
                self.db[collection_name].create_index(keys, background=True, **options)
            except pymongo.errors.PyMongoError as e:
                logger.warning(
                    "mongo.index.failed",
                    collection=collection_name,
                    index=options.get("name"),
                    error=str(e),
                )
        logger.info("mongo.indexes.ensured", count=len(INDEXES))

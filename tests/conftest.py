from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Sequence, cast

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from labs.domain.entities.base import Entity  # noqa: E402
from labs.domain.entities.organization import Company, Role, User  # noqa: E402
from labs.domain.entities.session import SessionRole, UserSession  # noqa: E402
from labs.domain.services.tenancy_guard import TenancyGuard  # noqa: E402
from labs.infrastructure.database.mongo_database import MongoDatabase  # noqa: E402
from labs.infrastructure.repositories import (  # noqa: E402
    CompanyRepository,
    MongoRepository,
    RoleRepository,
    UserRepository,
)
from labs.infrastructure.security import (  # noqa: E402
    BcryptPasswordHasher,
    JWTTokenService,
)

TEST_JWT_SECRET = "unit-test-secret-with-enough-length-for-hs256"


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


def _bson_value(value: Any) -> Any:
    """What a tz_aware MongoClient hands back for a stored value."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, dict):
        return {key: _bson_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_bson_value(item) for item in value]
    return value


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []
        self.fail_with: Exception | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self._check()
        self.last_query = query
        for document in self.documents:
            if self._matches(document, query):
                return dict(document)
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self._check()
        self.last_query = query
        return FakeCursor(
            [dict(doc) for doc in self.documents if self._matches(doc, query)]
        )

    def count_documents(self, query: Dict[str, Any]) -> int:
        self._check()
        self.last_query = query
        return sum(1 for doc in self.documents if self._matches(doc, query))

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self._check()
        self.documents.append(_bson_value(dict(document)))
        return SimpleNamespace(acknowledged=True, inserted_id=document["id"])

    def replace_one(self, query: Dict[str, Any], document: Dict[str, Any]) -> Any:
        self._check()
        for index, current in enumerate(self.documents):
            if self._matches(current, query):
                self.documents[index] = _bson_value(dict(document))
                return SimpleNamespace(matched_count=1, acknowledged=True)
        return SimpleNamespace(matched_count=0, acknowledged=True)

    def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> Any:
        return self._update(query, update, many=False)

    def update_many(self, query: Dict[str, Any], update: Dict[str, Any]) -> Any:
        return self._update(query, update, many=True)

    def _update(self, query: Dict[str, Any], update: Dict[str, Any], many: bool) -> Any:
        self._check()
        modified = 0
        for document in self.documents:
            if self._matches(document, query):
                document.update(_bson_value(update.get("$set", {})))
                modified += 1
                if not many:
                    break
        return SimpleNamespace(
            matched_count=modified, modified_count=modified, acknowledged=True
        )

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self._check()
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if isinstance(value, dict) and "$in" in value:
                if document.get(key) not in value["$in"]:
                    return False
            elif document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    def __init__(self, name: str = "labs_test") -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.db = SimpleNamespace(name=name)
        self.ping_error: Exception | None = None
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    def ping(self) -> None:
        if self.ping_error is not None:
            raise self.ping_error

    async def create_indexes(self) -> None:
        return None

    def close(self) -> None:
        self.closed = True


def store(database: FakeMongoDatabase, repository_class: type, entity: Entity) -> Entity:
    """Insert an entity straight into the fake collection of its repository."""
    repository: MongoRepository = repository_class(database)
    repository.collection.insert_one(repository._to_document(entity))
    return entity


def session_for(user: User, *roles: Role) -> UserSession:
    return UserSession(
        user_id=user.id,
        company_id=user.company_id,
        roles=[
            SessionRole(id=role.id, name=role.name, company_id=role.company_id)
            for role in roles
        ],
    )


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture()
def token_service() -> JWTTokenService:
    return JWTTokenService(secret=TEST_JWT_SECRET, duration_hours=1)


@pytest.fixture()
def organization(fake_mongo_database, password_hasher) -> SimpleNamespace:
    """A company with a manager role and one manager user, already stored."""
    company = Company(name="Labs")
    role = Role(name="Manager", company_id=company.id)
    manager = User(
        first_name="Amira",
        last_name="Ben Salah",
        email="amira@example.com",
        password=password_hasher.hash("a-long-secret"),
        gender="female",
        company_id=company.id,
        role_id=role.id,
    )
    company.created_by_user_id = manager.id
    role.created_by_user_id = manager.id

    store(fake_mongo_database, CompanyRepository, company)
    store(fake_mongo_database, RoleRepository, role)
    store(fake_mongo_database, UserRepository, manager)

    return SimpleNamespace(
        company=company,
        role=role,
        manager=manager,
        session=session_for(manager, role),
    )


@pytest.fixture()
def other_organization(fake_mongo_database) -> SimpleNamespace:
    company = Company(name="Other Corp")
    user = User(
        first_name="Karim",
        last_name="Haddad",
        email="karim@other.example.com",
        company_id=company.id,
    )
    store(fake_mongo_database, CompanyRepository, company)
    store(fake_mongo_database, UserRepository, user)
    return SimpleNamespace(company=company, user=user, session=session_for(user))


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture()
def tomorrow(dummy_now) -> datetime:
    return dummy_now + timedelta(days=1)


@pytest.fixture()
def tenancy_guard(fake_mongo_database) -> TenancyGuard:
    return TenancyGuard(UserRepository(cast(MongoDatabase, fake_mongo_database)))

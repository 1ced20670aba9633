"""
Application Use Cases - Shared behaviour

Every resource of the API is addressed by a company ID and goes through the
same steps: check the caller belongs to the company, load records scoped to
that company, map them to DTOs and page them. The classes below hold those
steps so the resource use cases only describe what differs.
"""

from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar
from uuid import UUID

import structlog
from pydantic import BaseModel

from labs.application.dtos.common import CountDTO, CreatedDTO, PageDTO
from labs.application.services.notifier import Notifier
from labs.domain.entities.base import Entity
from labs.domain.entities.errors import NotFoundError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.repositories.base import IRepository
from labs.domain.services.tenancy_guard import TenancyGuard

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Entity)


class CompanyScopedUseCase:
    """Base class for use cases addressed by a company ID."""

    def __init__(self, tenancy_guard: TenancyGuard):
        self.tenancy_guard = tenancy_guard

    async def _authorize(self, session: UserSession, company_id: UUID) -> None:
        await self.tenancy_guard.check_employee_belonging(company_id, session)

    @staticmethod
    async def _get_in_company(
        repository: IRepository[E], entity_id: UUID, company_id: UUID, resource: str
    ) -> E:
        """Load a record, hiding records of other companies as not found."""
        entity = await repository.find_by_id(entity_id)
        if entity is None or getattr(entity, "company_id", None) != company_id:
            raise NotFoundError(resource, entity_id)
        return entity

    @staticmethod
    async def _paginate(
        repository: IRepository[E],
        pagination: Pagination,
        mapper: Callable[[E], Any],
        **filters: Any,
    ) -> PageDTO:
        entities = await repository.find_page(
            skip=pagination.offset, limit=pagination.limit, **filters
        )
        total = await repository.count(**filters)
        return PageDTO(
            items=[mapper(entity) for entity in entities],
            page=pagination.page,
            limit=pagination.limit,
            total_count=total,
        )

    @staticmethod
    def _changes(payload: BaseModel) -> Dict[str, Any]:
        """Fields explicitly sent in a partial update."""
        return payload.model_dump(exclude_unset=True, exclude_none=True)

    @staticmethod
    def _diff(entity: E, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Subset of ``changes`` whose value differs from the entity's."""
        return {
            name: value
            for name, value in changes.items()
            if getattr(entity, name, None) != value
        }

    @staticmethod
    def _apply(entity: E, changes: Dict[str, Any]) -> None:
        for name, value in changes.items():
            setattr(entity, name, value)


class EmployeeRecordUseCase(CompanyScopedUseCase, Generic[E]):
    """
    CRUD for records owned by one employee of a company.

    Routes look like ``/{company_id}/{user_id}/...``: the caller must belong
    to the company and the addressed employee must be a member of it.
    Subclasses set the entity/DTO classes and may hook validation or
    notifications.
    """

    resource_name: ClassVar[str] = "Record"
    entity_class: ClassVar[Type[Entity]]
    dto_class: ClassVar[Any]

    def __init__(
        self,
        repository: IRepository[E],
        tenancy_guard: TenancyGuard,
        notifier: Optional[Notifier] = None,
    ):
        super().__init__(tenancy_guard)
        self.repository = repository
        self.notifier = notifier

    # hooks

    def _build(self, payload: BaseModel, company_id: UUID, user_id: UUID) -> E:
        return self.entity_class(
            **payload.model_dump(), company_id=company_id, user_id=user_id
        )

    def _validate(self, entity: E) -> None:
        """Business rules checked after creation and after every update."""

    async def _after_create(self, entity: E) -> None:
        pass

    async def _after_update(self, entity: E, changes: Dict[str, Any]) -> None:
        pass

    async def _notify(self, entity: E, type: str, content: str) -> None:
        if self.notifier is not None:
            await self.notifier.notify(
                user_id=entity.user_id,
                company_id=entity.company_id,
                type=type,
                content=content,
            )

    # operations

    async def _get_owned(self, company_id: UUID, user_id: UUID, record_id: UUID) -> E:
        entity = await self._get_in_company(
            self.repository, record_id, company_id, self.resource_name
        )
        if entity.user_id != user_id:
            raise NotFoundError(self.resource_name, record_id)
        return entity

    async def create(
        self,
        session: UserSession,
        company_id: UUID,
        user_id: UUID,
        payload: BaseModel,
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self.tenancy_guard.ensure_member(company_id, user_id)

        entity = self._build(payload, company_id, user_id)
        self._validate(entity)
        await self.repository.create(entity)

        logger.info(
            f"{self.resource_name} created",
            record_id=str(entity.id),
            company_id=str(company_id),
            user_id=str(user_id),
        )
        await self._after_create(entity)
        return CreatedDTO(id=entity.id)

    async def list_page(
        self,
        session: UserSession,
        company_id: UUID,
        user_id: UUID,
        pagination: Pagination,
    ) -> PageDTO:
        await self._authorize(session, company_id)
        await self.tenancy_guard.ensure_member(company_id, user_id)
        return await self._paginate(
            self.repository,
            pagination,
            self.dto_class.from_entity,
            company_id=company_id,
            user_id=user_id,
        )

    async def count(
        self, session: UserSession, company_id: UUID, user_id: UUID
    ) -> CountDTO:
        await self._authorize(session, company_id)
        await self.tenancy_guard.ensure_member(company_id, user_id)
        total = await self.repository.count(company_id=company_id, user_id=user_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, user_id: UUID, record_id: UUID
    ) -> Any:
        await self._authorize(session, company_id)
        entity = await self._get_owned(company_id, user_id, record_id)
        return self.dto_class.from_entity(entity)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        user_id: UUID,
        record_id: UUID,
        payload: BaseModel,
    ) -> None:
        await self._authorize(session, company_id)
        entity = await self._get_owned(company_id, user_id, record_id)

        changes = self._diff(entity, self._changes(payload))
        self._apply(entity, changes)
        self._validate(entity)
        await self.repository.update(entity)

        logger.info(
            f"{self.resource_name} updated",
            record_id=str(record_id),
            fields=sorted(changes),
        )
        await self._after_update(entity, changes)

    async def delete(
        self, session: UserSession, company_id: UUID, user_id: UUID, record_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_owned(company_id, user_id, record_id)
        await self.repository.delete(record_id)
        logger.info(f"{self.resource_name} deleted", record_id=str(record_id))

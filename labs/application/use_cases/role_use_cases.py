"""Application Use Cases - Roles."""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.role_dto import RoleCreateDTO, RoleDTO, RoleUpdateDTO
from labs.domain.entities.errors import DuplicateError
from labs.domain.entities.organization import Role
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.repositories.organization import ICompanyRepository, IRoleRepository
from labs.domain.repositories.permission import IPermissionRepository
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class RoleManagementUseCase(CompanyScopedUseCase):
    """Roles of a company. Names are unique inside a company."""

    def __init__(
        self,
        role_repository: IRoleRepository,
        company_repository: ICompanyRepository,
        permission_repository: IPermissionRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.role_repository = role_repository
        self.company_repository = company_repository
        self.permission_repository = permission_repository

    async def _ensure_name_available(
        self, company_id: UUID, name: str, current_role_id: Optional[UUID] = None
    ) -> None:
        existing = await self.role_repository.find_one(company_id=company_id, name=name)
        if existing is not None and existing.id != current_role_id:
            raise DuplicateError("Role already exists", details={"name": name})

    async def create(
        self, session: UserSession, company_id: UUID, payload: RoleCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self._ensure_name_available(company_id, payload.name)

        role = Role(
            name=payload.name,
            company_id=company_id,
            created_by_user_id=session.user_id,
        )
        await self.role_repository.create(role)
        logger.info("Role created", role_id=str(role.id), company_id=str(company_id))
        return CreatedDTO(id=role.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.role_repository, pagination, RoleDTO.from_entity, company_id=company_id
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        roles = await self.role_repository.find_all(company_id=company_id)
        return [ListItemDTO(id=role.id, name=role.name) for role in roles]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        return CountDTO(count=await self.role_repository.count(company_id=company_id))

    async def get(
        self, session: UserSession, company_id: UUID, role_id: UUID
    ) -> RoleDTO:
        await self._authorize(session, company_id)
        role = await self._get_in_company(
            self.role_repository, role_id, company_id, "Role"
        )
        company = await self.company_repository.find_by_id(company_id)
        return RoleDTO.from_entity(role, company.name if company else None)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        role_id: UUID,
        payload: RoleUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        role = await self._get_in_company(
            self.role_repository, role_id, company_id, "Role"
        )

        changes = self._changes(payload)
        if "name" in changes:
            await self._ensure_name_available(company_id, changes["name"], role.id)
        self._apply(role, changes)
        await self.role_repository.update(role)
        logger.info("Role updated", role_id=str(role_id))

    async def delete(
        self, session: UserSession, company_id: UUID, role_id: UUID
    ) -> None:
        """Delete a role together with the permissions granted to it."""
        await self._authorize(session, company_id)
        await self._get_in_company(self.role_repository, role_id, company_id, "Role")

        removed = await self.permission_repository.delete_many(
            company_id=company_id, role_id=role_id
        )
        await self.role_repository.delete(role_id)
        logger.info("Role deleted", role_id=str(role_id), permissions_removed=removed)

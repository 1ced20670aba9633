"""
Application Use Cases - Permissions

A permission row grants CRUD bits to a role on a feature. There is at most
one row per (role, feature) pair; a missing row denies everything.
"""

from typing import Any, Dict, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, PageDTO
from labs.application.dtos.permission_dto import (
    PermissionCheckDTO,
    PermissionCreateDTO,
    PermissionDTO,
    PermissionUpdateDTO,
)
from labs.domain.entities.errors import DuplicateError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.permission import Permission, PermissionAction
from labs.domain.entities.session import UserSession
from labs.domain.repositories.organization import IRoleRepository
from labs.domain.repositories.permission import (
    IFeatureRepository,
    IPermissionRepository,
)
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class PermissionManagementUseCase(CompanyScopedUseCase):
    """Grant, read and check role permissions."""

    def __init__(
        self,
        permission_repository: IPermissionRepository,
        role_repository: IRoleRepository,
        feature_repository: IFeatureRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.permission_repository = permission_repository
        self.role_repository = role_repository
        self.feature_repository = feature_repository

    async def create(
        self,
        session: UserSession,
        company_id: UUID,
        role_id: UUID,
        feature_id: UUID,
        payload: PermissionCreateDTO,
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self._get_in_company(self.role_repository, role_id, company_id, "Role")
        feature = await self._get_in_company(
            self.feature_repository, feature_id, company_id, "Feature"
        )

        existing = await self.permission_repository.find_one(
            company_id=company_id, role_id=role_id, feature_id=feature_id
        )
        if existing is not None:
            raise DuplicateError(
                "Permission already exists for this role and feature",
                details={"role_id": str(role_id), "feature_id": str(feature_id)},
            )

        permission = Permission(
            role_id=role_id,
            company_id=company_id,
            feature_id=feature_id,
            feature_name=feature.name,
            create_perm=payload.create_perm,
            read_perm=payload.read_perm,
            update_perm=payload.update_perm,
            delete_perm=payload.delete_perm,
            created_by_user_id=session.user_id,
        )
        await self.permission_repository.create(permission)
        logger.info(
            "Permission created",
            permission_id=str(permission.id),
            role_id=str(role_id),
            feature=feature.name,
        )
        return CreatedDTO(id=permission.id)

    async def list_page(
        self,
        session: UserSession,
        company_id: UUID,
        pagination: Pagination,
        role_id: Optional[UUID] = None,
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.permission_repository,
            pagination,
            PermissionDTO.from_entity,
            **self._filters(company_id, role_id),
        )

    async def count(
        self,
        session: UserSession,
        company_id: UUID,
        role_id: Optional[UUID] = None,
    ) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.permission_repository.count(
            **self._filters(company_id, role_id)
        )
        return CountDTO(count=total)

    @staticmethod
    def _filters(company_id: UUID, role_id: Optional[UUID]) -> Dict[str, Any]:
        filters: Dict[str, Any] = {"company_id": company_id}
        if role_id is not None:
            filters["role_id"] = role_id
        return filters

    async def get(
        self, session: UserSession, company_id: UUID, permission_id: UUID
    ) -> PermissionDTO:
        await self._authorize(session, company_id)
        permission = await self._get_in_company(
            self.permission_repository, permission_id, company_id, "Permission"
        )
        return PermissionDTO.from_entity(permission)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        permission_id: UUID,
        payload: PermissionUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        permission = await self._get_in_company(
            self.permission_repository, permission_id, company_id, "Permission"
        )
        changes = self._changes(payload)
        self._apply(permission, changes)
        await self.permission_repository.update(permission)
        logger.info(
            "Permission updated", permission_id=str(permission_id), **changes
        )

    async def delete(
        self, session: UserSession, company_id: UUID, permission_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.permission_repository, permission_id, company_id, "Permission"
        )
        await self.permission_repository.delete(permission_id)
        logger.info("Permission deleted", permission_id=str(permission_id))

    async def check(
        self,
        session: UserSession,
        company_id: UUID,
        role_id: UUID,
        feature_id: UUID,
        action: str,
    ) -> PermissionCheckDTO:
        """
        Tell whether a role may perform an action on a feature.

        Raises:
            ValidationError: If the action is not create/read/update/delete
        """
        await self._authorize(session, company_id)
        parsed = PermissionAction.parse(action)

        permission = await self.permission_repository.find_one(
            company_id=company_id, role_id=role_id, feature_id=feature_id
        )
        allowed = permission is not None and permission.allows(parsed)
        return PermissionCheckDTO(
            role_id=role_id,
            feature_id=feature_id,
            action=parsed.value,
            allowed=allowed,
        )

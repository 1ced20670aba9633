"""Application Use Cases - Features."""

from typing import List, Optional
from uuid import UUID

import structlog

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.application.dtos.permission_dto import (
    FeatureCreateDTO,
    FeatureDTO,
    FeatureUpdateDTO,
)
from labs.domain.entities.errors import DuplicateError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.permission import Feature
from labs.domain.entities.session import UserSession
from labs.domain.repositories.permission import (
    IFeatureRepository,
    IPermissionRepository,
)
from labs.domain.services.tenancy_guard import TenancyGuard

from .base import CompanyScopedUseCase

logger = structlog.get_logger(__name__)


class FeatureManagementUseCase(CompanyScopedUseCase):
    """
    Features a company protects with permissions.

    Permission rows keep a copy of the feature name, so renaming a feature
    rewrites its permissions and deleting it removes them.
    """

    def __init__(
        self,
        feature_repository: IFeatureRepository,
        permission_repository: IPermissionRepository,
        tenancy_guard: TenancyGuard,
    ):
        super().__init__(tenancy_guard)
        self.feature_repository = feature_repository
        self.permission_repository = permission_repository

    async def _ensure_name_available(
        self, company_id: UUID, name: str, current_feature_id: Optional[UUID] = None
    ) -> None:
        existing = await self.feature_repository.find_one(
            company_id=company_id, name=name
        )
        if existing is not None and existing.id != current_feature_id:
            raise DuplicateError("Feature already exists", details={"name": name})

    async def create(
        self, session: UserSession, company_id: UUID, payload: FeatureCreateDTO
    ) -> CreatedDTO:
        await self._authorize(session, company_id)
        await self._ensure_name_available(company_id, payload.feature_name)

        feature = Feature(name=payload.feature_name, company_id=company_id)
        await self.feature_repository.create(feature)
        logger.info(
            "Feature created", feature_id=str(feature.id), company_id=str(company_id)
        )
        return CreatedDTO(id=feature.id)

    async def list_page(
        self, session: UserSession, company_id: UUID, pagination: Pagination
    ) -> PageDTO:
        await self._authorize(session, company_id)
        return await self._paginate(
            self.feature_repository,
            pagination,
            FeatureDTO.from_entity,
            company_id=company_id,
        )

    async def list_all(
        self, session: UserSession, company_id: UUID
    ) -> List[ListItemDTO]:
        await self._authorize(session, company_id)
        features = await self.feature_repository.find_all(company_id=company_id)
        return [ListItemDTO(id=feature.id, name=feature.name) for feature in features]

    async def count(self, session: UserSession, company_id: UUID) -> CountDTO:
        await self._authorize(session, company_id)
        total = await self.feature_repository.count(company_id=company_id)
        return CountDTO(count=total)

    async def get(
        self, session: UserSession, company_id: UUID, feature_id: UUID
    ) -> FeatureDTO:
        await self._authorize(session, company_id)
        feature = await self._get_in_company(
            self.feature_repository, feature_id, company_id, "Feature"
        )
        return FeatureDTO.from_entity(feature)

    async def update(
        self,
        session: UserSession,
        company_id: UUID,
        feature_id: UUID,
        payload: FeatureUpdateDTO,
    ) -> None:
        await self._authorize(session, company_id)
        feature = await self._get_in_company(
            self.feature_repository, feature_id, company_id, "Feature"
        )

        new_name = payload.feature_name
        if new_name is None or new_name == feature.name:
            return

        await self._ensure_name_available(company_id, new_name, feature.id)
        feature.name = new_name
        await self.feature_repository.update(feature)

        permissions = await self.permission_repository.find_all(
            company_id=company_id, feature_id=feature_id
        )
        for permission in permissions:
            permission.feature_name = new_name
            await self.permission_repository.update(permission)

        logger.info(
            "Feature renamed",
            feature_id=str(feature_id),
            permissions_updated=len(permissions),
        )

    async def delete(
        self, session: UserSession, company_id: UUID, feature_id: UUID
    ) -> None:
        await self._authorize(session, company_id)
        await self._get_in_company(
            self.feature_repository, feature_id, company_id, "Feature"
        )

        removed = await self.permission_repository.delete_many(
            company_id=company_id, feature_id=feature_id
        )
        await self.feature_repository.delete(feature_id)
        logger.info(
            "Feature deleted", feature_id=str(feature_id), permissions_removed=removed
        )

"""Feature endpoints of a company."""

from fastapi import APIRouter

from labs.application.dtos.permission_dto import (
    FeatureCreateDTO,
    FeatureDTO,
    FeatureUpdateDTO,
)
from labs.main.container import AppContainer

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/features", tags=["permissions"])

add_company_crud_routes(
    router,
    provider=AppContainer.feature_management_use_case,
    resource="feature",
    create_dto=FeatureCreateDTO,
    update_dto=FeatureUpdateDTO,
    item_dto=FeatureDTO,
    details_dto=FeatureDTO,
)

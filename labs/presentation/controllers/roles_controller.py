"""Role endpoints of a company."""

from fastapi import APIRouter

from labs.application.dtos.role_dto import RoleCreateDTO, RoleDTO, RoleUpdateDTO
from labs.main.container import AppContainer

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/roles", tags=["roles"])

add_company_crud_routes(
    router,
    provider=AppContainer.role_management_use_case,
    resource="role",
    create_dto=RoleCreateDTO,
    update_dto=RoleUpdateDTO,
    item_dto=RoleDTO,
    details_dto=RoleDTO,
)

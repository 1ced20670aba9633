"""
Route builders for the resources sharing the same CRUD surface.

Company resources live under ``/{company_id}`` and employee records under
``/{company_id}/{user_id}``. Resource specific routes with a static segment
(``/gender``, ``/scores`` ...) must be declared on the router before these
builders run, otherwise ``/{record_id}`` shadows them.
"""

from typing import Any, List, Type
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from labs.application.dtos.common import CountDTO, CreatedDTO, ListItemDTO, PageDTO
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.presentation.dependencies import get_current_session, get_pagination
from labs.presentation.responses import ApiResponse, created, success


def add_company_crud_routes(
    router: APIRouter,
    *,
    provider: Any,
    resource: str,
    create_dto: Type[BaseModel],
    update_dto: Type[BaseModel],
    item_dto: Type[BaseModel],
    details_dto: Type[BaseModel],
    with_create: bool = True,
    with_page: bool = True,
) -> APIRouter:
    """
    Register create, page, list, count, get, update and delete routes.

    Args:
        router: Router of the resource, carrying its prefix
        provider: Container provider of the resource use case
        resource: Singular resource name used in summaries and route names
        create_dto: Body of the create route
        update_dto: Body of the update route
        item_dto: Item of the paginated listing
        details_dto: Payload of the single record route
        with_create: Set to False when the resource declares its own create
        with_page: Set to False when the resource declares its own listing
    """
    slug = resource.lower().replace(" ", "_")

    if with_create:

        @router.post(
            "/{company_id}",
            response_model=ApiResponse[CreatedDTO],
            status_code=status.HTTP_201_CREATED,
            summary=f"Create a {resource}",
            name=f"create_{slug}",
        )
        @inject
        async def create_record(
            company_id: UUID,
            payload: create_dto,  # type: ignore[valid-type]
            session: UserSession = Depends(get_current_session),
            use_case: Any = Depends(Provide[provider]),
        ) -> ApiResponse[CreatedDTO]:
            return created(await use_case.create(session, company_id, payload))

    if with_page:

        @router.get(
            "/{company_id}",
            response_model=ApiResponse[PageDTO[item_dto]],
            summary=f"List {resource} records page by page",
            name=f"list_{slug}_page",
        )
        @inject
        async def list_page(
            company_id: UUID,
            pagination: Pagination = Depends(get_pagination),
            session: UserSession = Depends(get_current_session),
            use_case: Any = Depends(Provide[provider]),
        ) -> ApiResponse[PageDTO]:
            return success(await use_case.list_page(session, company_id, pagination))

    @router.get(
        "/{company_id}/list",
        response_model=ApiResponse[List[ListItemDTO]],
        summary=f"List every {resource} as id and name",
        name=f"list_{slug}_names",
    )
    @inject
    async def list_all(
        company_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[List[ListItemDTO]]:
        return success(await use_case.list_all(session, company_id))

    @router.get(
        "/{company_id}/count",
        response_model=ApiResponse[CountDTO],
        summary=f"Count {resource} records",
        name=f"count_{slug}",
    )
    @inject
    async def count(
        company_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[CountDTO]:
        return success(await use_case.count(session, company_id))

    @router.get(
        "/{company_id}/{record_id}",
        response_model=ApiResponse[details_dto],
        summary=f"Get a {resource}",
        name=f"get_{slug}",
    )
    @inject
    async def get_record(
        company_id: UUID,
        record_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[Any]:
        return success(await use_case.get(session, company_id, record_id))

    @router.put(
        "/{company_id}/{record_id}",
        response_model=ApiResponse[None],
        summary=f"Update a {resource}",
        name=f"update_{slug}",
    )
    @inject
    async def update_record(
        company_id: UUID,
        record_id: UUID,
        payload: update_dto,  # type: ignore[valid-type]
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[None]:
        await use_case.update(session, company_id, record_id, payload)
        return success()

    @router.delete(
        "/{company_id}/{record_id}",
        response_model=ApiResponse[None],
        summary=f"Delete a {resource}",
        name=f"delete_{slug}",
    )
    @inject
    async def delete_record(
        company_id: UUID,
        record_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[None]:
        await use_case.delete(session, company_id, record_id)
        return success()

    return router


def build_employee_record_router(
    *,
    prefix: str,
    tag: str,
    provider: Any,
    resource: str,
    create_dto: Type[BaseModel],
    update_dto: Type[BaseModel],
    item_dto: Type[BaseModel],
) -> APIRouter:
    """Router for records owned by one employee: ``/{company_id}/{user_id}``."""
    router = APIRouter(prefix=prefix, tags=[tag])
    slug = resource.lower().replace(" ", "_")

    @router.post(
        "/{company_id}/{user_id}",
        response_model=ApiResponse[CreatedDTO],
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {resource} for an employee",
        name=f"create_{slug}",
    )
    @inject
    async def create_record(
        company_id: UUID,
        user_id: UUID,
        payload: create_dto,  # type: ignore[valid-type]
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[CreatedDTO]:
        return created(await use_case.create(session, company_id, user_id, payload))

    @router.get(
        "/{company_id}/{user_id}",
        response_model=ApiResponse[PageDTO[item_dto]],
        summary=f"List the {resource} records of an employee",
        name=f"list_{slug}_page",
    )
    @inject
    async def list_page(
        company_id: UUID,
        user_id: UUID,
        pagination: Pagination = Depends(get_pagination),
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[PageDTO]:
        return success(
            await use_case.list_page(session, company_id, user_id, pagination)
        )

    @router.get(
        "/{company_id}/{user_id}/count",
        response_model=ApiResponse[CountDTO],
        summary=f"Count the {resource} records of an employee",
        name=f"count_{slug}",
    )
    @inject
    async def count(
        company_id: UUID,
        user_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[CountDTO]:
        return success(await use_case.count(session, company_id, user_id))

    @router.get(
        "/{company_id}/{user_id}/{record_id}",
        response_model=ApiResponse[item_dto],
        summary=f"Get a {resource}",
        name=f"get_{slug}",
    )
    @inject
    async def get_record(
        company_id: UUID,
        user_id: UUID,
        record_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[Any]:
        return success(await use_case.get(session, company_id, user_id, record_id))

    @router.put(
        "/{company_id}/{user_id}/{record_id}",
        response_model=ApiResponse[None],
        summary=f"Update a {resource}",
        name=f"update_{slug}",
    )
    @inject
    async def update_record(
        company_id: UUID,
        user_id: UUID,
        record_id: UUID,
        payload: update_dto,  # type: ignore[valid-type]
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[None]:
        await use_case.update(session, company_id, user_id, record_id, payload)
        return success()

    @router.delete(
        "/{company_id}/{user_id}/{record_id}",
        response_model=ApiResponse[None],
        summary=f"Delete a {resource}",
        name=f"delete_{slug}",
    )
    @inject
    async def delete_record(
        company_id: UUID,
        user_id: UUID,
        record_id: UUID,
        session: UserSession = Depends(get_current_session),
        use_case: Any = Depends(Provide[provider]),
    ) -> ApiResponse[None]:
        await use_case.delete(session, company_id, user_id, record_id)
        return success()

    return router

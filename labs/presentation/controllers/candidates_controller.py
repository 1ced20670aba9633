"""Candidate ("condidat") endpoints, including the candidate sign in."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from labs.application.dtos.candidate_dto import (
    CandidateCreateDTO,
    CandidateDetailsDTO,
    CandidateProfileDTO,
    CandidateSigninDTO,
    CandidateTableDTO,
    CandidateUpdateDTO,
)
from labs.application.use_cases.candidate_use_cases import CandidateManagementUseCase
from labs.main.container import AppContainer
from labs.presentation.responses import ApiResponse, success

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/condidats", tags=["candidates"])


@router.post(
    "/signin",
    response_model=ApiResponse[CandidateProfileDTO],
    summary="Sign in a candidate",
)
@inject
async def candidate_signin(
    payload: CandidateSigninDTO,
    use_case: CandidateManagementUseCase = Depends(
        Provide[AppContainer.candidate_management_use_case]
    ),
) -> ApiResponse[CandidateProfileDTO]:
    """Check the credentials of an active candidate; no token is required."""
    return success(await use_case.signin(payload))


add_company_crud_routes(
    router,
    provider=AppContainer.candidate_management_use_case,
    resource="candidate",
    create_dto=CandidateCreateDTO,
    update_dto=CandidateUpdateDTO,
    item_dto=CandidateTableDTO,
    details_dto=CandidateDetailsDTO,
)

"""Authentication endpoints for employees."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from labs.application.dtos.auth_dto import SigninDTO, SigninResponseDTO, SignupDTO
from labs.application.dtos.common import CreatedDTO
from labs.application.use_cases.auth_use_cases import AuthUseCase
from labs.main.container import AppContainer
from labs.presentation.responses import ApiResponse, created, success

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=ApiResponse[CreatedDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Register a company and its first user",
    description="""
    Create a company, its default `Manager` role and an active user holding
    that role. The email must not be registered yet.
    """,
)
@inject
async def signup(
    payload: SignupDTO,
    auth_use_case: AuthUseCase = Depends(Provide[AppContainer.auth_use_case]),
) -> ApiResponse[CreatedDTO]:
    return created(await auth_use_case.signup(payload))


@router.post(
    "/signin",
    response_model=ApiResponse[SigninResponseDTO],
    summary="Sign in an employee",
)
@inject
async def signin(
    payload: SigninDTO,
    auth_use_case: AuthUseCase = Depends(Provide[AppContainer.auth_use_case]),
) -> ApiResponse[SigninResponseDTO]:
    """Check the credentials of an active user and return an access token."""
    return success(await auth_use_case.signin(payload))

"""
Request dependencies shared by the controllers: the caller session decoded
from the bearer token and the pagination window.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from labs.domain.entities.errors import AuthenticationError
from labs.domain.entities.pagination import Pagination
from labs.domain.entities.session import UserSession
from labs.domain.ports.token_service import ITokenService
from labs.main.container import AppContainer
from labs.shared.consts import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT

bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: ITokenService = Depends(Provide[AppContainer.token_service]),
) -> UserSession:
    """Decode the bearer token of the request into a session."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")
    return token_service.decode(credentials.credentials)


def get_pagination(
    page: int = Query(DEFAULT_PAGE, description="Page number, starting at 1"),
    limit: int = Query(
        DEFAULT_PAGE_LIMIT, description="Page size: 5, 10, 20 or 50"
    ),
) -> Pagination:
    return Pagination.create(page, limit)

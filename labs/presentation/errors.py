"""
Exception handlers

Domain errors raised anywhere below the controllers are translated here into
an HTTP status and an envelope, so controllers only call use cases.
"""

from typing import Dict, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from labs.domain.entities.errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    NotFoundError,
    OperationError,
    TenancyError,
    ValidationError,
)
from labs.shared import get_logger
from labs.shared.consts import EnumResponseKey

from .responses import failure

logger = get_logger(__name__)

DOMAIN_ERROR_MAP: Dict[Type[DomainError], Tuple[int, EnumResponseKey]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, EnumResponseKey.INVALID_REQUEST),
    TenancyError: (status.HTTP_400_BAD_REQUEST, EnumResponseKey.INVALID_REQUEST),
    DuplicateError: (status.HTTP_400_BAD_REQUEST, EnumResponseKey.INVALID_REQUEST),
    NotFoundError: (status.HTTP_404_NOT_FOUND, EnumResponseKey.DATA_NOT_FOUND),
    AuthenticationError: (
        status.HTTP_401_UNAUTHORIZED,
        EnumResponseKey.UNAUTHORIZED,
    ),
    OperationError: (status.HTTP_400_BAD_REQUEST, EnumResponseKey.UNKNOWN_ERROR),
}


def _envelope(
    status_code: int, response_key: EnumResponseKey, message: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=failure(response_key, message).model_dump(by_alias=True, mode="json"),
    )


def resolve_domain_error(exc: DomainError) -> Tuple[int, EnumResponseKey]:
    """Status and response key of a domain error, following its class hierarchy."""
    for error_class in type(exc).__mro__:
        if error_class in DOMAIN_ERROR_MAP:
            return DOMAIN_ERROR_MAP[error_class]
    return status.HTTP_400_BAD_REQUEST, EnumResponseKey.UNKNOWN_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, response_key = resolve_domain_error(exc)
    logger.info(
        "request.rejected",
        path=request.url.path,
        method=request.method,
        error=type(exc).__name__,
        message=exc.message,
        **{f"detail_{key}": value for key, value in exc.details.items()},
    )
    return _envelope(status_code, response_key, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"

    logger.info(
        "request.invalid",
        path=request.url.path,
        method=request.method,
        errors=len(errors),
    )
    return _envelope(
        status.HTTP_400_BAD_REQUEST, EnumResponseKey.INVALID_REQUEST, message
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        response_key = EnumResponseKey.DATA_NOT_FOUND
    elif exc.status_code == status.HTTP_401_UNAUTHORIZED:
        response_key = EnumResponseKey.UNAUTHORIZED
    elif exc.status_code >= 500:
        response_key = EnumResponseKey.SERVER_ERROR
    else:
        response_key = EnumResponseKey.INVALID_REQUEST
    return _envelope(exc.status_code, response_key, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.failed",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        EnumResponseKey.SERVER_ERROR,
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

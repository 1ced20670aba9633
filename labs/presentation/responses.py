"""
Response envelope

Every endpoint except ``/health`` answers with
``{"responseKey": ..., "message": ..., "data": ...}``.
"""

from typing import Generic, Optional, TypeVar

from pydantic import Field

from labs.application.dtos.common import APIModel, CreatedDTO
from labs.shared.consts import EnumResponseKey

T = TypeVar("T")


class ApiResponse(APIModel, Generic[T]):
    response_key: EnumResponseKey = Field(description="Outcome of the request")
    message: Optional[str] = Field(
        default=None, description="Error description, null on success"
    )
    data: Optional[T] = Field(default=None, description="Payload, null on failure")


def success(data: Optional[T] = None) -> ApiResponse[T]:
    return ApiResponse(response_key=EnumResponseKey.SUCCESS, data=data)


def created(data: CreatedDTO) -> ApiResponse[CreatedDTO]:
    return ApiResponse(response_key=EnumResponseKey.CREATED, data=data)


def failure(response_key: EnumResponseKey, message: str) -> ApiResponse[None]:
    return ApiResponse(response_key=response_key, message=message)

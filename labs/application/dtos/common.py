"""Shared DTOs: camelCase base model, pages, counts and identifiers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Generic, List, TypeVar
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Offset-less values are read as UTC so they compare with stored dates
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class APIModel(BaseModel):
    """Base DTO exposing camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageDTO(APIModel, Generic[T]):
    """One page of a paginated listing."""

    items: List[T] = Field(default_factory=list, description="Records of the page")
    page: int = Field(description="Current page, starting at 1")
    limit: int = Field(description="Page size")
    total_count: int = Field(description="Number of records across all pages")


class CountDTO(APIModel):
    count: int = Field(ge=0, description="Number of matching records")


class CreatedDTO(APIModel):
    id: UUID = Field(description="Identifier of the created record")


class ListItemDTO(APIModel):
    """Compact representation used by the `/list` endpoints."""

    id: UUID
    name: str

"""DTOs for roles."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from labs.domain.entities.organization import Role

from .common import APIModel


class RoleCreateDTO(APIModel):
    name: str = Field(min_length=2, max_length=40)


class RoleUpdateDTO(APIModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=40)


class RoleDTO(APIModel):
    id: UUID
    name: str
    company_name: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, role: Role, company_name: Optional[str] = None) -> "RoleDTO":
        return cls(
            id=role.id,
            name=role.name,
            company_name=company_name,
            created_at=role.created_at,
        )

"""DTOs for companies."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from labs.domain.entities.organization import Company

from .common import APIModel


class CompanyCreateDTO(APIModel):
    name: str = Field(min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    website: Optional[str] = Field(default=None, max_length=255)


class CompanyUpdateDTO(APIModel):
    name: Optional[str] = Field(default=None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    website: Optional[str] = Field(default=None, max_length=255)


class CompanyDTO(APIModel):
    id: UUID
    name: str
    email: Optional[str] = None
    website: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyDTO":
        return cls(
            id=company.id,
            name=company.name,
            email=company.email,
            website=company.website,
            created_at=company.created_at,
        )

"""DTOs for candidates ("condidats")."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from labs.domain.entities.recruitment import Candidate

from .common import APIModel


class CandidateCreateDTO(APIModel):
    first_name: str = Field(min_length=3, max_length=30)
    last_name: str = Field(min_length=3, max_length=35)
    email: EmailStr
    password: str = Field(min_length=10, max_length=255)
    university: Optional[str] = Field(default=None, max_length=255)
    education_level: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)


class CandidateUpdateDTO(APIModel):
    first_name: Optional[str] = Field(default=None, min_length=3, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=3, max_length=35)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=10, max_length=255)
    university: Optional[str] = Field(default=None, max_length=255)
    education_level: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)
    status: Optional[bool] = None


class CandidateSigninDTO(APIModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=255)


class CandidateTableDTO(APIModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, candidate: Candidate) -> "CandidateTableDTO":
        return cls(
            id=candidate.id,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            email=candidate.email,
            created_at=candidate.created_at,
        )


class CandidateDetailsDTO(CandidateTableDTO):
    university: Optional[str] = None
    education_level: Optional[str] = None
    address: Optional[str] = None
    status: bool = True
    company_name: Optional[str] = None

    @classmethod
    def from_entity(
        cls, candidate: Candidate, company_name: Optional[str] = None
    ) -> "CandidateDetailsDTO":
        return cls(
            id=candidate.id,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            email=candidate.email,
            created_at=candidate.created_at,
            university=candidate.university,
            education_level=candidate.education_level,
            address=candidate.address,
            status=candidate.status,
            company_name=company_name,
        )


class CandidateProfileDTO(APIModel):
    """Returned by the candidate sign in."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    company_id: Optional[UUID] = None

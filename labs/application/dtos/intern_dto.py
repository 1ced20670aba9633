"""DTOs for interns."""

from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, model_validator

from labs.domain.entities.recruitment import Intern

from .common import APIModel, UTCDateTime


class InternCreateDTO(APIModel):
    first_name: str = Field(min_length=3, max_length=30)
    last_name: str = Field(min_length=3, max_length=35)
    email: EmailStr
    education_level: str = Field(min_length=2, max_length=100)
    university: str = Field(min_length=2, max_length=255)
    start_date: UTCDateTime
    end_date: UTCDateTime
    date_of_birth: Optional[UTCDateTime] = None
    gender: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    country_code: Optional[str] = Field(default=None, max_length=10)
    cv_path: Optional[str] = None
    supervisor_id: Optional[UUID] = Field(
        default=None, description="Company employee following the intern"
    )
    educational_supervisor_name: Optional[str] = Field(default=None, max_length=100)
    educational_supervisor_phone: Optional[str] = Field(default=None, max_length=30)
    educational_supervisor_email: Optional[EmailStr] = None

    @model_validator(mode="after")
    def _check_internship_period(self) -> "InternCreateDTO":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class InternUpdateDTO(APIModel):
    first_name: Optional[str] = Field(default=None, min_length=3, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=3, max_length=35)
    email: Optional[EmailStr] = None
    education_level: Optional[str] = Field(default=None, min_length=2, max_length=100)
    university: Optional[str] = Field(default=None, min_length=2, max_length=255)
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    date_of_birth: Optional[UTCDateTime] = None
    gender: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    country_code: Optional[str] = Field(default=None, max_length=10)
    cv_path: Optional[str] = None
    supervisor_id: Optional[UUID] = None
    educational_supervisor_name: Optional[str] = Field(default=None, max_length=100)
    educational_supervisor_phone: Optional[str] = Field(default=None, max_length=30)
    educational_supervisor_email: Optional[EmailStr] = None


class InternTableDTO(APIModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    university: Optional[str] = None
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    supervisor_id: Optional[UUID] = None
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, intern: Intern) -> "InternTableDTO":
        return cls(
            id=intern.id,
            first_name=intern.first_name,
            last_name=intern.last_name,
            email=intern.email,
            university=intern.university,
            start_date=intern.start_date,
            end_date=intern.end_date,
            supervisor_id=intern.supervisor_id,
            created_at=intern.created_at,
        )


class InternDetailsDTO(InternTableDTO):
    education_level: Optional[str] = None
    date_of_birth: Optional[UTCDateTime] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    country_code: Optional[str] = None
    cv_path: Optional[str] = None
    educational_supervisor_name: Optional[str] = None
    educational_supervisor_phone: Optional[str] = None
    educational_supervisor_email: Optional[str] = None

    @classmethod
    def from_entity(cls, intern: Intern) -> "InternDetailsDTO":
        return cls(
            id=intern.id,
            first_name=intern.first_name,
            last_name=intern.last_name,
            email=intern.email,
            university=intern.university,
            start_date=intern.start_date,
            end_date=intern.end_date,
            supervisor_id=intern.supervisor_id,
            created_at=intern.created_at,
            education_level=intern.education_level,
            date_of_birth=intern.date_of_birth,
            gender=intern.gender,
            address=intern.address,
            phone_number=intern.phone_number,
            country_code=intern.country_code,
            cv_path=intern.cv_path,
            educational_supervisor_name=intern.educational_supervisor_name,
            educational_supervisor_phone=intern.educational_supervisor_phone,
            educational_supervisor_email=intern.educational_supervisor_email,
        )

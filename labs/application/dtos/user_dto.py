"""DTOs for company users (employees)."""

from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from labs.domain.entities.organization import User

from .common import APIModel, UTCDateTime


class UserCreateDTO(APIModel):
    """User creation payload. The role is given by name and resolved in the company."""

    first_name: str = Field(min_length=3, max_length=30)
    last_name: str = Field(min_length=3, max_length=35)
    email: EmailStr
    password: str = Field(min_length=10, max_length=255)
    role_name: str = Field(min_length=2, max_length=40)
    gender: Optional[str] = Field(default=None, max_length=20)
    country: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    departement_name: Optional[str] = Field(default=None, max_length=100)
    date_of_birth: Optional[UTCDateTime] = None
    date_of_hire: Optional[UTCDateTime] = None
    leave_balance: float = Field(default=0.0, ge=0)

    model_config = {
        "json_schema_extra": {
            "example": {
                "firstName": "Yassine",
                "lastName": "Trabelsi",
                "email": "yassine@example.com",
                "password": "another-long-secret",
                "roleName": "Manager",
                "gender": "male",
                "country": "Tunisia",
            }
        }
    }


class UserUpdateDTO(APIModel):
    first_name: Optional[str] = Field(default=None, min_length=3, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=3, max_length=35)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=10, max_length=255)
    role_name: Optional[str] = Field(default=None, min_length=2, max_length=40)
    gender: Optional[str] = Field(default=None, max_length=20)
    country: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    departement_name: Optional[str] = Field(default=None, max_length=100)
    date_of_birth: Optional[UTCDateTime] = None
    date_of_hire: Optional[UTCDateTime] = None
    leave_balance: Optional[float] = Field(default=None, ge=0)
    cv_path: Optional[str] = None
    profile_picture: Optional[str] = None
    status: Optional[bool] = None


class UserTableDTO(APIModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, user: User) -> "UserTableDTO":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
        )


class UserDetailsDTO(APIModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    country: Optional[str] = None
    status: bool
    gender: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    departement_name: Optional[str] = None
    date_of_birth: Optional[UTCDateTime] = None
    date_of_hire: Optional[UTCDateTime] = None
    leave_balance: float = 0.0
    last_login: Optional[UTCDateTime] = None
    role_id: Optional[UUID] = None
    role_name: Optional[str] = None
    company_name: Optional[str] = None
    created_at: UTCDateTime

    @classmethod
    def from_entity(
        cls,
        user: User,
        role_name: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> "UserDetailsDTO":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            country=user.country,
            status=user.status,
            gender=user.gender,
            address=user.address,
            phone_number=user.phone_number,
            departement_name=user.departement_name,
            date_of_birth=user.date_of_birth,
            date_of_hire=user.date_of_hire,
            leave_balance=user.leave_balance,
            last_login=user.last_login,
            role_id=user.role_id,
            role_name=role_name,
            company_name=company_name,
            created_at=user.created_at,
        )


class GenderDistributionDTO(APIModel):
    male_percentage: int = Field(ge=0, le=100)
    female_percentage: int = Field(ge=0, le=100)

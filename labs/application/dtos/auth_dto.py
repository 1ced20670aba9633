"""DTOs for employee sign up and sign in."""

from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from .common import APIModel


class SignupDTO(APIModel):
    """Registers a company together with its first (manager) user."""

    first_name: str = Field(min_length=3, max_length=30)
    last_name: str = Field(min_length=3, max_length=35)
    email: EmailStr
    password: str = Field(min_length=10, max_length=255)
    company_name: str = Field(min_length=2, max_length=255)

    model_config = {
        "json_schema_extra": {
            "example": {
                "firstName": "Amira",
                "lastName": "Ben Salah",
                "email": "amira@example.com",
                "password": "a-long-secret",
                "companyName": "Labs",
            }
        }
    }


class SigninDTO(APIModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=255)


class SigninUserDTO(APIModel):
    id: UUID = Field(alias="ID")
    name: str
    email: str
    profile_picture: Optional[str] = None
    work_company_id: Optional[UUID] = None


class SigninResponseDTO(APIModel):
    access_token: str = Field(description="Bearer token for the Authorization header")
    user: SigninUserDTO

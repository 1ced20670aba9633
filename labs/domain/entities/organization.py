"""
Domain Entities - Organization

Companies (tenants), the users employed by them and the roles users hold.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from .base import Entity


@dataclass
class Company(Entity):
    """A tenant. Every other record is scoped to one company."""

    name: str = ""
    email: Optional[str] = None
    website: Optional[str] = None
    created_by_user_id: Optional[UUID] = None


@dataclass
class User(Entity):
    """An employee account of a company."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_hire: Optional[datetime] = None
    leave_balance: float = 0.0
    cv_path: Optional[str] = None
    profile_picture: Optional[str] = None
    last_login: Optional[datetime] = None
    departement_name: Optional[str] = None
    role_id: Optional[UUID] = None
    company_id: Optional[UUID] = None
    status: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Role(Entity):
    """A named role inside a company; permissions hang off roles."""

    name: str = ""
    company_id: Optional[UUID] = None
    created_by_user_id: Optional[UUID] = None

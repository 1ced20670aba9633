"""Authenticated caller, as decoded from the bearer token."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID


@dataclass(frozen=True)
class SessionRole:
    id: UUID
    name: str
    company_id: Optional[UUID] = None


@dataclass(frozen=True)
class UserSession:
    """Identity of the employee behind a request."""

    user_id: UUID
    company_id: UUID
    roles: List[SessionRole] = field(default_factory=list)

"""
Domain Entities - Workforce

Records attached to one employee of a company: presences, mission orders,
training requests, notifications and professional experience.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from .base import Entity


@dataclass
class Presence(Entity):
    """A badge check (in or out) of an employee."""

    matricule: int = 0
    check: Optional[datetime] = None
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class MissionOrder(Entity):
    object: str = ""
    description: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    address_client: str = ""
    transport: str = ""
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class TrainingRequest(Entity):
    """A training asked for by an employee, answered by the company."""

    training_title: str = ""
    description: str = ""
    reason: str = ""
    request_date: Optional[datetime] = None
    decision_company: Optional[str] = None
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class Notification(Entity):
    type: str = ""
    content: str = ""
    seen: bool = False
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class UserExperience(Entity):
    professional_training: str = ""
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None

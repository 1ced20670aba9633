"""
Domain Entities - Employee requests

Leave requests, exit permissions, salary advances and loans share a common
shape: they belong to one employee and move from pending to a decision.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from .base import Entity


class RequestStatus(str, Enum):
    """Decision state of an employee request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class EmployeeRequest(Entity):
    status: RequestStatus = RequestStatus.PENDING
    user_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class LeaveRequest(EmployeeRequest):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    leave_type: str = ""
    reason: str = ""


@dataclass
class ExitPermission(EmployeeRequest):
    release_date: Optional[datetime] = None
    start_time: Optional[datetime] = None
    return_time: Optional[datetime] = None
    exit_type: str = ""
    reason: str = ""


@dataclass
class AdvanceSalaryRequest(EmployeeRequest):
    amount: float = 0.0
    reason: str = ""


@dataclass
class LoanRequest(EmployeeRequest):
    loan_amount: float = 0.0
    loan_duration: int = 0
    interest_rate: float = 0.0
    reason_for_loan: str = ""
    path_document: Optional[str] = None

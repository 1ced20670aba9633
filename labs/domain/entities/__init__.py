"""Domain entities package."""

from .assessment import Test, TestCandidate, TestQuestion
from .base import Entity, utc_now
from .employee_request import (
    AdvanceSalaryRequest,
    EmployeeRequest,
    ExitPermission,
    LeaveRequest,
    LoanRequest,
    RequestStatus,
)
from .errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    NotFoundError,
    OperationError,
    TenancyError,
    ValidationError,
)
from .organization import Company, Role, User
from .pagination import Pagination
from .permission import Feature, Permission, PermissionAction
from .recruitment import Candidate, Intern, Project, ProjectCandidate, Question
from .session import SessionRole, UserSession
from .workforce import (
    MissionOrder,
    Notification,
    Presence,
    TrainingRequest,
    UserExperience,
)

__all__ = [
    "AdvanceSalaryRequest",
    "AuthenticationError",
    "Candidate",
    "Company",
    "DomainError",
    "DuplicateError",
    "EmployeeRequest",
    "Entity",
    "ExitPermission",
    "Feature",
    "Intern",
    "LeaveRequest",
    "LoanRequest",
    "MissionOrder",
    "NotFoundError",
    "Notification",
    "OperationError",
    "Pagination",
    "Permission",
    "PermissionAction",
    "Presence",
    "Project",
    "ProjectCandidate",
    "Question",
    "RequestStatus",
    "Role",
    "SessionRole",
    "TenancyError",
    "Test",
    "TestCandidate",
    "TestQuestion",
    "TrainingRequest",
    "User",
    "UserExperience",
    "UserSession",
    "ValidationError",
    "utc_now",
]

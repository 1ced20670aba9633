"""Use cases of the application layer."""

from .auth_use_cases import AuthUseCase
from .candidate_use_cases import CandidateManagementUseCase
from .company_use_cases import CompanyManagementUseCase
from .employee_request_use_cases import (
    AdvanceSalaryRequestManagementUseCase,
    ExitPermissionManagementUseCase,
    LeaveRequestManagementUseCase,
    LoanRequestManagementUseCase,
)
from .experience_use_cases import UserExperienceManagementUseCase
from .feature_use_cases import FeatureManagementUseCase
from .health_use_cases import GetHealthStatusUseCase
from .intern_use_cases import InternManagementUseCase
from .mission_order_use_cases import MissionOrderManagementUseCase
from .notification_use_cases import NotificationManagementUseCase
from .permission_use_cases import PermissionManagementUseCase
from .presence_use_cases import PresenceManagementUseCase
from .project_use_cases import ProjectManagementUseCase
from .question_use_cases import QuestionManagementUseCase
from .role_use_cases import RoleManagementUseCase
from .seed_use_case import SeedRootUseCase
from .test_use_cases import TestManagementUseCase
from .training_request_use_cases import TrainingRequestManagementUseCase
from .user_use_cases import UserManagementUseCase

__all__ = [
    "AdvanceSalaryRequestManagementUseCase",
    "AuthUseCase",
    "CandidateManagementUseCase",
    "CompanyManagementUseCase",
    "ExitPermissionManagementUseCase",
    "FeatureManagementUseCase",
    "GetHealthStatusUseCase",
    "InternManagementUseCase",
    "LeaveRequestManagementUseCase",
    "LoanRequestManagementUseCase",
    "MissionOrderManagementUseCase",
    "NotificationManagementUseCase",
    "PermissionManagementUseCase",
    "PresenceManagementUseCase",
    "ProjectManagementUseCase",
    "QuestionManagementUseCase",
    "RoleManagementUseCase",
    "SeedRootUseCase",
    "TestManagementUseCase",
    "TrainingRequestManagementUseCase",
    "UserExperienceManagementUseCase",
    "UserManagementUseCase",
]

"""MongoDB repository implementations."""

from .assessment_repository import (
    TestCandidateRepository,
    TestQuestionRepository,
    TestRepository,
)
from .base_repository import MongoRepository
from .organization_repository import CompanyRepository, RoleRepository, UserRepository
from .permission_repository import FeatureRepository, PermissionRepository
from .recruitment_repository import (
    CandidateRepository,
    InternRepository,
    ProjectCandidateRepository,
    ProjectRepository,
    QuestionRepository,
)
from .workforce_repository import (
    AdvanceSalaryRequestRepository,
    ExitPermissionRepository,
    LeaveRequestRepository,
    LoanRequestRepository,
    MissionOrderRepository,
    NotificationRepository,
    PresenceRepository,
    TrainingRequestRepository,
    UserExperienceRepository,
)

__all__ = [
    "AdvanceSalaryRequestRepository",
    "CandidateRepository",
    "CompanyRepository",
    "ExitPermissionRepository",
    "FeatureRepository",
    "InternRepository",
    "LeaveRequestRepository",
    "LoanRequestRepository",
    "MissionOrderRepository",
    "MongoRepository",
    "NotificationRepository",
    "PermissionRepository",
    "PresenceRepository",
    "ProjectCandidateRepository",
    "ProjectRepository",
    "QuestionRepository",
    "RoleRepository",
    "TestCandidateRepository",
    "TestQuestionRepository",
    "TestRepository",
    "TrainingRequestRepository",
    "UserExperienceRepository",
    "UserRepository",
]

"""Domain repository interfaces."""

from .assessment import (
    ITestCandidateRepository,
    ITestQuestionRepository,
    ITestRepository,
)
from .base import IRepository
from .organization import ICompanyRepository, IRoleRepository, IUserRepository
from .permission import IFeatureRepository, IPermissionRepository
from .recruitment import (
    ICandidateRepository,
    IInternRepository,
    IProjectCandidateRepository,
    IProjectRepository,
    IQuestionRepository,
)
from .workforce import (
    IAdvanceSalaryRequestRepository,
    IExitPermissionRepository,
    ILeaveRequestRepository,
    ILoanRequestRepository,
    IMissionOrderRepository,
    INotificationRepository,
    IPresenceRepository,
    ITrainingRequestRepository,
    IUserExperienceRepository,
)

__all__ = [
    "IAdvanceSalaryRequestRepository",
    "ICandidateRepository",
    "ICompanyRepository",
    "IExitPermissionRepository",
    "IFeatureRepository",
    "IInternRepository",
    "ILeaveRequestRepository",
    "ILoanRequestRepository",
    "IMissionOrderRepository",
    "INotificationRepository",
    "IPermissionRepository",
    "IPresenceRepository",
    "IProjectCandidateRepository",
    "IProjectRepository",
    "IQuestionRepository",
    "IRepository",
    "IRoleRepository",
    "ITestCandidateRepository",
    "ITestQuestionRepository",
    "ITestRepository",
    "ITrainingRequestRepository",
    "IUserExperienceRepository",
    "IUserRepository",
]

"""Repository interfaces for employee-scoped records."""

from labs.domain.entities.employee_request import (
    AdvanceSalaryRequest,
    ExitPermission,
    LeaveRequest,
    LoanRequest,
)
from labs.domain.entities.workforce import (
    MissionOrder,
    Notification,
    Presence,
    TrainingRequest,
    UserExperience,
)

from .base import IRepository


class IPresenceRepository(IRepository[Presence]):
    """Interface for presence repository."""


class IMissionOrderRepository(IRepository[MissionOrder]):
    """Interface for mission order repository."""


class ITrainingRequestRepository(IRepository[TrainingRequest]):
    """Interface for training request repository."""


class INotificationRepository(IRepository[Notification]):
    """Interface for notification repository."""


class IUserExperienceRepository(IRepository[UserExperience]):
    """Interface for user experience repository."""


class ILeaveRequestRepository(IRepository[LeaveRequest]):
    """Interface for leave request repository."""


class IExitPermissionRepository(IRepository[ExitPermission]):
    """Interface for exit permission repository."""


class IAdvanceSalaryRequestRepository(IRepository[AdvanceSalaryRequest]):
    """Interface for advance salary request repository."""


class ILoanRequestRepository(IRepository[LoanRequest]):
    """Interface for loan request repository."""

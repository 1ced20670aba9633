"""MongoDB repositories for records attached to one employee."""

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
from labs.domain.repositories.workforce import (
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

from .base_repository import MongoRepository


class PresenceRepository(MongoRepository[Presence], IPresenceRepository):
    COLLECTION_NAME = "presences"
    RESOURCE_NAME = "Presence"
    ENTITY_CLASS = Presence


class MissionOrderRepository(MongoRepository[MissionOrder], IMissionOrderRepository):
    COLLECTION_NAME = "mission_orders"
    RESOURCE_NAME = "Mission order"
    ENTITY_CLASS = MissionOrder


class TrainingRequestRepository(
    MongoRepository[TrainingRequest], ITrainingRequestRepository
):
    COLLECTION_NAME = "training_requests"
    RESOURCE_NAME = "Training request"
    ENTITY_CLASS = TrainingRequest


class NotificationRepository(MongoRepository[Notification], INotificationRepository):
    COLLECTION_NAME = "notifications"
    RESOURCE_NAME = "Notification"
    ENTITY_CLASS = Notification


class UserExperienceRepository(
    MongoRepository[UserExperience], IUserExperienceRepository
):
    COLLECTION_NAME = "user_experiences"
    RESOURCE_NAME = "User experience"
    ENTITY_CLASS = UserExperience


class LeaveRequestRepository(MongoRepository[LeaveRequest], ILeaveRequestRepository):
    COLLECTION_NAME = "leave_requests"
    RESOURCE_NAME = "Leave request"
    ENTITY_CLASS = LeaveRequest


class ExitPermissionRepository(
    MongoRepository[ExitPermission], IExitPermissionRepository
):
    COLLECTION_NAME = "exit_permissions"
    RESOURCE_NAME = "Exit permission"
    ENTITY_CLASS = ExitPermission


class AdvanceSalaryRequestRepository(
    MongoRepository[AdvanceSalaryRequest], IAdvanceSalaryRequestRepository
):
    COLLECTION_NAME = "advance_salary_requests"
    RESOURCE_NAME = "Advance salary request"
    ENTITY_CLASS = AdvanceSalaryRequest


class LoanRequestRepository(MongoRepository[LoanRequest], ILoanRequestRepository):
    COLLECTION_NAME = "loan_requests"
    RESOURCE_NAME = "Loan request"
    ENTITY_CLASS = LoanRequest

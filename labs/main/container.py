"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import containers, providers

from labs.application.services.notifier import Notifier
from labs.application.use_cases import (
    AdvanceSalaryRequestManagementUseCase,
    AuthUseCase,
    CandidateManagementUseCase,
    CompanyManagementUseCase,
    ExitPermissionManagementUseCase,
    FeatureManagementUseCase,
    GetHealthStatusUseCase,
    InternManagementUseCase,
    LeaveRequestManagementUseCase,
    LoanRequestManagementUseCase,
    MissionOrderManagementUseCase,
    NotificationManagementUseCase,
    PermissionManagementUseCase,
    PresenceManagementUseCase,
    ProjectManagementUseCase,
    QuestionManagementUseCase,
    RoleManagementUseCase,
    SeedRootUseCase,
    TestManagementUseCase,
    TrainingRequestManagementUseCase,
    UserExperienceManagementUseCase,
    UserManagementUseCase,
)
from labs.domain.services.tenancy_guard import TenancyGuard
from labs.infrastructure.database import MongoDatabase
from labs.infrastructure.repositories import (
    AdvanceSalaryRequestRepository,
    CandidateRepository,
    CompanyRepository,
    ExitPermissionRepository,
    FeatureRepository,
    InternRepository,
    LeaveRequestRepository,
    LoanRequestRepository,
    MissionOrderRepository,
    NotificationRepository,
    PermissionRepository,
    PresenceRepository,
    ProjectCandidateRepository,
    ProjectRepository,
    QuestionRepository,
    RoleRepository,
    TestCandidateRepository,
    TestQuestionRepository,
    TestRepository,
    TrainingRequestRepository,
    UserExperienceRepository,
    UserRepository,
)
from labs.infrastructure.security import BcryptPasswordHasher, JWTTokenService
from labs.infrastructure.services.health_check_service import HealthCheckService
from labs.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    company_repository = providers.Singleton(CompanyRepository, database=mongo_database)
    user_repository = providers.Singleton(UserRepository, database=mongo_database)
    role_repository = providers.Singleton(RoleRepository, database=mongo_database)
    feature_repository = providers.Singleton(FeatureRepository, database=mongo_database)
    permission_repository = providers.Singleton(
        PermissionRepository, database=mongo_database
    )
    candidate_repository = providers.Singleton(
        CandidateRepository, database=mongo_database
    )
    intern_repository = providers.Singleton(InternRepository, database=mongo_database)
    project_repository = providers.Singleton(ProjectRepository, database=mongo_database)
    project_candidate_repository = providers.Singleton(
        ProjectCandidateRepository, database=mongo_database
    )
    question_repository = providers.Singleton(
        QuestionRepository, database=mongo_database
    )
    test_repository = providers.Singleton(TestRepository, database=mongo_database)
    test_question_repository = providers.Singleton(
        TestQuestionRepository, database=mongo_database
    )
    test_candidate_repository = providers.Singleton(
        TestCandidateRepository, database=mongo_database
    )
    presence_repository = providers.Singleton(
        PresenceRepository, database=mongo_database
    )
    mission_order_repository = providers.Singleton(
        MissionOrderRepository, database=mongo_database
    )
    training_request_repository = providers.Singleton(
        TrainingRequestRepository, database=mongo_database
    )
    notification_repository = providers.Singleton(
        NotificationRepository, database=mongo_database
    )
    user_experience_repository = providers.Singleton(
        UserExperienceRepository, database=mongo_database
    )
    leave_request_repository = providers.Singleton(
        LeaveRequestRepository, database=mongo_database
    )
    exit_permission_repository = providers.Singleton(
        ExitPermissionRepository, database=mongo_database
    )
    advance_salary_request_repository = providers.Singleton(
        AdvanceSalaryRequestRepository, database=mongo_database
    )
    loan_request_repository = providers.Singleton(
        LoanRequestRepository, database=mongo_database
    )

    # Security
    password_hasher = providers.Singleton(
        BcryptPasswordHasher, rounds=config.auth.bcrypt_rounds
    )
    token_service = providers.Singleton(
        JWTTokenService,
        secret=config.auth.secret,
        duration_hours=config.auth.duration,
        algorithm=config.auth.algorithm,
    )

    health_check_service = providers.Singleton(
        HealthCheckService, mongo_database=mongo_database
    )

    # Domain / application services
    tenancy_guard = providers.Singleton(TenancyGuard, user_repository=user_repository)
    notifier = providers.Singleton(
        Notifier, notification_repository=notification_repository
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    auth_use_case = providers.Factory(
        AuthUseCase,
        user_repository=user_repository,
        company_repository=company_repository,
        role_repository=role_repository,
        password_hasher=password_hasher,
        token_service=token_service,
    )

    seed_root_use_case = providers.Factory(
        SeedRootUseCase,
        user_repository=user_repository,
        company_repository=company_repository,
        role_repository=role_repository,
        password_hasher=password_hasher,
    )

    company_management_use_case = providers.Factory(
        CompanyManagementUseCase,
        company_repository=company_repository,
        tenancy_guard=tenancy_guard,
    )

    user_management_use_case = providers.Factory(
        UserManagementUseCase,
        user_repository=user_repository,
        role_repository=role_repository,
        company_repository=company_repository,
        password_hasher=password_hasher,
        tenancy_guard=tenancy_guard,
    )

    role_management_use_case = providers.Factory(
        RoleManagementUseCase,
        role_repository=role_repository,
        company_repository=company_repository,
        permission_repository=permission_repository,
        tenancy_guard=tenancy_guard,
    )

    feature_management_use_case = providers.Factory(
        FeatureManagementUseCase,
        feature_repository=feature_repository,
        permission_repository=permission_repository,
        tenancy_guard=tenancy_guard,
    )

    permission_management_use_case = providers.Factory(
        PermissionManagementUseCase,
        permission_repository=permission_repository,
        role_repository=role_repository,
        feature_repository=feature_repository,
        tenancy_guard=tenancy_guard,
    )

    candidate_management_use_case = providers.Factory(
        CandidateManagementUseCase,
        candidate_repository=candidate_repository,
        company_repository=company_repository,
        password_hasher=password_hasher,
        tenancy_guard=tenancy_guard,
    )

    intern_management_use_case = providers.Factory(
        InternManagementUseCase,
        intern_repository=intern_repository,
        tenancy_guard=tenancy_guard,
    )

    project_management_use_case = providers.Factory(
        ProjectManagementUseCase,
        project_repository=project_repository,
        project_candidate_repository=project_candidate_repository,
        candidate_repository=candidate_repository,
        tenancy_guard=tenancy_guard,
    )

    question_management_use_case = providers.Factory(
        QuestionManagementUseCase,
        question_repository=question_repository,
        tenancy_guard=tenancy_guard,
    )

    test_management_use_case = providers.Factory(
        TestManagementUseCase,
        test_repository=test_repository,
        test_question_repository=test_question_repository,
        test_candidate_repository=test_candidate_repository,
        candidate_repository=candidate_repository,
        project_repository=project_repository,
        project_candidate_repository=project_candidate_repository,
        question_repository=question_repository,
        tenancy_guard=tenancy_guard,
    )

    presence_management_use_case = providers.Factory(
        PresenceManagementUseCase,
        repository=presence_repository,
        tenancy_guard=tenancy_guard,
    )

    mission_order_management_use_case = providers.Factory(
        MissionOrderManagementUseCase,
        repository=mission_order_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )

    training_request_management_use_case = providers.Factory(
        TrainingRequestManagementUseCase,
        repository=training_request_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )

    notification_management_use_case = providers.Factory(
        NotificationManagementUseCase,
        notification_repository=notification_repository,
        tenancy_guard=tenancy_guard,
    )

    user_experience_management_use_case = providers.Factory(
        UserExperienceManagementUseCase,
        experience_repository=user_experience_repository,
        tenancy_guard=tenancy_guard,
    )

    leave_request_management_use_case = providers.Factory(
        LeaveRequestManagementUseCase,
        repository=leave_request_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )

    exit_permission_management_use_case = providers.Factory(
        ExitPermissionManagementUseCase,
        repository=exit_permission_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )

    advance_salary_request_management_use_case = providers.Factory(
        AdvanceSalaryRequestManagementUseCase,
        repository=advance_salary_request_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )

    loan_request_management_use_case = providers.Factory(
        LoanRequestManagementUseCase,
        repository=loan_request_repository,
        tenancy_guard=tenancy_guard,
        notifier=notifier,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the external resources owned by the container.

    Creates the MongoDB indexes on startup and closes the client on shutdown.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")

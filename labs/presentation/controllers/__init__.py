"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers map HTTP requests to use cases; domain errors
are turned into responses by the handlers registered on the application.
"""

from .auth_controller import router as auth_router
from .candidates_controller import router as candidates_router
from .companies_controller import router as companies_router
from .employee_records_controller import (
    advance_salary_requests_router,
    exit_permissions_router,
    leave_requests_router,
    loan_requests_router,
    missions_router,
    presences_router,
    trainings_router,
)
from .experience_controller import router as experience_router
from .features_controller import router as features_router
from .interns_controller import router as interns_router
from .notifications_controller import router as notifications_router
from .permissions_controller import router as permissions_router
from .projects_controller import router as projects_router
from .questions_controller import router as questions_router
from .roles_controller import router as roles_router
from .system_controller import router as system_router
from .tests_controller import router as tests_router
from .users_controller import router as users_router

api_routers = [
    auth_router,
    companies_router,
    users_router,
    roles_router,
    features_router,
    permissions_router,
    candidates_router,
    interns_router,
    projects_router,
    questions_router,
    tests_router,
    presences_router,
    missions_router,
    trainings_router,
    notifications_router,
    experience_router,
    leave_requests_router,
    exit_permissions_router,
    advance_salary_requests_router,
    loan_requests_router,
]

__all__ = ["api_routers", "system_router"]

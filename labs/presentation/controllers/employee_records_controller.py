"""
Endpoints for records owned by one employee of a company: presences,
mission orders, training requests and the employee requests (leave, exit,
salary advance, loan).
"""

from labs.application.dtos.employee_request_dto import (
    AdvanceSalaryRequestCreateDTO,
    AdvanceSalaryRequestDTO,
    AdvanceSalaryRequestUpdateDTO,
    ExitPermissionCreateDTO,
    ExitPermissionDTO,
    ExitPermissionUpdateDTO,
    LeaveRequestCreateDTO,
    LeaveRequestDTO,
    LeaveRequestUpdateDTO,
    LoanRequestCreateDTO,
    LoanRequestDTO,
    LoanRequestUpdateDTO,
)
from labs.application.dtos.workforce_dto import (
    MissionOrderCreateDTO,
    MissionOrderDTO,
    MissionOrderUpdateDTO,
    PresenceCreateDTO,
    PresenceDTO,
    PresenceUpdateDTO,
    TrainingRequestCreateDTO,
    TrainingRequestDTO,
    TrainingRequestUpdateDTO,
)
from labs.main.container import AppContainer

from .crud_routes import build_employee_record_router

presences_router = build_employee_record_router(
    prefix="/api/presences",
    tag="presences",
    provider=AppContainer.presence_management_use_case,
    resource="presence",
    create_dto=PresenceCreateDTO,
    update_dto=PresenceUpdateDTO,
    item_dto=PresenceDTO,
)

missions_router = build_employee_record_router(
    prefix="/api/missions",
    tag="missions",
    provider=AppContainer.mission_order_management_use_case,
    resource="mission order",
    create_dto=MissionOrderCreateDTO,
    update_dto=MissionOrderUpdateDTO,
    item_dto=MissionOrderDTO,
)

trainings_router = build_employee_record_router(
    prefix="/api/trainings",
    tag="trainings",
    provider=AppContainer.training_request_management_use_case,
    resource="training request",
    create_dto=TrainingRequestCreateDTO,
    update_dto=TrainingRequestUpdateDTO,
    item_dto=TrainingRequestDTO,
)

leave_requests_router = build_employee_record_router(
    prefix="/api/leave-requests",
    tag="employee requests",
    provider=AppContainer.leave_request_management_use_case,
    resource="leave request",
    create_dto=LeaveRequestCreateDTO,
    update_dto=LeaveRequestUpdateDTO,
    item_dto=LeaveRequestDTO,
)

exit_permissions_router = build_employee_record_router(
    prefix="/api/exit-permissions",
    tag="employee requests",
    provider=AppContainer.exit_permission_management_use_case,
    resource="exit permission",
    create_dto=ExitPermissionCreateDTO,
    update_dto=ExitPermissionUpdateDTO,
    item_dto=ExitPermissionDTO,
)

advance_salary_requests_router = build_employee_record_router(
    prefix="/api/advance-salary-requests",
    tag="employee requests",
    provider=AppContainer.advance_salary_request_management_use_case,
    resource="advance salary request",
    create_dto=AdvanceSalaryRequestCreateDTO,
    update_dto=AdvanceSalaryRequestUpdateDTO,
    item_dto=AdvanceSalaryRequestDTO,
)

loan_requests_router = build_employee_record_router(
    prefix="/api/loan-requests",
    tag="employee requests",
    provider=AppContainer.loan_request_management_use_case,
    resource="loan request",
    create_dto=LoanRequestCreateDTO,
    update_dto=LoanRequestUpdateDTO,
    item_dto=LoanRequestDTO,
)

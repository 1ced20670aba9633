"""
Application Use Cases - Employee requests

Leave requests, exit permissions, salary advances and loans. They are
created as pending; when an update changes the status the employee gets a
notification.
"""

from typing import Any, Dict

from labs.application.dtos.employee_request_dto import (
    AdvanceSalaryRequestDTO,
    ExitPermissionDTO,
    LeaveRequestDTO,
    LoanRequestDTO,
)
from labs.domain.entities.employee_request import (
    AdvanceSalaryRequest,
    EmployeeRequest,
    ExitPermission,
    LeaveRequest,
    LoanRequest,
)
from labs.domain.services.validation import ensure_period

from .base import E, EmployeeRecordUseCase


class EmployeeRequestUseCase(EmployeeRecordUseCase[E]):
    async def _after_update(
        self, entity: EmployeeRequest, changes: Dict[str, Any]
    ) -> None:
        if "status" in changes:
            await self._notify(
                entity,
                "employee_request",
                f"Your {self.resource_name.lower()} was {entity.status.value}",
            )


class LeaveRequestManagementUseCase(EmployeeRequestUseCase[LeaveRequest]):
    resource_name = "Leave request"
    entity_class = LeaveRequest
    dto_class = LeaveRequestDTO

    def _validate(self, entity: LeaveRequest) -> None:
        ensure_period(entity.start_date, entity.end_date, "leave period")


class ExitPermissionManagementUseCase(EmployeeRequestUseCase[ExitPermission]):
    resource_name = "Exit permission"
    entity_class = ExitPermission
    dto_class = ExitPermissionDTO

    def _validate(self, entity: ExitPermission) -> None:
        ensure_period(entity.start_time, entity.return_time, "exit window")


class AdvanceSalaryRequestManagementUseCase(
    EmployeeRequestUseCase[AdvanceSalaryRequest]
):
    resource_name = "Advance salary request"
    entity_class = AdvanceSalaryRequest
    dto_class = AdvanceSalaryRequestDTO


class LoanRequestManagementUseCase(EmployeeRequestUseCase[LoanRequest]):
    resource_name = "Loan request"
    entity_class = LoanRequest
    dto_class = LoanRequestDTO

"""DTOs for leave requests, exit permissions, salary advances and loans."""

from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from labs.domain.entities.employee_request import (
    AdvanceSalaryRequest,
    EmployeeRequest,
    ExitPermission,
    LeaveRequest,
    LoanRequest,
    RequestStatus,
)

from .common import APIModel, UTCDateTime


class EmployeeRequestDTO(APIModel):
    id: UUID
    status: RequestStatus
    user_id: UUID
    created_at: UTCDateTime

    @classmethod
    def _base_fields(cls, request: EmployeeRequest) -> dict:
        return {
            "id": request.id,
            "status": request.status,
            "user_id": request.user_id,
            "created_at": request.created_at,
        }


class LeaveRequestCreateDTO(APIModel):
    start_date: UTCDateTime
    end_date: UTCDateTime
    leave_type: str = Field(alias="type", min_length=2, max_length=60)
    reason: str = Field(default="", max_length=500)

    @model_validator(mode="after")
    def _check_leave_period(self) -> "LeaveRequestCreateDTO":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class LeaveRequestUpdateDTO(APIModel):
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    leave_type: Optional[str] = Field(
        default=None, alias="type", min_length=2, max_length=60
    )
    reason: Optional[str] = Field(default=None, max_length=500)
    status: Optional[RequestStatus] = None


class LeaveRequestDTO(EmployeeRequestDTO):
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    leave_type: str = Field(alias="type")
    reason: str

    @classmethod
    def from_entity(cls, request: LeaveRequest) -> "LeaveRequestDTO":
        return cls(
            **cls._base_fields(request),
            start_date=request.start_date,
            end_date=request.end_date,
            leave_type=request.leave_type,
            reason=request.reason,
        )


class ExitPermissionCreateDTO(APIModel):
    release_date: UTCDateTime
    start_time: UTCDateTime
    return_time: UTCDateTime
    exit_type: str = Field(alias="type", min_length=2, max_length=60)
    reason: str = Field(default="", max_length=500)

    @model_validator(mode="after")
    def _check_exit_window(self) -> "ExitPermissionCreateDTO":
        if self.return_time < self.start_time:
            raise ValueError("return_time must not be before start_time")
        return self


class ExitPermissionUpdateDTO(APIModel):
    release_date: Optional[UTCDateTime] = None
    start_time: Optional[UTCDateTime] = None
    return_time: Optional[UTCDateTime] = None
    exit_type: Optional[str] = Field(
        default=None, alias="type", min_length=2, max_length=60
    )
    reason: Optional[str] = Field(default=None, max_length=500)
    status: Optional[RequestStatus] = None


class ExitPermissionDTO(EmployeeRequestDTO):
    release_date: Optional[UTCDateTime] = None
    start_time: Optional[UTCDateTime] = None
    return_time: Optional[UTCDateTime] = None
    exit_type: str = Field(alias="type")
    reason: str

    @classmethod
    def from_entity(cls, request: ExitPermission) -> "ExitPermissionDTO":
        return cls(
            **cls._base_fields(request),
            release_date=request.release_date,
            start_time=request.start_time,
            return_time=request.return_time,
            exit_type=request.exit_type,
            reason=request.reason,
        )


class AdvanceSalaryRequestCreateDTO(APIModel):
    amount: float = Field(gt=0)
    reason: str = Field(default="", max_length=500)


class AdvanceSalaryRequestUpdateDTO(APIModel):
    amount: Optional[float] = Field(default=None, gt=0)
    reason: Optional[str] = Field(default=None, max_length=500)
    status: Optional[RequestStatus] = None


class AdvanceSalaryRequestDTO(EmployeeRequestDTO):
    amount: float
    reason: str

    @classmethod
    def from_entity(cls, request: AdvanceSalaryRequest) -> "AdvanceSalaryRequestDTO":
        return cls(
            **cls._base_fields(request), amount=request.amount, reason=request.reason
        )


class LoanRequestCreateDTO(APIModel):
    loan_amount: float = Field(gt=0)
    loan_duration: int = Field(ge=1, description="Duration in months")
    interest_rate: float = Field(default=0.0, ge=0)
    reason_for_loan: str = Field(min_length=2, max_length=500)
    path_document: Optional[str] = None


class LoanRequestUpdateDTO(APIModel):
    loan_amount: Optional[float] = Field(default=None, gt=0)
    loan_duration: Optional[int] = Field(default=None, ge=1)
    interest_rate: Optional[float] = Field(default=None, ge=0)
    reason_for_loan: Optional[str] = Field(default=None, min_length=2, max_length=500)
    path_document: Optional[str] = None
    status: Optional[RequestStatus] = None


class LoanRequestDTO(EmployeeRequestDTO):
    loan_amount: float
    loan_duration: int
    interest_rate: float
    reason_for_loan: str
    path_document: Optional[str] = None

    @classmethod
    def from_entity(cls, request: LoanRequest) -> "LoanRequestDTO":
        return cls(
            **cls._base_fields(request),
            loan_amount=request.loan_amount,
            loan_duration=request.loan_duration,
            interest_rate=request.interest_rate,
            reason_for_loan=request.reason_for_loan,
            path_document=request.path_document,
        )

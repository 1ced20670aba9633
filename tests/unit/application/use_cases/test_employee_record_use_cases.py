from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import cast
from uuid import uuid4

import pytest

from labs.application.dtos.employee_request_dto import (
    AdvanceSalaryRequestCreateDTO,
    LeaveRequestCreateDTO,
    LeaveRequestUpdateDTO,
    LoanRequestCreateDTO,
    LoanRequestUpdateDTO,
)
from labs.application.dtos.workforce_dto import (
    MissionOrderCreateDTO,
    MissionOrderUpdateDTO,
    PresenceCreateDTO,
    TrainingRequestCreateDTO,
    TrainingRequestUpdateDTO,
)
from labs.application.services.notifier import Notifier
from labs.application.use_cases import (
    AdvanceSalaryRequestManagementUseCase,
    LeaveRequestManagementUseCase,
    LoanRequestManagementUseCase,
    MissionOrderManagementUseCase,
    PresenceManagementUseCase,
    TrainingRequestManagementUseCase,
)
from labs.domain.entities.employee_request import RequestStatus
from labs.domain.entities.errors import NotFoundError, TenancyError, ValidationError
from labs.domain.entities.organization import User
from labs.domain.entities.pagination import Pagination
from labs.infrastructure.database.mongo_database import MongoDatabase
from labs.infrastructure.repositories import (
    AdvanceSalaryRequestRepository,
    LeaveRequestRepository,
    LoanRequestRepository,
    MissionOrderRepository,
    NotificationRepository,
    PresenceRepository,
    TrainingRequestRepository,
    UserRepository,
)
from tests.conftest import store

START = datetime(2026, 5, 4, 8, 0, tzinfo=timezone.utc)


@pytest.fixture()
def employee(organization, fake_mongo_database) -> User:
    return store(
        fake_mongo_database,
        UserRepository,
        User(
            first_name="Walid",
            last_name="Jaziri",
            email="walid@example.com",
            company_id=organization.company.id,
        ),
    )


@pytest.fixture()
def notifications(fake_mongo_database) -> NotificationRepository:
    return NotificationRepository(cast(MongoDatabase, fake_mongo_database))


def _build(use_case_class, repository_class, fake_mongo_database, tenancy_guard, notifications):
    database = cast(MongoDatabase, fake_mongo_database)
    return use_case_class(
        repository=repository_class(database),
        tenancy_guard=tenancy_guard,
        notifier=Notifier(notifications),
    )


@pytest.mark.asyncio
async def test_presence_crud_for_employee(
    organization, employee, fake_mongo_database, tenancy_guard
) -> None:
    use_case = PresenceManagementUseCase(
        repository=PresenceRepository(cast(MongoDatabase, fake_mongo_database)),
        tenancy_guard=tenancy_guard,
    )
    company_id = organization.company.id

    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        PresenceCreateDTO(matricule=1042, check=START),
    )
    presence = await use_case.get(
        organization.session, company_id, employee.id, created.id
    )
    assert presence.matricule == 1042
    assert presence.user_id == employee.id

    page = await use_case.list_page(
        organization.session, company_id, employee.id, Pagination()
    )
    assert page.total_count == 1

    await use_case.delete(organization.session, company_id, employee.id, created.id)
    assert (
        await use_case.count(organization.session, company_id, employee.id)
    ).count == 0


@pytest.mark.asyncio
async def test_records_are_scoped_to_their_employee(
    organization, employee, fake_mongo_database, tenancy_guard
) -> None:
    use_case = PresenceManagementUseCase(
        repository=PresenceRepository(cast(MongoDatabase, fake_mongo_database)),
        tenancy_guard=tenancy_guard,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        PresenceCreateDTO(matricule=7, check=START),
    )

    with pytest.raises(NotFoundError):
        await use_case.get(
            organization.session, company_id, organization.manager.id, created.id
        )

    with pytest.raises(NotFoundError, match="User"):
        await use_case.create(
            organization.session,
            company_id,
            uuid4(),
            PresenceCreateDTO(matricule=7, check=START),
        )


@pytest.mark.asyncio
async def test_records_reject_other_tenant(
    organization, other_organization, employee, fake_mongo_database, tenancy_guard
) -> None:
    use_case = PresenceManagementUseCase(
        repository=PresenceRepository(cast(MongoDatabase, fake_mongo_database)),
        tenancy_guard=tenancy_guard,
    )

    with pytest.raises(TenancyError):
        await use_case.list_page(
            other_organization.session,
            organization.company.id,
            employee.id,
            Pagination(),
        )


@pytest.mark.asyncio
async def test_mission_order_notifies_employee_on_creation(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        MissionOrderManagementUseCase,
        MissionOrderRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id

    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        MissionOrderCreateDTO(
            object="Client audit",
            description="On-site audit",
            start_date=START,
            end_date=START + timedelta(days=2),
            address_client="Sfax",
            transport="train",
        ),
    )

    received = await notifications.find_all(user_id=employee.id)
    assert [n.type for n in received] == ["mission_order"]
    assert "Client audit" in received[0].content

    with pytest.raises(ValidationError):
        await use_case.update(
            organization.session,
            company_id,
            employee.id,
            created.id,
            MissionOrderUpdateDTO(end_date=START - timedelta(days=1)),
        )


@pytest.mark.asyncio
async def test_leave_request_starts_pending_and_notifies_on_decision(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        LeaveRequestManagementUseCase,
        LeaveRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id

    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        LeaveRequestCreateDTO(
            start_date=START,
            end_date=START + timedelta(days=3),
            type="annual",
            reason="Family trip",
        ),
    )
    request = await use_case.get(
        organization.session, company_id, employee.id, created.id
    )
    assert request.status is RequestStatus.PENDING
    assert request.leave_type == "annual"
    assert await notifications.count(user_id=employee.id) == 0

    # editing other fields does not notify
    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        LeaveRequestUpdateDTO(reason="Family event"),
    )
    assert await notifications.count(user_id=employee.id) == 0

    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        LeaveRequestUpdateDTO(status=RequestStatus.APPROVED),
    )
    received = await notifications.find_all(user_id=employee.id)
    assert len(received) == 1
    assert received[0].content == "Your leave request was approved"
    assert received[0].company_id == company_id


@pytest.mark.asyncio
async def test_leave_request_update_keeps_period_valid(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        LeaveRequestManagementUseCase,
        LeaveRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        LeaveRequestCreateDTO(
            start_date=START, end_date=START + timedelta(days=3), type="sick"
        ),
    )

    with pytest.raises(ValidationError):
        await use_case.update(
            organization.session,
            company_id,
            employee.id,
            created.id,
            LeaveRequestUpdateDTO(start_date=START + timedelta(days=5)),
        )

    stored = await use_case.repository.find_by_id(created.id)
    assert stored is not None and stored.start_date == START


@pytest.mark.asyncio
async def test_loan_and_advance_requests(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    loans = _build(
        LoanRequestManagementUseCase,
        LoanRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    advances = _build(
        AdvanceSalaryRequestManagementUseCase,
        AdvanceSalaryRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id

    loan = await loans.create(
        organization.session,
        company_id,
        employee.id,
        LoanRequestCreateDTO(
            loan_amount=5000, loan_duration=12, reason_for_loan="New car"
        ),
    )
    await advances.create(
        organization.session,
        company_id,
        employee.id,
        AdvanceSalaryRequestCreateDTO(amount=300, reason="Rent"),
    )

    await loans.update(
        organization.session,
        company_id,
        employee.id,
        loan.id,
        LoanRequestUpdateDTO(status=RequestStatus.REJECTED),
    )

    received = await notifications.find_all(user_id=employee.id)
    assert [n.content for n in received] == ["Your loan request was rejected"]
    assert (
        await advances.count(organization.session, company_id, employee.id)
    ).count == 1


@pytest.mark.asyncio
async def test_training_request_decision(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        TrainingRequestManagementUseCase,
        TrainingRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id

    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        TrainingRequestCreateDTO(
            training_title="Kubernetes",
            description="CKA preparation",
            reason="Platform migration",
        ),
    )
    request = await use_case.get(
        organization.session, company_id, employee.id, created.id
    )
    assert request.request_date is not None
    assert request.decision_company is None

    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        TrainingRequestUpdateDTO(decision_company="accepted"),
    )

    received = await notifications.find_all(user_id=employee.id)
    assert len(received) == 1
    assert received[0].type == "training_request"
    assert received[0].content.endswith("accepted")


@pytest.mark.asyncio
async def test_leave_request_accepts_offsetless_dates(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        LeaveRequestManagementUseCase,
        LeaveRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        LeaveRequestCreateDTO.model_validate_json(
            '{"startDate": "2026-05-04T08:00:00", "endDate": "2026-05-06T08:00:00Z",'
            ' "type": "annual"}'
        ),
    )

    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        LeaveRequestUpdateDTO.model_validate_json('{"startDate": "2026-05-05T08:00:00"}'),
    )

    stored = await use_case.repository.find_by_id(created.id)
    assert stored is not None
    assert stored.start_date == START + timedelta(days=1)
    assert stored.end_date == START + timedelta(days=2)

    with pytest.raises(ValidationError):
        await use_case.update(
            organization.session,
            company_id,
            employee.id,
            created.id,
            LeaveRequestUpdateDTO.model_validate_json('{"endDate": "2026-05-01T00:00:00"}'),
        )


@pytest.mark.asyncio
async def test_mission_order_update_accepts_offsetless_dates(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        MissionOrderManagementUseCase,
        MissionOrderRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        MissionOrderCreateDTO(
            object="Client audit",
            description="On-site audit",
            start_date=START,
            end_date=START + timedelta(days=2),
            address_client="Sfax",
            transport="train",
        ),
    )

    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        MissionOrderUpdateDTO.model_validate_json('{"endDate": "2026-05-08T18:00:00"}'),
    )

    stored = await use_case.repository.find_by_id(created.id)
    assert stored is not None
    assert stored.end_date == datetime(2026, 5, 8, 18, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_unchanged_status_does_not_notify(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        LeaveRequestManagementUseCase,
        LeaveRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        LeaveRequestCreateDTO(
            start_date=START, end_date=START + timedelta(days=1), type="annual"
        ),
    )

    await use_case.update(
        organization.session,
        company_id,
        employee.id,
        created.id,
        LeaveRequestUpdateDTO(status=RequestStatus.PENDING, reason="typo fix"),
    )

    assert await notifications.count(user_id=employee.id) == 0
    stored = await use_case.repository.find_by_id(created.id)
    assert stored is not None and stored.reason == "typo fix"


@pytest.mark.asyncio
async def test_repeated_training_decision_notifies_once(
    organization, employee, fake_mongo_database, tenancy_guard, notifications
) -> None:
    use_case = _build(
        TrainingRequestManagementUseCase,
        TrainingRequestRepository,
        fake_mongo_database,
        tenancy_guard,
        notifications,
    )
    company_id = organization.company.id
    created = await use_case.create(
        organization.session,
        company_id,
        employee.id,
        TrainingRequestCreateDTO(
            training_title="Kubernetes",
            description="CKA preparation",
            reason="Platform migration",
        ),
    )

    for _ in range(2):
        await use_case.update(
            organization.session,
            company_id,
            employee.id,
            created.id,
            TrainingRequestUpdateDTO(decision_company="accepted"),
        )

    assert await notifications.count(user_id=employee.id) == 1

from __future__ import annotations

from uuid import uuid4

import pytest

from labs.domain.entities.errors import NotFoundError, TenancyError
from labs.domain.entities.session import UserSession
from labs.infrastructure.repositories import UserRepository
from tests.conftest import store


@pytest.mark.asyncio
async def test_check_employee_belonging_accepts_member(
    organization, tenancy_guard
) -> None:
    await tenancy_guard.check_employee_belonging(
        organization.company.id, organization.session
    )


@pytest.mark.asyncio
async def test_check_employee_belonging_rejects_other_company(
    organization, other_organization, tenancy_guard
) -> None:
    with pytest.raises(TenancyError):
        await tenancy_guard.check_employee_belonging(
            other_organization.company.id, organization.session
        )


@pytest.mark.asyncio
async def test_check_employee_belonging_rejects_forged_session(
    organization, tenancy_guard
) -> None:
    # company matches but the user does not exist in it
    session = UserSession(user_id=uuid4(), company_id=organization.company.id)

    with pytest.raises(TenancyError):
        await tenancy_guard.check_employee_belonging(organization.company.id, session)


@pytest.mark.asyncio
async def test_check_employee_belonging_rejects_deleted_user(
    organization, tenancy_guard, fake_mongo_database
) -> None:
    await UserRepository(fake_mongo_database).delete(organization.manager.id)

    with pytest.raises(TenancyError):
        await tenancy_guard.check_employee_belonging(
            organization.company.id, organization.session
        )


@pytest.mark.asyncio
async def test_check_employee_session(
    organization, other_organization, tenancy_guard
) -> None:
    await tenancy_guard.check_employee_session(
        organization.manager.id, organization.session
    )

    with pytest.raises(TenancyError, match="requested user"):
        await tenancy_guard.check_employee_session(
            other_organization.user.id, organization.session
        )


@pytest.mark.asyncio
async def test_ensure_member(organization, other_organization, tenancy_guard) -> None:
    member = await tenancy_guard.ensure_member(
        organization.company.id, organization.manager.id
    )
    assert member.id == organization.manager.id

    with pytest.raises(NotFoundError):
        await tenancy_guard.ensure_member(
            organization.company.id, other_organization.user.id
        )

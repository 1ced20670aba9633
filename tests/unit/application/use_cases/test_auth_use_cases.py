from __future__ import annotations

from typing import cast

import pytest

from labs.application.dtos.auth_dto import SigninDTO, SignupDTO
from labs.application.use_cases.auth_use_cases import AuthUseCase
from labs.domain.entities.errors import (
    AuthenticationError,
    DuplicateError,
    NotFoundError,
)
from labs.infrastructure.database.mongo_database import MongoDatabase
from labs.infrastructure.repositories import (
    CompanyRepository,
    RoleRepository,
    UserRepository,
)
from labs.shared.consts import DEFAULT_ROLE
from tests.conftest import FakeMongoDatabase


def _use_case(fake_mongo_database, password_hasher, token_service) -> AuthUseCase:
    database = cast(MongoDatabase, fake_mongo_database)
    return AuthUseCase(
        user_repository=UserRepository(database),
        company_repository=CompanyRepository(database),
        role_repository=RoleRepository(database),
        password_hasher=password_hasher,
        token_service=token_service,
    )


def _signup() -> SignupDTO:
    return SignupDTO(
        first_name="Yassine",
        last_name="Trabelsi",
        email="Yassine@Example.com",
        password="a-long-secret",
        company_name="Acme",
    )


@pytest.mark.asyncio
async def test_signup_creates_company_role_and_user(
    fake_mongo_database: FakeMongoDatabase, password_hasher, token_service
) -> None:
    use_case = _use_case(fake_mongo_database, password_hasher, token_service)

    result = await use_case.signup(_signup())

    user = await use_case.user_repository.find_by_id(result.id)
    assert user is not None
    assert user.email == "yassine@example.com"
    assert user.password != "a-long-secret"
    assert user.status is True

    company = await use_case.company_repository.find_by_id(user.company_id)
    role = await use_case.role_repository.find_by_id(user.role_id)
    assert company is not None and company.name == "Acme"
    assert company.created_by_user_id == user.id
    assert role is not None and role.name == DEFAULT_ROLE
    assert role.company_id == company.id


@pytest.mark.asyncio
async def test_signup_rejects_registered_email(
    fake_mongo_database: FakeMongoDatabase, password_hasher, token_service
) -> None:
    use_case = _use_case(fake_mongo_database, password_hasher, token_service)
    await use_case.signup(_signup())

    with pytest.raises(DuplicateError):
        await use_case.signup(_signup())

    assert await use_case.company_repository.count() == 1


@pytest.mark.asyncio
async def test_signin_issues_token_for_valid_credentials(
    organization, fake_mongo_database, password_hasher, token_service
) -> None:
    use_case = _use_case(fake_mongo_database, password_hasher, token_service)

    response = await use_case.signin(
        SigninDTO(email="AMIRA@example.com", password="a-long-secret")
    )

    assert response.user.id == organization.manager.id
    assert response.user.name == "Amira Ben Salah"
    assert response.user.work_company_id == organization.company.id

    session = token_service.decode(response.access_token)
    assert session.user_id == organization.manager.id
    assert session.company_id == organization.company.id
    assert [role.name for role in session.roles] == ["Manager"]

    user = await use_case.user_repository.find_by_id(organization.manager.id)
    assert user is not None and user.last_login is not None


@pytest.mark.asyncio
async def test_signin_rejects_wrong_password(
    organization, fake_mongo_database, password_hasher, token_service
) -> None:
    use_case = _use_case(fake_mongo_database, password_hasher, token_service)

    with pytest.raises(AuthenticationError):
        await use_case.signin(
            SigninDTO(email="amira@example.com", password="not-the-password")
        )


@pytest.mark.asyncio
async def test_signin_unknown_or_inactive_user_is_not_found(
    organization, fake_mongo_database, password_hasher, token_service
) -> None:
    use_case = _use_case(fake_mongo_database, password_hasher, token_service)

    with pytest.raises(NotFoundError):
        await use_case.signin(
            SigninDTO(email="nobody@example.com", password="a-long-secret")
        )

    organization.manager.status = False
    await use_case.user_repository.update(organization.manager)

    with pytest.raises(NotFoundError):
        await use_case.signin(
            SigninDTO(email="amira@example.com", password="a-long-secret")
        )

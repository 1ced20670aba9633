from __future__ import annotations

from typing import cast
from uuid import uuid4

import pytest

from labs.application.dtos.permission_dto import (
    FeatureCreateDTO,
    FeatureUpdateDTO,
    PermissionCreateDTO,
    PermissionUpdateDTO,
)
from labs.application.use_cases.feature_use_cases import FeatureManagementUseCase
from labs.application.use_cases.permission_use_cases import (
    PermissionManagementUseCase,
)
from labs.domain.entities.errors import DuplicateError, NotFoundError, ValidationError
from labs.domain.entities.organization import Role
from labs.domain.entities.pagination import Pagination
from labs.infrastructure.database.mongo_database import MongoDatabase
from labs.infrastructure.repositories import (
    FeatureRepository,
    PermissionRepository,
    RoleRepository,
)
from tests.conftest import store


@pytest.fixture()
def features(fake_mongo_database, tenancy_guard) -> FeatureManagementUseCase:
    database = cast(MongoDatabase, fake_mongo_database)
    return FeatureManagementUseCase(
        feature_repository=FeatureRepository(database),
        permission_repository=PermissionRepository(database),
        tenancy_guard=tenancy_guard,
    )


@pytest.fixture()
def permissions(fake_mongo_database, tenancy_guard) -> PermissionManagementUseCase:
    database = cast(MongoDatabase, fake_mongo_database)
    return PermissionManagementUseCase(
        permission_repository=PermissionRepository(database),
        role_repository=RoleRepository(database),
        feature_repository=FeatureRepository(database),
        tenancy_guard=tenancy_guard,
    )


async def _grant(organization, features, permissions, **bits):
    feature = await features.create(
        organization.session,
        organization.company.id,
        FeatureCreateDTO(feature_name="users"),
    )
    permission = await permissions.create(
        organization.session,
        organization.company.id,
        organization.role.id,
        feature.id,
        PermissionCreateDTO(**bits),
    )
    return feature, permission


@pytest.mark.asyncio
async def test_create_permission_copies_feature_name(
    organization, features, permissions
) -> None:
    feature, created = await _grant(organization, features, permissions, read_perm=True)

    permission = await permissions.get(
        organization.session, organization.company.id, created.id
    )

    assert permission.feature_id == feature.id
    assert permission.feature_name == "users"
    assert permission.read_perm is True
    assert permission.create_perm is False


@pytest.mark.asyncio
async def test_permission_triple_is_unique(organization, features, permissions) -> None:
    feature, _ = await _grant(organization, features, permissions)

    with pytest.raises(DuplicateError):
        await permissions.create(
            organization.session,
            organization.company.id,
            organization.role.id,
            feature.id,
            PermissionCreateDTO(),
        )


@pytest.mark.asyncio
async def test_create_permission_requires_role_and_feature_of_company(
    organization, other_organization, fake_mongo_database, features, permissions
) -> None:
    foreign_role = store(
        fake_mongo_database,
        RoleRepository,
        Role(name="Manager", company_id=other_organization.company.id),
    )
    feature = await features.create(
        organization.session,
        organization.company.id,
        FeatureCreateDTO(feature_name="projects"),
    )

    with pytest.raises(NotFoundError, match="Role"):
        await permissions.create(
            organization.session,
            organization.company.id,
            foreign_role.id,
            feature.id,
            PermissionCreateDTO(),
        )

    with pytest.raises(NotFoundError, match="Feature"):
        await permissions.create(
            organization.session,
            organization.company.id,
            organization.role.id,
            uuid4(),
            PermissionCreateDTO(),
        )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "action, allowed",
    [("read", True), ("UPDATE", True), ("create", False), ("delete", False)],
)
async def test_check_permission(
    organization, features, permissions, action, allowed
) -> None:
    feature, _ = await _grant(
        organization, features, permissions, read_perm=True, update_perm=True
    )

    result = await permissions.check(
        organization.session,
        organization.company.id,
        organization.role.id,
        feature.id,
        action,
    )

    assert result.allowed is allowed
    assert result.action == action.lower()


@pytest.mark.asyncio
async def test_check_without_permission_row_is_denied(
    organization, permissions
) -> None:
    result = await permissions.check(
        organization.session,
        organization.company.id,
        organization.role.id,
        uuid4(),
        "read",
    )

    assert result.allowed is False


@pytest.mark.asyncio
async def test_check_rejects_unknown_action(organization, permissions) -> None:
    with pytest.raises(ValidationError):
        await permissions.check(
            organization.session,
            organization.company.id,
            organization.role.id,
            uuid4(),
            "approve",
        )


@pytest.mark.asyncio
async def test_update_and_list_permissions_by_role(
    organization, features, permissions
) -> None:
    _, created = await _grant(organization, features, permissions)
    company_id = organization.company.id

    await permissions.update(
        organization.session,
        company_id,
        created.id,
        PermissionUpdateDTO(delete_perm=True),
    )

    page = await permissions.list_page(
        organization.session, company_id, Pagination(), role_id=organization.role.id
    )
    assert page.total_count == 1
    assert page.items[0].delete_perm is True
    assert page.items[0].read_perm is False

    empty = await permissions.list_page(
        organization.session, company_id, Pagination(), role_id=uuid4()
    )
    assert empty.total_count == 0


@pytest.mark.asyncio
async def test_count_uses_the_role_filter(organization, features, permissions) -> None:
    await _grant(organization, features, permissions)
    company_id = organization.company.id

    assert (await permissions.count(organization.session, company_id)).count == 1
    by_role = await permissions.count(
        organization.session, company_id, role_id=organization.role.id
    )
    assert by_role.count == 1
    other = await permissions.count(organization.session, company_id, role_id=uuid4())
    assert other.count == 0


@pytest.mark.asyncio
async def test_feature_rename_propagates_to_permissions(
    organization, features, permissions
) -> None:
    feature, created = await _grant(organization, features, permissions)
    company_id = organization.company.id

    await features.update(
        organization.session,
        company_id,
        feature.id,
        FeatureUpdateDTO(feature_name="employees"),
    )

    assert (
        await features.get(organization.session, company_id, feature.id)
    ).feature_name == "employees"
    permission = await permissions.get(organization.session, company_id, created.id)
    assert permission.feature_name == "employees"


@pytest.mark.asyncio
async def test_feature_names_are_unique_and_delete_cascades(
    organization, features, permissions
) -> None:
    feature, created = await _grant(organization, features, permissions)
    company_id = organization.company.id

    with pytest.raises(DuplicateError):
        await features.create(
            organization.session, company_id, FeatureCreateDTO(feature_name="users")
        )

    await features.delete(organization.session, company_id, feature.id)

    assert (await features.count(organization.session, company_id)).count == 0
    with pytest.raises(NotFoundError):
        await permissions.get(organization.session, company_id, created.id)

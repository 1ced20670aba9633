from __future__ import annotations

import pytest

from labs.domain.entities.assessment import TestQuestion
from labs.domain.entities.errors import NotFoundError, TenancyError, ValidationError
from labs.domain.entities.organization import User
from labs.domain.entities.permission import Permission, PermissionAction


def test_entity_soft_delete_marks_timestamps() -> None:
    user = User(first_name="Amira", last_name="Ben Salah")
    assert user.is_deleted is False

    user.mark_deleted()

    assert user.is_deleted is True
    assert user.updated_at == user.deleted_at


def test_user_full_name() -> None:
    assert User(first_name="Amira", last_name="Ben Salah").full_name == "Amira Ben Salah"
    assert User(first_name="Amira").full_name == "Amira"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("create", PermissionAction.CREATE),
        ("READ", PermissionAction.READ),
        (" update ", PermissionAction.UPDATE),
        ("Delete", PermissionAction.DELETE),
    ],
)
def test_permission_action_parse(raw: str, expected: PermissionAction) -> None:
    assert PermissionAction.parse(raw) is expected


def test_permission_action_parse_rejects_unknown_action() -> None:
    with pytest.raises(ValidationError) as exc_info:
        PermissionAction.parse("publish")

    assert exc_info.value.details["allowed"] == ["create", "read", "update", "delete"]


def test_permission_allows_follows_bits() -> None:
    permission = Permission(read_perm=True, update_perm=True)

    assert permission.allows(PermissionAction.READ) is True
    assert permission.allows(PermissionAction.UPDATE) is True
    assert permission.allows(PermissionAction.CREATE) is False
    assert permission.allows(PermissionAction.DELETE) is False


def test_test_question_is_correct_requires_exact_answer() -> None:
    item = TestQuestion(correct_answer="42", options=["41", "42"])
    assert item.is_correct is False

    item.candidate_answer = "42 "
    assert item.is_correct is False

    item.candidate_answer = "42"
    assert item.is_correct is True


def test_error_messages() -> None:
    assert NotFoundError("User").message == "User not found"
    assert NotFoundError("User", 7).message == "User with ID 7 not found"
    assert TenancyError().message == "Session does not belong to the requested company"

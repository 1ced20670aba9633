"""
Domain Entities - Permission model

A company declares features; each (role, feature) pair carries four
CRUD bits.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from .base import Entity
from .errors import ValidationError


class PermissionAction(str, Enum):
    """Action checked against a permission row."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: str) -> "PermissionAction":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid action: {value}",
                details={"allowed": [action.value for action in cls]},
            ) from exc


@dataclass
class Feature(Entity):
    """A protected area of the application (e.g. "users", "projects")."""

    name: str = ""
    company_id: Optional[UUID] = None


@dataclass
class Permission(Entity):
    """CRUD bits granted to a role on a feature."""

    role_id: Optional[UUID] = None
    company_id: Optional[UUID] = None
    feature_id: Optional[UUID] = None
    feature_name: str = ""
    create_perm: bool = False
    read_perm: bool = False
    update_perm: bool = False
    delete_perm: bool = False
    created_by_user_id: Optional[UUID] = None

    def allows(self, action: PermissionAction) -> bool:
        return {
            PermissionAction.CREATE: self.create_perm,
            PermissionAction.READ: self.read_perm,
            PermissionAction.UPDATE: self.update_perm,
            PermissionAction.DELETE: self.delete_perm,
        }[action]

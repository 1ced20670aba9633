"""DTOs for features and role permissions."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from labs.domain.entities.permission import Feature, Permission

from .common import APIModel


class FeatureCreateDTO(APIModel):
    feature_name: str = Field(min_length=2, max_length=40)


class FeatureUpdateDTO(APIModel):
    feature_name: Optional[str] = Field(default=None, min_length=2, max_length=40)


class FeatureDTO(APIModel):
    id: UUID
    feature_name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, feature: Feature) -> "FeatureDTO":
        return cls(
            id=feature.id, feature_name=feature.name, created_at=feature.created_at
        )


class PermissionCreateDTO(APIModel):
    create_perm: bool = False
    read_perm: bool = False
    update_perm: bool = False
    delete_perm: bool = False


class PermissionUpdateDTO(APIModel):
    create_perm: Optional[bool] = None
    read_perm: Optional[bool] = None
    update_perm: Optional[bool] = None
    delete_perm: Optional[bool] = None


class PermissionDTO(APIModel):
    id: UUID
    role_id: UUID
    feature_id: UUID
    feature_name: str
    create_perm: bool
    read_perm: bool
    update_perm: bool
    delete_perm: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, permission: Permission) -> "PermissionDTO":
        return cls(
            id=permission.id,
            role_id=permission.role_id,
            feature_id=permission.feature_id,
            feature_name=permission.feature_name,
            create_perm=permission.create_perm,
            read_perm=permission.read_perm,
            update_perm=permission.update_perm,
            delete_perm=permission.delete_perm,
            created_at=permission.created_at,
        )


class PermissionCheckDTO(APIModel):
    role_id: UUID
    feature_id: UUID
    action: str
    allowed: bool = Field(description="Whether the role may perform the action")

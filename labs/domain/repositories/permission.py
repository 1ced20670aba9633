"""Repository interfaces for features and permissions."""

from labs.domain.entities.permission import Feature, Permission

from .base import IRepository


class IFeatureRepository(IRepository[Feature]):
    """Interface for feature repository."""


class IPermissionRepository(IRepository[Permission]):
    """Interface for permission repository."""

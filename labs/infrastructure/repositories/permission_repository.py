"""MongoDB repositories for features and permissions."""

from labs.domain.entities.permission import Feature, Permission
from labs.domain.repositories.permission import (
    IFeatureRepository,
    IPermissionRepository,
)

from .base_repository import MongoRepository


class FeatureRepository(MongoRepository[Feature], IFeatureRepository):
    COLLECTION_NAME = "features"
    RESOURCE_NAME = "Feature"
    ENTITY_CLASS = Feature


class PermissionRepository(MongoRepository[Permission], IPermissionRepository):
    COLLECTION_NAME = "permissions"
    RESOURCE_NAME = "Permission"
    ENTITY_CLASS = Permission

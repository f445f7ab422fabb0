"""Permission bitmask model and route guards."""

from railcat.core.permissions.codec import PermissionCodec, get_permission_codec
from railcat.core.permissions.guards import (
    ensure_permission,
    ensure_permissions,
    require_all_permissions,
    require_any_permission,
    require_permission,
)
from railcat.core.permissions.registry import (
    ADD_CONTENT,
    DEFAULT_REGISTRY,
    DELETE_CONTENT,
    MANAGE_ROLES,
    VERIFY_CONTENT,
    Permission,
    PermissionRegistry,
)


__all__ = [
    # Permission names
    "ADD_CONTENT",
    "DEFAULT_REGISTRY",
    "DELETE_CONTENT",
    "MANAGE_ROLES",
    "VERIFY_CONTENT",
    # Registry and codec
    "Permission",
    "PermissionCodec",
    "PermissionRegistry",
    # Guards
    "ensure_permission",
    "ensure_permissions",
    "get_permission_codec",
    "require_all_permissions",
    "require_any_permission",
    "require_permission",
]

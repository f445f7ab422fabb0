"""Permission registry.

A registry is an ordered, immutable list of permissions. Each permission
owns one bit of the encoded permission set, assigned by registration
order starting at bit 0. Token issuers rely on the same order, so
permissions may only ever be appended.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from railcat.core.errors import UnknownPermissionError


ADD_CONTENT = "ADD_CONTENT"
VERIFY_CONTENT = "VERIFY_CONTENT"
DELETE_CONTENT = "DELETE_CONTENT"
MANAGE_ROLES = "MANAGE_ROLES"


class Permission(BaseModel):
    """A named capability and the bit it occupies in an encoded set."""

    model_config = ConfigDict(frozen=True)

    name: str
    bit_value: int


class PermissionRegistry(BaseModel):
    """Immutable ordered mapping of permission names to bit values.

    Build one with from_names(); bit values follow the order of the names.

    Example:
        registry = PermissionRegistry.from_names(["READ", "WRITE"])
        registry.bit_value("WRITE")  # 2
    """

    model_config = ConfigDict(frozen=True)

    permissions: tuple[Permission, ...]

    @field_validator("permissions")
    @classmethod
    def validate_layout(cls, v: tuple[Permission, ...]) -> tuple[Permission, ...]:
        """Bit values must be 1, 2, 4, ... in order and names must be unique."""
        seen: set[str] = set()
        for position, permission in enumerate(v):
            if permission.name in seen:
                raise ValueError(f"Duplicate permission name: {permission.name}")
            if permission.bit_value != 1 << position:
                raise ValueError(
                    f"Permission {permission.name} must use bit value {1 << position}, "
                    f"got {permission.bit_value}"
                )
            seen.add(permission.name)
        return v

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "PermissionRegistry":
        """Create a registry assigning bit values by position."""
        return cls(
            permissions=tuple(
                Permission(name=name, bit_value=1 << position)
                for position, name in enumerate(names)
            )
        )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(permission.name for permission in self.permissions)

    def get(self, name: str) -> Permission:
        """Look up a permission by name.

        Raises:
            UnknownPermissionError: If the name is not registered
        """
        for permission in self.permissions:
            if permission.name == name:
                return permission
        raise UnknownPermissionError(
            f"Unknown permission: {name}",
            details={"permission": name, "known_permissions": list(self.names)},
        )

    def bit_value(self, name: str) -> int:
        return self.get(name).bit_value

    def appended(self, *names: str) -> "PermissionRegistry":
        """Return a new registry with names added after the existing ones.

        Existing bit assignments never change.
        """
        return PermissionRegistry.from_names((*self.names, *names))

    def __contains__(self, name: object) -> bool:
        return name in self.names


DEFAULT_REGISTRY = PermissionRegistry.from_names(
    [ADD_CONTENT, VERIFY_CONTENT, DELETE_CONTENT, MANAGE_ROLES]
)

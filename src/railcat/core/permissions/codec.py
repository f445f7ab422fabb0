"""Permission bitmask codec.

Converts between a set of permission names and the integer carried in
an access token's permissions claim.

    codec = PermissionCodec()
    codec.encode({"ADD_CONTENT", "DELETE_CONTENT"})  # 5
    codec.decode(5)  # ("ADD_CONTENT", "DELETE_CONTENT")
    codec.has(5, "VERIFY_CONTENT")  # False

Zero is a valid encoded value meaning "no permissions". Bits with no
registered permission are ignored when decoding.
"""

from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from railcat.core.errors import InvalidInputError
from railcat.core.permissions.registry import DEFAULT_REGISTRY, PermissionRegistry


class PermissionCodec:
    """Encodes and decodes permission sets against a fixed registry.

    The codec holds no state besides its registry and may be shared
    freely between concurrent requests.
    """

    def __init__(self, registry: PermissionRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry

    def decode(self, encoded: Any) -> tuple[str, ...]:
        """Return the names granted by an encoded permission set.

        Names are returned in ascending bit order.

        Args:
            encoded: Non-negative integer bitmask

        Returns:
            Tuple of permission names

        Raises:
            InvalidInputError: If the value is missing, not an integer, or negative
        """
        if encoded is None:
            raise InvalidInputError(
                "Permission value is missing",
                details={"received": None},
            )
        # bool is an int subclass but never a meaningful bitmask
        if isinstance(encoded, bool) or not isinstance(encoded, int):
            raise InvalidInputError(details={"received": type(encoded).__name__})
        if encoded < 0:
            raise InvalidInputError(details={"received": encoded})

        return tuple(
            permission.name
            for permission in self.registry.permissions
            if encoded & permission.bit_value
        )

    def encode(self, names: Iterable[str]) -> int:
        """Return the bitmask granting exactly the given permissions.

        Raises:
            UnknownPermissionError: If a name is not registered
        """
        if isinstance(names, str):
            names = (names,)

        encoded = 0
        for name in names:
            encoded |= self.registry.bit_value(name)
        return encoded

    def has(self, encoded: Any, name: str) -> bool:
        """Check whether an encoded set grants a permission.

        Raises:
            InvalidInputError: If the encoded value is malformed
            UnknownPermissionError: If the name is not registered
        """
        self.registry.get(name)
        return name in self.decode(encoded)


@lru_cache
def get_permission_codec() -> PermissionCodec:
    """Get the process-wide codec for the default registry."""
    return PermissionCodec(DEFAULT_REGISTRY)

"""Pydantic schemas for permission operations."""

from pydantic import BaseModel, Field


class PermissionResponse(BaseModel):
    """A registered permission and its bit."""

    name: str
    bit_value: int


class PermissionListResponse(BaseModel):
    items: list[PermissionResponse]


class EncodeRequest(BaseModel):
    """Permission names to combine into a bitmask."""

    names: list[str] = Field(default_factory=list)


class DecodeRequest(BaseModel):
    """A bitmask to expand into permission names.

    The value is passed to the codec unchecked so it reports malformed input.
    """

    permissions: int | None = Field(None, strict=True)


class PermissionSetResponse(BaseModel):
    """An encoded permission set and the names it grants."""

    permissions: int
    names: list[str]

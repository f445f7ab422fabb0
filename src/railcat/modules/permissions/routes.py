"""Permission API routes."""

from typing import Annotated

from fastapi import Depends

from railcat.core.auth import CurrentToken
from railcat.core.permissions import (
    MANAGE_ROLES,
    PermissionCodec,
    get_permission_codec,
    require_permission,
)
from railcat.modules.permissions import router
from railcat.modules.permissions.schemas import (
    DecodeRequest,
    EncodeRequest,
    PermissionListResponse,
    PermissionResponse,
    PermissionSetResponse,
)


Codec = Annotated[PermissionCodec, Depends(get_permission_codec)]


@router.get(
    "",
    response_model=PermissionListResponse,
    summary="List permissions",
    description="Returns the registered permissions in bit order.",
)
async def list_permissions(codec: Codec) -> PermissionListResponse:
    """List the permission registry."""
    return PermissionListResponse(
        items=[
            PermissionResponse(name=p.name, bit_value=p.bit_value)
            for p in codec.registry.permissions
        ]
    )


@router.get(
    "/me",
    response_model=PermissionSetResponse,
    summary="Get my permissions",
    description="Decodes the permissions claim of the caller's token.",
)
async def get_my_permissions(
    token: CurrentToken,
    codec: Codec,
) -> PermissionSetResponse:
    """Decode the caller's permissions claim."""
    names = codec.decode(token.permissions)
    return PermissionSetResponse(permissions=token.permissions, names=list(names))


@router.post(
    "/encode",
    response_model=PermissionSetResponse,
    summary="Encode permissions",
    description="Combines permission names into a bitmask. Requires MANAGE_ROLES.",
)
@require_permission(MANAGE_ROLES)
async def encode_permissions(
    data: EncodeRequest,
    token: CurrentToken,  # noqa: ARG001 - checked by the guard
    codec: Codec,
) -> PermissionSetResponse:
    """Encode a set of permission names."""
    encoded = codec.encode(data.names)
    return PermissionSetResponse(permissions=encoded, names=list(codec.decode(encoded)))


@router.post(
    "/decode",
    response_model=PermissionSetResponse,
    summary="Decode permissions",
    description="Expands a bitmask into permission names. Requires MANAGE_ROLES.",
)
@require_permission(MANAGE_ROLES)
async def decode_permissions(
    data: DecodeRequest,
    token: CurrentToken,  # noqa: ARG001 - checked by the guard
    codec: Codec,
) -> PermissionSetResponse:
    """Decode a bitmask."""
    names = codec.decode(data.permissions)
    return PermissionSetResponse(permissions=data.permissions, names=list(names))

"""Permissions module: registry listing and bitmask conversion."""

from fastapi import APIRouter


router = APIRouter(prefix="/permissions", tags=["permissions"])

# Import routes to register them (must be after router is defined)
from railcat.modules.permissions import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "permissions",
    "version": "1.0.0",
    "description": "Permission registry and bitmask conversion",
    "dependencies": [],
}

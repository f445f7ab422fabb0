"""Root API router: probes, service info and the versioned catalog API."""

from typing import Any

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from railcat import __version__
from railcat.api.dependencies import DBSession
from railcat.config import settings
from railcat.core.permissions import get_permission_codec
from railcat.modules import discover_modules


logger = structlog.get_logger()


class HealthResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """Readiness result with one entry per dependency."""

    status: str
    checks: dict[str, str]


async def _database_check(db: DBSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("readiness_database_failed", error=str(exc))
        return "unavailable"
    return "ok"


probe_router = APIRouter(tags=["health"])


@probe_router.get(
    "/health/live",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def liveness() -> HealthResponse:
    return HealthResponse(status="alive")


@probe_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Returns 503 while the catalog database cannot be queried.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness(db: DBSession) -> JSONResponse:
    checks = {"database": await _database_check(db)}
    ready = all(result == "ok" for result in checks.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ReadinessResponse(
            status="ready" if ready else "degraded",
            checks=checks,
        ).model_dump(),
    )


@probe_router.get("/info", summary="Service info")
async def info() -> dict[str, Any]:
    """Version and the permission layout token issuers must follow."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "permissions_claim": settings.permissions_claim,
        "permissions": list(get_permission_codec().registry.names),
    }


v1_router = APIRouter(prefix="/api/v1")
for module_router in discover_modules():
    v1_router.include_router(module_router)

api_router = APIRouter()
api_router.include_router(probe_router)
api_router.include_router(v1_router)

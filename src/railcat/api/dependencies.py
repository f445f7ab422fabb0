"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from railcat.config import settings
from railcat.core.database import get_db


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


class PaginationParams(BaseModel):
    """Limit/offset pagination parameters."""

    limit: int
    offset: int


def get_pagination(
    limit: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Maximum number of records to return",
    ),
    offset: int = Query(0, ge=0, description="Number of records to skip"),
) -> PaginationParams:
    return PaginationParams(limit=limit, offset=offset)


Pagination = Annotated[PaginationParams, Depends(get_pagination)]

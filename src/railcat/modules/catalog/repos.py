"""Catalog repositories for database operations."""

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from railcat.core.database.base import Base
from railcat.modules.catalog.models import (
    Documentation,
    LocomotiveModel,
    Manufacturer,
    Owner,
    Picture,
    Tag,
    Unit,
)


ModelT = TypeVar("ModelT", bound=Base)


class CatalogRepository(Generic[ModelT]):
    """Repository for one catalog collection.

    Subclasses set ``model``. Filters are single-field equality matches
    on the model's columns.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, record: ModelT) -> ModelT:
        """Insert a record and return it with server defaults loaded."""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def get_many(self, record_ids: Sequence[UUID]) -> list[ModelT]:
        """Get every record whose ID is in record_ids (missing IDs are skipped)."""
        if not record_ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(record_ids))  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_field(self, field: str, value: Any) -> ModelT | None:
        stmt = select(self.model).where(getattr(self.model, field) == value).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _apply_filters(self, stmt: Select[Any], filters: Mapping[str, Any]) -> Select[Any]:
        for field, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    async def search(
        self,
        filters: Mapping[str, Any] | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[ModelT], int]:
        """List records matching the filters.

        Args:
            filters: Field name to value; None values are ignored
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            Tuple of (records, total matching count)
        """
        base = self._apply_filters(select(self.model), filters or {})

        count_stmt = select(func.count()).select_from(base.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            base.order_by(self.model.created_at, self.model.id)  # type: ignore[attr-defined]
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def update(self, record: ModelT, values: Mapping[str, Any]) -> ModelT:
        """Apply new attribute values to a record."""
        for field, value in values.items():
            setattr(record, field, value)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def delete(self, record: ModelT) -> None:
        await self.session.delete(record)
        await self.session.flush()


class ManufacturerRepository(CatalogRepository[Manufacturer]):
    model = Manufacturer


class LocomotiveModelRepository(CatalogRepository[LocomotiveModel]):
    model = LocomotiveModel


class OwnerRepository(CatalogRepository[Owner]):
    model = Owner


class UnitRepository(CatalogRepository[Unit]):
    model = Unit


class TagRepository(CatalogRepository[Tag]):
    model = Tag


class PictureRepository(CatalogRepository[Picture]):
    """Pictures additionally filter by tag membership (``tag_id``)."""

    model = Picture

    def _apply_filters(self, stmt: Select[Any], filters: Mapping[str, Any]) -> Select[Any]:
        filters = dict(filters)
        tag_id = filters.pop("tag_id", None)
        if tag_id is not None:
            stmt = stmt.where(Picture.tags.any(Tag.id == tag_id))
        return super()._apply_filters(stmt, filters)


class DocumentationRepository(CatalogRepository[Documentation]):
    model = Documentation

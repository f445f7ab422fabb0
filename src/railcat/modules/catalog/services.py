"""Catalog service for business logic."""

from typing import Any
from uuid import UUID

import structlog
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from railcat.core.database.base import Base
from railcat.core.errors import ConflictError, NotFoundError, ValidationError
from railcat.modules.catalog.collections import COLLECTIONS, Collection
from railcat.modules.catalog.repos import TagRepository


logger = structlog.get_logger()


class CatalogService:
    """Service for operations on one catalog collection.

    Checks that referenced records exist, keeps unique fields unique and
    maintains the verified flag. Database access goes through the
    collection's repository.
    """

    def __init__(self, session: AsyncSession, collection: Collection) -> None:
        self.session = session
        self.collection = collection
        self.repo = collection.repository(session)

    async def get(self, record_id: UUID) -> Base:
        """Get a record by ID.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = await self.repo.get_by_id(record_id)
        if record is None:
            raise NotFoundError(
                f"{self.collection.resource.capitalize()} not found",
                resource=self.collection.resource,
                resource_id=str(record_id),
            )
        return record

    async def search(
        self,
        filters: dict[str, Any],
        limit: int,
        offset: int,
    ) -> tuple[list[Base], int]:
        return await self.repo.search(filters, limit=limit, offset=offset)

    async def create(self, data: BaseModel) -> Base:
        """Create a record.

        Raises:
            NotFoundError: If a referenced record does not exist
            ConflictError: If a unique field value is taken
        """
        values = data.model_dump()
        await self._check_references(values)
        await self._check_unique(values)
        values = await self._load_relations(values)

        record = self.repo.model(**values)
        record = await self.repo.create(record)

        logger.info(
            "catalog_record_created",
            collection=self.collection.name,
            record_id=str(record.id),  # type: ignore[attr-defined]
        )
        return record

    async def update(self, record_id: UUID, data: BaseModel) -> Base:
        """Apply a partial update. Editing a record clears its verified flag.

        Raises:
            NotFoundError: If the record or a referenced record does not exist
            ConflictError: If a unique field value is taken
            ValidationError: If a required field is set to null, or the
                merged record breaks a date ordering rule
        """
        record = await self.get(record_id)
        values = data.model_dump(exclude_unset=True)
        self._check_required(values)
        self._check_date_order(record, values)
        await self._check_references(values)
        await self._check_unique(values, record_id)
        values = await self._load_relations(values)

        if values:
            values["verified"] = False
        record = await self.repo.update(record, values)

        logger.info(
            "catalog_record_updated",
            collection=self.collection.name,
            record_id=str(record_id),
            fields=sorted(values),
        )
        return record

    async def verify(self, record_id: UUID) -> Base:
        """Mark a record as verified."""
        record = await self.get(record_id)
        record = await self.repo.update(record, {"verified": True})

        logger.info(
            "catalog_record_verified",
            collection=self.collection.name,
            record_id=str(record_id),
        )
        return record

    async def delete(self, record_id: UUID) -> None:
        record = await self.get(record_id)
        await self.repo.delete(record)

        logger.info(
            "catalog_record_deleted",
            collection=self.collection.name,
            record_id=str(record_id),
        )

    def _check_required(self, values: dict[str, Any]) -> None:
        columns = self.repo.model.__table__.columns  # type: ignore[attr-defined]
        errors = [
            {"field": field, "message": "Field cannot be null"}
            for field, value in values.items()
            if value is None and (field not in columns or not columns[field].nullable)
        ]
        if errors:
            raise ValidationError("Invalid update", errors=errors)

    def _check_date_order(self, record: Base, values: dict[str, Any]) -> None:
        errors = []
        for earlier, later in self.collection.date_order:
            start = values.get(earlier, getattr(record, earlier))
            end = values.get(later, getattr(record, later))
            if start is not None and end is not None and end < start:
                errors.append(
                    {"field": later, "message": f"{later} must not precede {earlier}"}
                )
        if errors:
            raise ValidationError("Invalid update", errors=errors)

    async def _check_references(self, values: dict[str, Any]) -> None:
        for field, target_name in self.collection.references.items():
            value = values.get(field)
            if value is None:
                continue

            target = COLLECTIONS[target_name]
            repo = target.repository(self.session)

            if isinstance(value, list):
                found = {record.id for record in await repo.get_many(value)}
                missing = [str(ref) for ref in value if ref not in found]
            else:
                missing = [] if await repo.get_by_id(value) else [str(value)]

            if missing:
                raise NotFoundError(
                    f"Referenced {target.resource} not found",
                    resource=target.resource,
                    resource_id=missing[0],
                    details={"field": field},
                )

    async def _check_unique(
        self, values: dict[str, Any], record_id: UUID | None = None
    ) -> None:
        for field in self.collection.unique_fields:
            if values.get(field) is None:
                continue
            existing = await self.repo.get_by_field(field, values[field])
            if existing is not None and existing.id != record_id:  # type: ignore[attr-defined]
                raise ConflictError(
                    f"{self.collection.resource.capitalize()} with this {field} already exists",
                    error_code=f"{self.collection.resource}_exists",
                    details={field: values[field]},
                )

    async def _load_relations(self, values: dict[str, Any]) -> dict[str, Any]:
        # Membership lists arrive as IDs; the model takes related objects
        if "tag_ids" in values:
            values = dict(values)
            tag_ids = list(dict.fromkeys(values.pop("tag_ids")))
            values["tags"] = await TagRepository(self.session).get_many(tag_ids)
        return values

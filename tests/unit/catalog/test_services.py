"""Unit tests for the catalog service.

These tests verify the service rules independent of HTTP:
- Reference checks
- Unique fields
- The verified flag
"""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from railcat.core.errors import ConflictError, NotFoundError, ValidationError
from railcat.modules.catalog.collections import (
    COLLECTIONS,
    MANUFACTURERS,
    OWNERS,
    PICTURES,
    TAGS,
    UNITS,
)
from railcat.modules.catalog.schemas import (
    ManufacturerUpdate,
    PictureUpdate,
    TagCreate,
    TagUpdate,
    UnitUpdate,
)
from railcat.modules.catalog.services import CatalogService
from tests.factories.catalog import (
    ManufacturerCreateFactory,
    OwnerCreateFactory,
    PictureCreateFactory,
    TagCreateFactory,
    UnitCreateFactory,
)


pytestmark = pytest.mark.unit


class TestCatalogService:
    """Tests for CatalogService."""

    async def test_create_starts_unverified(self, db: AsyncSession) -> None:
        service = CatalogService(db, OWNERS)

        owner = await service.create(OwnerCreateFactory.build(name="Skansen Chabówka"))

        assert owner.name == "Skansen Chabówka"
        assert owner.verified is False
        assert owner.id is not None

    async def test_get_missing(self, db: AsyncSession) -> None:
        service = CatalogService(db, OWNERS)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get(uuid4())

        assert exc_info.value.message == "Owner not found"
        assert exc_info.value.details["resource"] == "owner"

    async def test_create_with_missing_reference(self, db: AsyncSession) -> None:
        """Verify a unit cannot point at an owner that does not exist."""
        service = CatalogService(db, UNITS)
        missing = uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            await service.create(UnitCreateFactory.build(owner_id=missing))

        assert exc_info.value.details == {
            "field": "owner_id",
            "resource": "owner",
            "resource_id": str(missing),
        }

    async def test_create_with_reference(self, db: AsyncSession) -> None:
        owner = await CatalogService(db, OWNERS).create(OwnerCreateFactory.build())
        maker = await CatalogService(db, MANUFACTURERS).create(
            ManufacturerCreateFactory.build()
        )

        unit = await CatalogService(db, UNITS).create(
            UnitCreateFactory.build(owner_id=owner.id, manufacturer_id=maker.id)
        )

        assert unit.owner_id == owner.id
        assert unit.manufacturer_id == maker.id

    async def test_duplicate_tag_name(self, db: AsyncSession) -> None:
        service = CatalogService(db, TAGS)
        await service.create(TagCreate(name="steam"))

        with pytest.raises(ConflictError) as exc_info:
            await service.create(TagCreate(name="steam"))

        assert exc_info.value.error_code == "tag_exists"

    async def test_rename_tag_to_own_name(self, db: AsyncSession) -> None:
        """Verify a record does not conflict with itself."""
        service = CatalogService(db, TAGS)
        tag = await service.create(TagCreate(name="diesel"))

        renamed = await service.update(tag.id, TagUpdate(name="diesel"))

        assert renamed.name == "diesel"

    async def test_verify_then_edit_clears_flag(self, db: AsyncSession) -> None:
        service = CatalogService(db, UNITS)
        unit = await service.create(UnitCreateFactory.build())

        verified = await service.verify(unit.id)
        assert verified.verified is True

        edited = await service.update(unit.id, UnitUpdate(state="operational"))

        assert edited.state == "operational"
        assert edited.verified is False

    async def test_empty_update_keeps_flag(self, db: AsyncSession) -> None:
        service = CatalogService(db, UNITS)
        unit = await service.create(UnitCreateFactory.build())
        await service.verify(unit.id)

        unchanged = await service.update(unit.id, UnitUpdate())

        assert unchanged.verified is True

    async def test_null_required_field_rejected(self, db: AsyncSession) -> None:
        service = CatalogService(db, UNITS)
        unit = await service.create(UnitCreateFactory.build())

        with pytest.raises(ValidationError) as exc_info:
            await service.update(unit.id, UnitUpdate(number=None))

        assert exc_info.value.details["errors"][0]["field"] == "number"

    async def test_liquidation_checked_against_stored_creation(
        self, db: AsyncSession
    ) -> None:
        service = CatalogService(db, MANUFACTURERS)
        manufacturer = await service.create(
            ManufacturerCreateFactory.build(creation_date=date(1919, 1, 1))
        )

        with pytest.raises(ValidationError) as exc_info:
            await service.update(
                manufacturer.id, ManufacturerUpdate(date_of_liquidation=date(1800, 1, 1))
            )

        assert exc_info.value.details["errors"][0]["field"] == "date_of_liquidation"

    async def test_unlink_reference(self, db: AsyncSession) -> None:
        """Verify nullable references can be cleared with null."""
        owner = await CatalogService(db, OWNERS).create(OwnerCreateFactory.build())
        service = CatalogService(db, UNITS)
        unit = await service.create(UnitCreateFactory.build(owner_id=owner.id))

        unlinked = await service.update(unit.id, UnitUpdate(owner_id=None))

        assert unlinked.owner_id is None

    async def test_picture_tags(self, db: AsyncSession) -> None:
        tags = CatalogService(db, TAGS)
        steam = await tags.create(TagCreateFactory.build())
        depot = await tags.create(TagCreateFactory.build())
        service = CatalogService(db, PICTURES)

        picture = await service.create(
            PictureCreateFactory.build(tag_ids=[steam.id, steam.id])
        )
        assert picture.tag_ids == [steam.id]

        picture = await service.update(picture.id, PictureUpdate(tag_ids=[depot.id]))
        assert picture.tag_ids == [depot.id]

    async def test_picture_unknown_tag(self, db: AsyncSession) -> None:
        service = CatalogService(db, PICTURES)

        with pytest.raises(NotFoundError) as exc_info:
            await service.create(PictureCreateFactory.build(tag_ids=[uuid4()]))

        assert exc_info.value.details["field"] == "tag_ids"

    async def test_search_filters_and_counts(self, db: AsyncSession) -> None:
        service = CatalogService(db, UNITS)
        for state in ("preserved", "preserved", "scrapped"):
            await service.create(UnitCreateFactory.build(state=state))

        records, total = await service.search({"state": "preserved"}, limit=1, offset=0)

        assert total == 2
        assert len(records) == 1
        assert records[0].state == "preserved"

    async def test_delete(self, db: AsyncSession) -> None:
        service = CatalogService(db, OWNERS)
        owner = await service.create(OwnerCreateFactory.build())

        await service.delete(owner.id)

        with pytest.raises(NotFoundError):
            await service.get(owner.id)


class TestCollections:
    """Tests for the collection definitions."""

    def test_model_collection_table(self) -> None:
        """Verify locomotive models are served as ``models`` from their own table."""
        model = COLLECTIONS["models"].repository.model

        assert model.__tablename__ == "locomotive_models"  # type: ignore[attr-defined]

    def test_table_names_follow_collection_names(self) -> None:
        for name, collection in COLLECTIONS.items():
            if name != "models":
                assert collection.repository.model.__tablename__ == name  # type: ignore[attr-defined]

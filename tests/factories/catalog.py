"""Catalog request factories for tests.

Reference fields default to None so records can be created without
their parents; tests set them explicitly when they need a link.
"""

from datetime import date
from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from railcat.modules.catalog.schemas import (
    DocumentationCreate,
    LocomotiveModelCreate,
    ManufacturerCreate,
    OwnerCreate,
    PictureCreate,
    TagCreate,
    UnitCreate,
)


class ManufacturerCreateFactory(ModelFactory):
    """Factory for creating ManufacturerCreate schemas."""

    __model__ = ManufacturerCreate

    short_name = None
    works = True
    date_of_liquidation = None

    @classmethod
    def name(cls) -> str:
        """Generate a manufacturer name."""
        return f"Locomotive Works {uuid4().hex[:6]}"

    @classmethod
    def country(cls) -> str:
        return "Poland"

    @classmethod
    def creation_date(cls) -> date:
        return date(1846, 1, 1)


class LocomotiveModelCreateFactory(ModelFactory):
    """Factory for creating LocomotiveModelCreate schemas."""

    __model__ = LocomotiveModelCreate

    manufacturer_id = None
    factory_type = None
    manufacturer_model = None
    intended_use = None
    spec_table = None
    series = None

    @classmethod
    def model_name(cls) -> str:
        """Generate a model designation."""
        return f"ST{uuid4().int % 100}"

    @classmethod
    def type(cls) -> str:
        return "diesel"


class OwnerCreateFactory(ModelFactory):
    """Factory for creating OwnerCreate schemas."""

    __model__ = OwnerCreate

    @classmethod
    def name(cls) -> str:
        return f"Heritage Railway {uuid4().hex[:6]}"


class UnitCreateFactory(ModelFactory):
    """Factory for creating UnitCreate schemas."""

    __model__ = UnitCreate

    name = None
    model_id = None
    owner_id = None
    manufacturer_id = None
    country_of_operation = None

    @classmethod
    def number(cls) -> str:
        """Generate a running number."""
        return f"ST44-{uuid4().int % 1000:03d}"

    @classmethod
    def state(cls) -> str:
        return "preserved"

    @classmethod
    def assignments(cls) -> list[str]:
        return []

    @classmethod
    def repair_history(cls) -> list[str]:
        return []


class TagCreateFactory(ModelFactory):
    """Factory for creating TagCreate schemas."""

    __model__ = TagCreate

    @classmethod
    def name(cls) -> str:
        """Generate a unique tag name."""
        return f"tag-{uuid4().hex[:8]}"


class PictureCreateFactory(ModelFactory):
    """Factory for creating PictureCreate schemas."""

    __model__ = PictureCreate

    author = None
    unit_id = None
    model_id = None

    @classmethod
    def url(cls) -> str:
        """Generate a picture URL."""
        return f"https://images.example.com/{uuid4().hex}.jpg"

    @classmethod
    def title(cls) -> str:
        return "At the depot"

    @classmethod
    def tag_ids(cls) -> list:
        return []


class DocumentationCreateFactory(ModelFactory):
    """Factory for creating DocumentationCreate schemas."""

    __model__ = DocumentationCreate

    author = None
    issue_number = None
    release_date = None
    url = None
    model_id = None

    @classmethod
    def title(cls) -> str:
        return f"Operating manual {uuid4().hex[:4]}"

    @classmethod
    def publisher(cls) -> str:
        return "Railway Publishing House"

    @classmethod
    def type(cls) -> str:
        return "manual"

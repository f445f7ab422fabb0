"""Catalog database models."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    ForeignKey,
    String,
    Table,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from railcat.core.constants import (
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_NUMBER_LENGTH,
    MAX_SHORT_NAME_LENGTH,
    MAX_STATE_LENGTH,
    MAX_TAG_LENGTH,
    MAX_URL_LENGTH,
)
from railcat.core.database.base import Base, TimestampMixin, UUIDMixin, VerifiedMixin


picture_tags = Table(
    "picture_tags",
    Base.metadata,
    Column(
        "picture_id",
        Uuid,
        ForeignKey("pictures.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Uuid,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Manufacturer(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A company that built locomotives.

    Attributes:
        name: Full company name
        short_name: Common abbreviation (e.g. "H. Cegielski")
        country: Country of origin
        creation_date: Date the company was founded
        works: Whether the company still operates
        date_of_liquidation: Date the company ceased to exist
    """

    __tablename__ = "manufacturers"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    short_name: Mapped[str | None] = mapped_column(String(MAX_SHORT_NAME_LENGTH))
    country: Mapped[str | None] = mapped_column(String(MAX_COUNTRY_LENGTH), index=True)
    creation_date: Mapped[date | None] = mapped_column(Date)
    works: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    date_of_liquidation: Mapped[date | None] = mapped_column(Date)


class LocomotiveModel(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A locomotive design produced in one or more units.

    Attributes:
        model_name: Name the model is known by (e.g. "ST44")
        factory_type: Manufacturer's internal type designation
        manufacturer_id: Manufacturer that designed the model
        manufacturer_model: Manufacturer's catalog name for the model
        intended_use: Service the model was built for (freight, passenger, ...)
        type: Traction type (steam, diesel, electric, ...)
        spec_table: Free-form technical specification
        series: Series designation
    """

    __tablename__ = "locomotive_models"

    model_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    factory_type: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    manufacturer_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("manufacturers.id", ondelete="SET NULL"),
        index=True,
    )
    manufacturer_model: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    intended_use: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    type: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), index=True)
    spec_table: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    series: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))


class Owner(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A railway operator, museum or private owner of units."""

    __tablename__ = "owners"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)


class Unit(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A single physical locomotive.

    Attributes:
        number: Running number painted on the unit
        name: Given name, if the unit has one
        model_id: Model the unit belongs to
        owner_id: Current owner
        manufacturer_id: Manufacturer that built this unit
        state: Current state (in service, preserved, scrapped, ...)
        assignments: Depots or services the unit was assigned to
        repair_history: Notable repairs and overhauls
        country_of_operation: Country the unit runs in
    """

    __tablename__ = "units"

    number: Mapped[str] = mapped_column(String(MAX_NUMBER_LENGTH), nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    model_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("locomotive_models.id", ondelete="SET NULL"),
        index=True,
    )
    owner_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("owners.id", ondelete="SET NULL"),
        index=True,
    )
    manufacturer_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("manufacturers.id", ondelete="SET NULL"),
        index=True,
    )
    state: Mapped[str | None] = mapped_column(String(MAX_STATE_LENGTH), index=True)
    assignments: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    repair_history: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    country_of_operation: Mapped[str | None] = mapped_column(
        String(MAX_COUNTRY_LENGTH), index=True
    )


class Tag(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A label attached to pictures."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(
        String(MAX_TAG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )


class Picture(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A photograph hosted elsewhere and referenced by URL."""

    __tablename__ = "pictures"

    url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)
    title: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    author: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    unit_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("units.id", ondelete="SET NULL"),
        index=True,
    )
    model_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("locomotive_models.id", ondelete="SET NULL"),
        index=True,
    )

    tags: Mapped[list[Tag]] = relationship(
        Tag,
        secondary=picture_tags,
        lazy="selectin",
    )

    @property
    def tag_ids(self) -> list[UUID]:
        return [tag.id for tag in self.tags]


class Documentation(Base, UUIDMixin, TimestampMixin, VerifiedMixin):
    """A published document about a locomotive model.

    Attributes:
        title: Document title
        author: Author or editor
        issue_number: Issue or edition number for periodicals
        publisher: Publisher name
        release_date: Publication date
        type: Kind of document (book, manual, article, ...)
        url: Where the document can be read, if online
        model_id: Model the document describes
    """

    __tablename__ = "documentations"

    title: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    author: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    issue_number: Mapped[str | None] = mapped_column(String(MAX_NUMBER_LENGTH))
    publisher: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), index=True)
    release_date: Mapped[date | None] = mapped_column(Date)
    type: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), index=True)
    url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH))
    model_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("locomotive_models.id", ondelete="SET NULL"),
        index=True,
    )

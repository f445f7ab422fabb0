"""Pydantic schemas for catalog records."""

from datetime import date, datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from railcat.core.constants import (
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_NUMBER_LENGTH,
    MAX_SHORT_NAME_LENGTH,
    MAX_STATE_LENGTH,
    MAX_TAG_LENGTH,
    MAX_URL_LENGTH,
)


HTTP_URL_PATTERN = r"^https?://\S+$"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class CatalogSchema(BaseModel):
    """Base for request bodies; allows fields such as model_id."""

    model_config = ConfigDict(protected_namespaces=())


class RecordResponse(BaseModel):
    """Fields shared by every catalog record response."""

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())

    id: UUID
    verified: bool
    created_at: datetime
    updated_at: datetime


class Page(BaseModel, Generic[ResponseT]):
    """A page of catalog records."""

    items: list[ResponseT]
    total: int
    limit: int
    offset: int


class RecordFilter(BaseModel):
    """Query filters shared by every collection."""

    model_config = ConfigDict(protected_namespaces=())

    verified: bool | None = None


# ============================================================
# Manufacturers
# ============================================================


class ManufacturerCreate(CatalogSchema):
    """Schema for creating a manufacturer."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    short_name: str | None = Field(None, max_length=MAX_SHORT_NAME_LENGTH)
    country: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)
    creation_date: date | None = None
    works: bool = True
    date_of_liquidation: date | None = None

    @model_validator(mode="after")
    def liquidation_after_creation(self) -> "ManufacturerCreate":
        """A manufacturer cannot be liquidated before it was founded."""
        if (
            self.creation_date
            and self.date_of_liquidation
            and self.date_of_liquidation < self.creation_date
        ):
            raise ValueError("date_of_liquidation must not precede creation_date")
        return self


class ManufacturerUpdate(CatalogSchema):
    """Schema for updating a manufacturer."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    short_name: str | None = Field(None, max_length=MAX_SHORT_NAME_LENGTH)
    country: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)
    creation_date: date | None = None
    works: bool | None = None
    date_of_liquidation: date | None = None


class ManufacturerResponse(RecordResponse):
    """Schema for manufacturer response data."""

    name: str
    short_name: str | None = None
    country: str | None = None
    creation_date: date | None = None
    works: bool
    date_of_liquidation: date | None = None


class ManufacturerFilter(RecordFilter):
    country: str | None = None
    works: bool | None = None


# ============================================================
# Locomotive models
# ============================================================


class LocomotiveModelCreate(CatalogSchema):
    """Schema for creating a locomotive model."""

    model_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    factory_type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    manufacturer_id: UUID | None = None
    manufacturer_model: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    intended_use: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    spec_table: dict[str, Any] | None = None
    series: str | None = Field(None, max_length=MAX_NAME_LENGTH)


class LocomotiveModelUpdate(CatalogSchema):
    """Schema for updating a locomotive model."""

    model_name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    factory_type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    manufacturer_id: UUID | None = None
    manufacturer_model: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    intended_use: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    spec_table: dict[str, Any] | None = None
    series: str | None = Field(None, max_length=MAX_NAME_LENGTH)


class LocomotiveModelResponse(RecordResponse):
    """Schema for locomotive model response data."""

    model_name: str
    factory_type: str | None = None
    manufacturer_id: UUID | None = None
    manufacturer_model: str | None = None
    intended_use: str | None = None
    type: str | None = None
    spec_table: dict[str, Any] | None = None
    series: str | None = None


class LocomotiveModelFilter(RecordFilter):
    manufacturer_id: UUID | None = None
    type: str | None = None
    series: str | None = None


# ============================================================
# Owners
# ============================================================


class OwnerCreate(CatalogSchema):
    """Schema for creating an owner."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class OwnerUpdate(CatalogSchema):
    """Schema for updating an owner."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)


class OwnerResponse(RecordResponse):
    """Schema for owner response data."""

    name: str


class OwnerFilter(RecordFilter):
    name: str | None = None


# ============================================================
# Units
# ============================================================


class UnitCreate(CatalogSchema):
    """Schema for creating a unit."""

    number: str = Field(..., min_length=1, max_length=MAX_NUMBER_LENGTH)
    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    model_id: UUID | None = None
    owner_id: UUID | None = None
    manufacturer_id: UUID | None = None
    state: str | None = Field(None, max_length=MAX_STATE_LENGTH)
    assignments: list[str] = Field(default_factory=list)
    repair_history: list[str] = Field(default_factory=list)
    country_of_operation: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)


class UnitUpdate(CatalogSchema):
    """Schema for updating a unit."""

    number: str | None = Field(None, min_length=1, max_length=MAX_NUMBER_LENGTH)
    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    model_id: UUID | None = None
    owner_id: UUID | None = None
    manufacturer_id: UUID | None = None
    state: str | None = Field(None, max_length=MAX_STATE_LENGTH)
    assignments: list[str] | None = None
    repair_history: list[str] | None = None
    country_of_operation: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)


class UnitResponse(RecordResponse):
    """Schema for unit response data."""

    number: str
    name: str | None = None
    model_id: UUID | None = None
    owner_id: UUID | None = None
    manufacturer_id: UUID | None = None
    state: str | None = None
    assignments: list[str]
    repair_history: list[str]
    country_of_operation: str | None = None


class UnitFilter(RecordFilter):
    number: str | None = None
    model_id: UUID | None = None
    owner_id: UUID | None = None
    manufacturer_id: UUID | None = None
    state: str | None = None
    country_of_operation: str | None = None


# ============================================================
# Tags
# ============================================================


class TagCreate(CatalogSchema):
    """Schema for creating a tag."""

    name: str = Field(..., min_length=1, max_length=MAX_TAG_LENGTH)


class TagUpdate(CatalogSchema):
    """Schema for renaming a tag."""

    name: str | None = Field(None, min_length=1, max_length=MAX_TAG_LENGTH)


class TagResponse(RecordResponse):
    """Schema for tag response data."""

    name: str


class TagFilter(RecordFilter):
    name: str | None = None


# ============================================================
# Pictures
# ============================================================


class PictureCreate(CatalogSchema):
    """Schema for registering a picture by URL."""

    url: str = Field(..., max_length=MAX_URL_LENGTH, pattern=HTTP_URL_PATTERN)
    title: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    author: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    unit_id: UUID | None = None
    model_id: UUID | None = None
    tag_ids: list[UUID] = Field(default_factory=list)


class PictureUpdate(CatalogSchema):
    """Schema for updating a picture."""

    url: str | None = Field(None, max_length=MAX_URL_LENGTH, pattern=HTTP_URL_PATTERN)
    title: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    author: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    unit_id: UUID | None = None
    model_id: UUID | None = None
    tag_ids: list[UUID] | None = None


class PictureResponse(RecordResponse):
    """Schema for picture response data."""

    url: str
    title: str | None = None
    author: str | None = None
    unit_id: UUID | None = None
    model_id: UUID | None = None
    tag_ids: list[UUID]


class PictureFilter(RecordFilter):
    unit_id: UUID | None = None
    model_id: UUID | None = None
    tag_id: UUID | None = None


# ============================================================
# Documentation
# ============================================================


class DocumentationCreate(CatalogSchema):
    """Schema for creating a documentation record."""

    title: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    author: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    issue_number: str | None = Field(None, max_length=MAX_NUMBER_LENGTH)
    publisher: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    release_date: date | None = None
    type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    url: str | None = Field(None, max_length=MAX_URL_LENGTH, pattern=HTTP_URL_PATTERN)
    model_id: UUID | None = None


class DocumentationUpdate(CatalogSchema):
    """Schema for updating a documentation record."""

    title: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    author: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    issue_number: str | None = Field(None, max_length=MAX_NUMBER_LENGTH)
    publisher: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    release_date: date | None = None
    type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    url: str | None = Field(None, max_length=MAX_URL_LENGTH, pattern=HTTP_URL_PATTERN)
    model_id: UUID | None = None


class DocumentationResponse(RecordResponse):
    """Schema for documentation response data."""

    title: str
    author: str | None = None
    issue_number: str | None = None
    publisher: str | None = None
    release_date: date | None = None
    type: str | None = None
    url: str | None = None
    model_id: UUID | None = None


class DocumentationFilter(RecordFilter):
    model_id: UUID | None = None
    type: str | None = None
    publisher: str | None = None

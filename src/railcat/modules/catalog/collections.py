"""Catalog collection definitions.

Each collection ties together the model, repository and schemas served
under one URL prefix, the filters its listing accepts and the other
collections its reference fields point at.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel

from railcat.modules.catalog import schemas
from railcat.modules.catalog.repos import (
    CatalogRepository,
    DocumentationRepository,
    LocomotiveModelRepository,
    ManufacturerRepository,
    OwnerRepository,
    PictureRepository,
    TagRepository,
    UnitRepository,
)


@dataclass(frozen=True)
class Collection:
    """Describes one catalog collection.

    Attributes:
        name: Plural name, used as the URL prefix and OpenAPI tag
        resource: Singular name used in error details
        repository: Repository class for the collection
        create_schema: Request body for creation
        update_schema: Request body for partial updates
        response_schema: Response body for a single record
        filter_schema: Query parameters accepted by the listing
        references: Reference field name to the collection it points at
        unique_fields: Fields whose values must be unique in the collection
        date_order: (earlier, later) date field pairs; the later date may be
            missing but must not precede the earlier one
    """

    name: str
    resource: str
    repository: type[CatalogRepository]  # type: ignore[type-arg]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    filter_schema: type[schemas.RecordFilter]
    references: dict[str, str] = field(default_factory=dict)
    unique_fields: tuple[str, ...] = ()
    date_order: tuple[tuple[str, str], ...] = ()


MANUFACTURERS = Collection(
    name="manufacturers",
    resource="manufacturer",
    repository=ManufacturerRepository,
    create_schema=schemas.ManufacturerCreate,
    update_schema=schemas.ManufacturerUpdate,
    response_schema=schemas.ManufacturerResponse,
    filter_schema=schemas.ManufacturerFilter,
    date_order=(("creation_date", "date_of_liquidation"),),
)

MODELS = Collection(
    name="models",
    resource="model",
    repository=LocomotiveModelRepository,
    create_schema=schemas.LocomotiveModelCreate,
    update_schema=schemas.LocomotiveModelUpdate,
    response_schema=schemas.LocomotiveModelResponse,
    filter_schema=schemas.LocomotiveModelFilter,
    references={"manufacturer_id": "manufacturers"},
)

OWNERS = Collection(
    name="owners",
    resource="owner",
    repository=OwnerRepository,
    create_schema=schemas.OwnerCreate,
    update_schema=schemas.OwnerUpdate,
    response_schema=schemas.OwnerResponse,
    filter_schema=schemas.OwnerFilter,
)

UNITS = Collection(
    name="units",
    resource="unit",
    repository=UnitRepository,
    create_schema=schemas.UnitCreate,
    update_schema=schemas.UnitUpdate,
    response_schema=schemas.UnitResponse,
    filter_schema=schemas.UnitFilter,
    references={
        "model_id": "models",
        "owner_id": "owners",
        "manufacturer_id": "manufacturers",
    },
)

TAGS = Collection(
    name="tags",
    resource="tag",
    repository=TagRepository,
    create_schema=schemas.TagCreate,
    update_schema=schemas.TagUpdate,
    response_schema=schemas.TagResponse,
    filter_schema=schemas.TagFilter,
    unique_fields=("name",),
)

PICTURES = Collection(
    name="pictures",
    resource="picture",
    repository=PictureRepository,
    create_schema=schemas.PictureCreate,
    update_schema=schemas.PictureUpdate,
    response_schema=schemas.PictureResponse,
    filter_schema=schemas.PictureFilter,
    references={
        "unit_id": "units",
        "model_id": "models",
        "tag_ids": "tags",
    },
)

DOCUMENTATIONS = Collection(
    name="documentations",
    resource="documentation",
    repository=DocumentationRepository,
    create_schema=schemas.DocumentationCreate,
    update_schema=schemas.DocumentationUpdate,
    response_schema=schemas.DocumentationResponse,
    filter_schema=schemas.DocumentationFilter,
    references={"model_id": "models"},
)

COLLECTIONS: dict[str, Collection] = {
    collection.name: collection
    for collection in (
        MANUFACTURERS,
        MODELS,
        OWNERS,
        UNITS,
        TAGS,
        PICTURES,
        DOCUMENTATIONS,
    )
}

# (parent, child, child field holding the parent's ID)
RELATIONS: tuple[tuple[Collection, Collection, str], ...] = (
    (OWNERS, UNITS, "owner_id"),
    (MANUFACTURERS, UNITS, "manufacturer_id"),
    (MANUFACTURERS, MODELS, "manufacturer_id"),
    (MODELS, UNITS, "model_id"),
    (MODELS, PICTURES, "model_id"),
    (MODELS, DOCUMENTATIONS, "model_id"),
    (UNITS, PICTURES, "unit_id"),
    (TAGS, PICTURES, "tag_id"),
)

"""Catalog API routes.

Every collection gets the same set of endpoints:

    GET    /{collection}                 list with equality filters
    GET    /{collection}/{id}            lookup
    POST   /{collection}                 create      (ADD_CONTENT)
    PATCH  /{collection}/{id}            update      (ADD_CONTENT)
    POST   /{collection}/{id}/verify     verify      (VERIFY_CONTENT)
    DELETE /{collection}/{id}            delete      (DELETE_CONTENT)

plus read-only relationship listings such as /owners/{id}/units.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from railcat.api.dependencies import DBSession, Pagination
from railcat.core.auth import CurrentToken
from railcat.core.permissions import (
    ADD_CONTENT,
    DELETE_CONTENT,
    VERIFY_CONTENT,
    require_permission,
)
from railcat.modules.catalog.collections import COLLECTIONS, RELATIONS, Collection
from railcat.modules.catalog.schemas import Page
from railcat.modules.catalog.services import CatalogService


def _service_dependency(collection: Collection) -> Any:
    def get_service(db: DBSession) -> CatalogService:
        return CatalogService(db, collection)

    return Annotated[CatalogService, Depends(get_service)]


def build_collection_router(collection: Collection) -> APIRouter:
    """Create the router serving one catalog collection."""
    router = APIRouter(prefix=f"/{collection.name}", tags=[collection.name])

    Service = _service_dependency(collection)
    CreateSchema = collection.create_schema
    UpdateSchema = collection.update_schema
    Response = collection.response_schema
    Filters = collection.filter_schema

    @router.get(
        "",
        response_model=Page[Response],  # type: ignore[valid-type]
        summary=f"List {collection.name}",
    )
    async def list_records(
        service: Service,  # type: ignore[valid-type]
        filters: Annotated[Filters, Query()],  # type: ignore[valid-type]
        pagination: Pagination,
    ) -> Any:
        records, total = await service.search(
            filters.model_dump(exclude_none=True),
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return Page[Response](  # type: ignore[valid-type]
            items=[Response.model_validate(r) for r in records],
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        )

    @router.get(
        "/{record_id}",
        response_model=Response,
        summary=f"Get {collection.resource} by ID",
    )
    async def get_record(record_id: UUID, service: Service) -> Any:  # type: ignore[valid-type]
        record = await service.get(record_id)
        return Response.model_validate(record)

    @router.post(
        "",
        response_model=Response,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {collection.resource}",
        description="Requires the ADD_CONTENT permission.",
    )
    @require_permission(ADD_CONTENT)
    async def create_record(
        data: CreateSchema,  # type: ignore[valid-type]
        token: CurrentToken,  # noqa: ARG001 - checked by the guard
        service: Service,  # type: ignore[valid-type]
    ) -> Any:
        record = await service.create(data)
        return Response.model_validate(record)

    @router.patch(
        "/{record_id}",
        response_model=Response,
        summary=f"Update {collection.resource}",
        description="Requires the ADD_CONTENT permission. Clears the verified flag.",
    )
    @require_permission(ADD_CONTENT)
    async def update_record(
        record_id: UUID,
        data: UpdateSchema,  # type: ignore[valid-type]
        token: CurrentToken,  # noqa: ARG001 - checked by the guard
        service: Service,  # type: ignore[valid-type]
    ) -> Any:
        record = await service.update(record_id, data)
        return Response.model_validate(record)

    @router.post(
        "/{record_id}/verify",
        response_model=Response,
        summary=f"Verify {collection.resource}",
        description="Requires the VERIFY_CONTENT permission.",
    )
    @require_permission(VERIFY_CONTENT)
    async def verify_record(
        record_id: UUID,
        token: CurrentToken,  # noqa: ARG001 - checked by the guard
        service: Service,  # type: ignore[valid-type]
    ) -> Any:
        record = await service.verify(record_id)
        return Response.model_validate(record)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {collection.resource}",
        description="Requires the DELETE_CONTENT permission.",
    )
    @require_permission(DELETE_CONTENT)
    async def delete_record(
        record_id: UUID,
        token: CurrentToken,  # noqa: ARG001 - checked by the guard
        service: Service,  # type: ignore[valid-type]
    ) -> None:
        await service.delete(record_id)

    return router


def add_relation_route(
    router: APIRouter,
    parent: Collection,
    child: Collection,
    field: str,
) -> None:
    """Add GET /{parent}/{id}/{child} listing children that reference the parent."""
    ParentService = _service_dependency(parent)
    ChildService = _service_dependency(child)
    Response = child.response_schema

    @router.get(
        f"/{{record_id}}/{child.name}",
        response_model=Page[Response],  # type: ignore[valid-type]
        summary=f"List {child.name} of a {parent.resource}",
    )
    async def list_related(
        record_id: UUID,
        parent_service: ParentService,  # type: ignore[valid-type]
        child_service: ChildService,  # type: ignore[valid-type]
        pagination: Pagination,
    ) -> Any:
        await parent_service.get(record_id)
        records, total = await child_service.search(
            {field: record_id},
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return Page[Response](  # type: ignore[valid-type]
            items=[Response.model_validate(r) for r in records],
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        )


def build_catalog_router() -> APIRouter:
    """Create the router for the whole catalog."""
    catalog_router = APIRouter()
    routers = {name: build_collection_router(c) for name, c in COLLECTIONS.items()}

    for parent, child, field in RELATIONS:
        add_relation_route(routers[parent.name], parent, child, field)

    for collection_router in routers.values():
        catalog_router.include_router(collection_router)

    return catalog_router

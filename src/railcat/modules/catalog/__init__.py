"""Catalog module: manufacturers, models, owners, units, tags, pictures, documentation."""

from railcat.modules.catalog.routes import build_catalog_router


router = build_catalog_router()


# Module metadata
__module__ = {
    "name": "catalog",
    "version": "1.0.0",
    "description": "Railway heritage catalog records",
    "dependencies": ["permissions"],
}

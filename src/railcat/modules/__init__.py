"""Feature modules mounted under /api/v1.

A feature module is a subpackage exposing ``router`` and, optionally, a
``__module__`` metadata dict with ``name``, ``version`` and ``description``.
"""

import pkgutil
from importlib import import_module

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every feature package and collect its router.

    Packages are visited in name order so route registration is stable.
    """
    routers: list[APIRouter] = []

    for info in sorted(pkgutil.iter_modules(__path__), key=lambda m: m.name):
        if not info.ispkg or info.name.startswith("_"):
            continue

        module = import_module(f"{__name__}.{info.name}")
        router = getattr(module, "router", None)
        if router is None:
            continue

        metadata = getattr(module, "__module__", None) or {}
        routers.append(router)
        logger.debug(
            "module_loaded",
            module=metadata.get("name", info.name),
            version=metadata.get("version"),
        )

    return routers

"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository
from parcelfit.infrastructure.persistence.json_box_catalog_repository import (
    JsonBoxCatalogRepository,
)
from parcelfit.infrastructure.persistence.static_box_catalog import (
    StaticBoxCatalogRepository,
)


def box_catalog_repository(catalog_path: Path | None = None) -> BoxCatalogRepository:
    """Return the JSON catalog at *catalog_path*, or the built-in table."""
    if catalog_path is not None:
        return JsonBoxCatalogRepository(catalog_path)
    return StaticBoxCatalogRepository()

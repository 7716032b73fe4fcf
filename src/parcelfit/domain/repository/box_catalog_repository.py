"""Abstract repository for the box catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (built-in table, JSON file)
live in the infrastructure layer.  The catalog is read-only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from parcelfit.domain.model.shipping_box import ShippingBox


class BoxCatalogRepository(ABC):

    @abstractmethod
    def get_by_id(self, box_id: str) -> ShippingBox | None:
        """Return a box by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[ShippingBox]:
        """Return every box in catalog order."""

"""Application service: List Boxes use case (query)."""

from __future__ import annotations

from parcelfit.application.dto import ShippingBoxDTO
from parcelfit.domain.model.shipping_box import ShippingBox
from parcelfit.domain.model.value_objects import Money
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository


class ListBoxesHandler:

    def __init__(self, catalog: BoxCatalogRepository) -> None:
        self._catalog = catalog

    def handle(self) -> list[ShippingBoxDTO]:
        return [self._to_dto(box) for box in self._catalog.list_all()]

    @staticmethod
    def _to_dto(box: ShippingBox) -> ShippingBoxDTO:
        return ShippingBoxDTO(
            id=box.id,
            name=box.name,
            dimensions=str(box.dimensions),
            max_weight=box.max_weight,
            type=box.type.value,
            parcel_post_price=str(Money.of(box.parcel_post_price)) if box.is_satchel else None,
            express_post_price=str(Money.of(box.express_post_price)) if box.is_satchel else None,
        )

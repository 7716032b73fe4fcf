"""Built-in Australia Post box catalog.

Kept as a table of records so boxes can be added without touching the
selection logic.
"""

from __future__ import annotations

from parcelfit.domain.model.shipping_box import BoxDimensions, BoxType, ShippingBox
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository

# (id, name, length, width, height, max kg, parcel post, express post, type)
_AUSTRALIA_POST_TABLE = [
    # Prepaid satchels: flat rate up to 5kg
    ("satchel-small", "Small Satchel", 35.5, 22.5, 2, 5, 11.30, 12.95, "satchel"),
    ("satchel-medium", "Medium Satchel", 39, 27, 2, 5, 15.30, 16.50, "satchel"),
    ("satchel-large", "Large Satchel", 40.5, 31.5, 2, 5, 19.35, 21.50, "satchel"),
    ("satchel-extra-large", "Extra Large Satchel", 51, 44, 2, 5, 23.35, 27.50, "satchel"),
    # Boxes: priced by weight
    ("box-small", "Small Box", 20, 15, 10, 22, 0, 0, "box"),
    ("box-medium", "Medium Box", 30, 25, 15, 22, 0, 0, "box"),
    ("box-large", "Large Box", 40, 30, 20, 22, 0, 0, "box"),
]

AUSTRALIA_POST_BOXES: tuple[ShippingBox, ...] = tuple(
    ShippingBox(
        id=box_id,
        name=name,
        dimensions=BoxDimensions(length, width, height),
        max_weight=max_weight,
        parcel_post_price=parcel,
        express_post_price=express,
        type=BoxType(box_type),
    )
    for box_id, name, length, width, height, max_weight, parcel, express, box_type
    in _AUSTRALIA_POST_TABLE
)


class StaticBoxCatalogRepository(BoxCatalogRepository):

    def __init__(self, boxes: tuple[ShippingBox, ...] = AUSTRALIA_POST_BOXES) -> None:
        self._boxes = boxes

    def get_by_id(self, box_id: str) -> ShippingBox | None:
        for box in self._boxes:
            if box.id == box_id:
                return box
        return None

    def list_all(self) -> list[ShippingBox]:
        return list(self._boxes)

"""Domain service: Box Selection.

Filters the catalog down to the parcels a product physically fits in,
smallest first.

Sides are compared axis to axis (length to length, width to width,
height to height).  A product that would only fit after being turned
on its side is reported as not fitting unless ``allow_rotation`` is set,
in which case the sorted sides of product and box are compared.
"""

from __future__ import annotations

from parcelfit.domain.model.shipping_box import ShippingBox
from parcelfit.domain.model.value_objects import ProductDimensions
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository


class BoxSelector:

    def __init__(
        self,
        catalog: BoxCatalogRepository,
        allow_rotation: bool = False,
    ) -> None:
        self._catalog = catalog
        self._allow_rotation = allow_rotation

    def find_suitable_boxes(self, product: ProductDimensions) -> list[ShippingBox]:
        """Return every box the product fits in, by ascending volume.

        Ties in volume keep catalog order.  An empty list means no
        standard parcel fits and the item needs custom shipping.
        """
        candidates = [
            box for box in self._catalog.list_all() if self.fits(product, box)
        ]
        return sorted(candidates, key=lambda box: box.volume)

    def fits(self, product: ProductDimensions, box: ShippingBox) -> bool:
        if product.weight > box.max_weight:
            return False

        product_sides = product.sides
        box_sides = box.dimensions.sides
        if self._allow_rotation:
            product_sides = tuple(sorted(product_sides))
            box_sides = tuple(sorted(box_sides))

        return all(p <= b for p, b in zip(product_sides, box_sides))

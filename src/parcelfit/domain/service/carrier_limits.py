"""Australia Post parcel limits.

Anything heavier than 22 kg, longer than 105 cm on any side, or with a
girth over 140 cm cannot go as a standard parcel and needs a custom
shipping quote.
"""

from __future__ import annotations

from dataclasses import dataclass

from parcelfit.domain.model.value_objects import ProductDimensions


@dataclass(frozen=True)
class CarrierLimits:
    max_weight: float = 22  # kg
    max_side: float = 105  # cm
    max_girth: float = 140  # cm

    def oversize_reasons(self, product: ProductDimensions) -> list[str]:
        """Return one message per limit the product exceeds (empty if none)."""
        reasons: list[str] = []
        if product.weight > self.max_weight:
            reasons.append(f"weight {product.weight:g}kg exceeds {self.max_weight:g}kg")
        for name, side in zip(("length", "width", "height"), product.sides):
            if side > self.max_side:
                reasons.append(f"{name} {side:g}cm exceeds {self.max_side:g}cm")
        if product.girth > self.max_girth:
            reasons.append(f"girth {product.girth:g}cm exceeds {self.max_girth:g}cm")
        return reasons

    def is_oversized(self, product: ProductDimensions) -> bool:
        return bool(self.oversize_reasons(product))


AUSTRALIA_POST_LIMITS = CarrierLimits()

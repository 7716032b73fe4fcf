"""Domain service: Price Estimation.

Satchels are prepaid and cost the same at any weight up to their cap.
Boxes are priced from weight with a flat rate table that is shared by
every box size.

A box costs ``max(base_rate, weight * per_kg_rate)``: the base rate is a
minimum charge, not a handling fee.  The storefront this replaces added
the two (``base_rate + weight * per_kg_rate``), which charges $15.50
rather than $8 for a 2.5kg Parcel Post box.
"""

from __future__ import annotations

from dataclasses import dataclass

from parcelfit.domain.model.shipping_box import ShippingBox
from parcelfit.domain.model.value_objects import require_positive


@dataclass(frozen=True)
class BoxRate:
    base_rate: float  # AUD, minimum charge
    per_kg_rate: float  # AUD per kg

    def price_for(self, weight: float) -> float:
        return max(self.base_rate, weight * self.per_kg_rate)


# ---------------------------------------------------------------------------
# Rate table for weight-priced boxes (same for every box size)
# ---------------------------------------------------------------------------
# TODO: replace with weight-banded rates from the Australia Post postage API.
PARCEL_POST_RATE = BoxRate(base_rate=8, per_kg_rate=3)
EXPRESS_POST_RATE = BoxRate(base_rate=12, per_kg_rate=5)

PARCEL_POST = "Parcel Post"
EXPRESS_POST = "Express Post"


def service_name(express_post: bool) -> str:
    return EXPRESS_POST if express_post else PARCEL_POST


class PriceEstimator:

    def __init__(
        self,
        parcel_post_rate: BoxRate = PARCEL_POST_RATE,
        express_post_rate: BoxRate = EXPRESS_POST_RATE,
    ) -> None:
        self._parcel_post_rate = parcel_post_rate
        self._express_post_rate = express_post_rate

    def get_shipping_price(
        self,
        box: ShippingBox,
        weight: float,
        express_post: bool = False,
    ) -> float:
        """Return the postage for *weight* kg in *box*, in AUD.

        Raises InvalidDimensionsError if weight is not positive.
        """
        weight = require_positive("weight", weight)

        if box.is_satchel:
            return box.express_post_price if express_post else box.parcel_post_price

        rate = self._express_post_rate if express_post else self._parcel_post_rate
        return rate.price_for(weight)

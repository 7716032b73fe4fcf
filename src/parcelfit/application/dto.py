"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductSpec:
    """Input: what the caller knows about the item (cm, kg)."""

    length: float
    width: float
    height: float
    weight: float


@dataclass(frozen=True)
class ShippingBoxDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    dimensions: str  # formatted, e.g. "20cm × 15cm × 10cm"
    max_weight: float
    type: str
    parcel_post_price: str | None  # None for weight-priced boxes
    express_post_price: str | None


@dataclass(frozen=True)
class PriceDTO:
    """Output: a single box priced for a given weight and service."""

    box_id: str
    box_name: str
    service: str
    weight: float
    price: float


@dataclass(frozen=True)
class PackagingDTO:
    """Output: a packaging carton and its price."""

    code: str
    name: str
    dimensions: str
    price: str


@dataclass(frozen=True)
class ShippingOptionDTO:
    """Output: one priced parcel option within a quote."""

    box_id: str
    box_name: str
    box_type: str
    dimensions: str
    postage: str  # formatted, e.g. "$11.30"
    box_price: str  # packaging carton; "$0.00" for satchels
    subtotal: str  # postage + box_price
    gst: str  # on the subtotal
    total: str


@dataclass(frozen=True)
class QuoteDTO:
    """Output: the outcome of a shipping quote.

    When ``custom_shipping_required`` is set there are no options and
    ``message`` says why.
    """

    service: str
    custom_shipping_required: bool
    options: list[ShippingOptionDTO] = field(default_factory=list)
    message: str = ""
    packaging: str | None = None  # packaging code charged on box options

    @property
    def recommended(self) -> ShippingOptionDTO | None:
        return self.options[0] if self.options else None

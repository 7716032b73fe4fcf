"""ShippingBox: a carrier parcel from the box catalog.

Boxes are immutable records loaded once from the catalog.  Satchels
carry their own flat prices; plain boxes are priced from weight on
demand, so their stored prices are always zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from parcelfit.domain.exceptions import ValidationError


def _check_number(label: str, value: object, allow_zero: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be finite, got {value!r}")
    if allow_zero and value < 0:
        raise ValidationError(f"{label} cannot be negative")
    if not allow_zero and value <= 0:
        raise ValidationError(f"{label} must be positive")


class BoxType(Enum):
    SATCHEL = "satchel"
    BOX = "box"


@dataclass(frozen=True)
class BoxDimensions:
    """Internal dimensions of a parcel in centimetres."""

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("length", "width", "height"):
            _check_number(f"Box {name}", getattr(self, name))

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def sides(self) -> tuple[float, float, float]:
        return self.length, self.width, self.height

    def __str__(self) -> str:
        return f"{self.length:g}cm × {self.width:g}cm × {self.height:g}cm"


@dataclass(frozen=True)
class ShippingBox:
    """A satchel or box definition.

    Invariants:
    - ``id`` and ``name`` are non-blank strings
    - ``max_weight`` is finite and positive, prices are finite and never negative
    - a ``BoxType.BOX`` has ``parcel_post_price == express_post_price == 0``
    """

    id: str
    name: str
    dimensions: BoxDimensions
    max_weight: float  # kg
    parcel_post_price: float  # AUD
    express_post_price: float  # AUD
    type: BoxType

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Box id is required")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(f"Box '{self.id}' name is required")
        _check_number(f"Box '{self.id}' max weight", self.max_weight)
        _check_number(f"Box '{self.id}' parcel post price", self.parcel_post_price, allow_zero=True)
        _check_number(f"Box '{self.id}' express post price", self.express_post_price, allow_zero=True)
        if self.type == BoxType.BOX and (
            self.parcel_post_price != 0 or self.express_post_price != 0
        ):
            raise ValidationError(
                f"Box '{self.id}' is priced by weight and cannot carry a fixed price"
            )

    @property
    def volume(self) -> float:
        return self.dimensions.volume

    @property
    def is_satchel(self) -> bool:
        return self.type == BoxType.SATCHEL

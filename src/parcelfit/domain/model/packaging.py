"""Packaging: the carton bought from Australia Post to post a box in.

Satchels are prepaid and include their own packaging.  A weight-priced
box still needs a carton, which is charged on top of postage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from parcelfit.domain.exceptions import ValidationError
from parcelfit.domain.model.shipping_box import BoxDimensions


@dataclass(frozen=True)
class Packaging:
    code: str  # Australia Post size code, e.g. "Bx1"
    name: str
    dimensions: BoxDimensions
    price: float  # AUD

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValidationError("Packaging code is required")
        if (
            isinstance(self.price, bool)
            or not isinstance(self.price, (int, float))
            or not math.isfinite(self.price)
            or self.price < 0
        ):
            raise ValidationError(
                f"Packaging '{self.code}' price must be a finite amount >= 0"
            )


# (code, name, length, width, height, price)
_AUSTRALIA_POST_PACKAGING_TABLE = [
    ("Bx1", "Small", 22, 16, 7.7, 3.50),
    ("Bx2", "Medium", 31, 22.5, 10.2, 4.25),
    ("Bx3", "Long", 40, 20, 18, 5.75),
    ("Bx4", "Wide", 43, 30.5, 14, 6.25),
    ("Bx5", "Large", 40.5, 30, 25.5, 8.50),
    ("Bx6", "Flat", 22, 14.5, 3.5, 2.75),
    ("Bx7", "Very Flat", 14.5, 12.7, 1, 1.95),
    ("Bx8", "ToughPak", 36.3, 21.2, 6.5, 4.95),
]

AUSTRALIA_POST_PACKAGING: tuple[Packaging, ...] = tuple(
    Packaging(code, name, BoxDimensions(length, width, height), price)
    for code, name, length, width, height, price in _AUSTRALIA_POST_PACKAGING_TABLE
)


def find_packaging(code: str) -> Packaging | None:
    for packaging in AUSTRALIA_POST_PACKAGING:
        if packaging.code == code:
            return packaging
    return None

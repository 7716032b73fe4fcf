"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from parcelfit.domain.exceptions import InvalidDimensionsError, ValidationError

GRAMS_PER_KG = 1000  # product records store weight in grams

_CENTS = Decimal("0.01")


def positive_number_problem(name: str, value: object) -> str | None:
    """Describe why *value* is not a finite number > 0, or return None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{name} must be a number, got {type(value).__name__}"
    if not math.isfinite(value):
        return f"{name} must be finite, got {value!r}"
    if value <= 0:
        return f"{name} must be positive, got {value!r}"
    return None


def require_positive(name: str, value: float) -> float:
    """Return *value* as a float, rejecting non-numbers, NaN, infinity and values <= 0."""
    problem = positive_number_problem(name, value)
    if problem:
        raise InvalidDimensionsError(problem)
    return float(value)


@dataclass(frozen=True)
class ProductDimensions:
    """A single item to be shipped: sides in cm, weight in kg.

    Construction rejects zero, negative, non-finite and non-numeric
    values with ``InvalidDimensionsError``, naming every bad field at once.
    """

    length: float
    width: float
    height: float
    weight: float

    def __post_init__(self) -> None:
        problems = []
        for name in ("length", "width", "height", "weight"):
            problem = positive_number_problem(name, getattr(self, name))
            if problem:
                problems.append(problem)
            else:
                object.__setattr__(self, name, float(getattr(self, name)))
        if problems:
            raise InvalidDimensionsError("; ".join(problems))

    @property
    def girth(self) -> float:
        """length + 2 x width + 2 x height"""
        return self.length + 2 * self.width + 2 * self.height

    @property
    def sides(self) -> tuple[float, float, float]:
        return self.length, self.width, self.height


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "AUD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def percentage(self, rate: Decimal) -> Money:
        """Return ``rate`` of this amount, rounded half-up to the cent."""
        return Money(
            (self.amount * rate).quantize(_CENTS, rounding=ROUND_HALF_UP),
            self.currency,
        )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce to Decimal and round half-up to the cent."""
        try:
            value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value)

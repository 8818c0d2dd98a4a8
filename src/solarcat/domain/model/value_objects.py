"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from solarcat.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "TRY"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal so band midpoints and price comparisons are exact.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BillBand:
    """The [min_bill, max_bill] monthly bill range a package is offered for."""

    min_bill: Money
    max_bill: Money

    def __post_init__(self) -> None:
        if self.max_bill < self.min_bill:
            raise ValidationError(
                f"Minimum bill {self.min_bill} exceeds maximum bill {self.max_bill}"
            )

    @property
    def midpoint(self) -> Decimal:
        return (self.min_bill.amount + self.max_bill.amount) / 2

    def contains(self, bill: Money) -> bool:
        return self.min_bill <= bill <= self.max_bill

    def distance_to(self, bill: Money) -> Decimal:
        """Distance from *bill* to the middle of the band."""
        return abs(self.midpoint - bill.amount)


def new_id(prefix: str) -> str:
    """Return a fresh opaque identifier such as ``pkg-3f9a1c0b2d4e``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"

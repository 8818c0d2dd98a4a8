"""Solar package aggregate — a priced bundle of products offered for a bill band.

The package header owns its line items. Line items are never addressed
individually; the whole set is replaced through the package composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    BillBand,
    Money,
    Quantity,
)

PACKAGE_ID_PREFIX = "pkg"
LINE_ITEM_ID_PREFIX = "pp"

Amount = str | int | float | Decimal


class PackageStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

    @staticmethod
    def parse(raw: str | None) -> PackageStatus:
        """Parse a status string; ``None`` or blank means ACTIVE."""
        if raw is None or not str(raw).strip():
            return PackageStatus.ACTIVE
        try:
            return PackageStatus(str(raw).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Invalid package status '{raw}'. Expected 'active' or 'inactive'."
            ) from None


@dataclass(frozen=True)
class PackageDetails:
    """The full set of scalar fields written by a create or update call."""

    name: str
    band: BillBand
    total_price: Money
    installation_cost: Money
    description: str = ""
    system_power: str = ""
    image_url: str | None = None
    savings: str | None = None
    payback_period: str | None = None
    status: PackageStatus = PackageStatus.ACTIVE

    @staticmethod
    def parse(
        name: str | None,
        min_bill: Amount | None,
        max_bill: Amount | None,
        total_price: Amount | None,
        installation_cost: Amount | None = None,
        description: str | None = None,
        system_power: str | None = None,
        image_url: str | None = None,
        savings: str | None = None,
        payback_period: str | None = None,
        status: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> PackageDetails:
        """Validate raw input into package details.

        Raises ValidationError when a required field is missing, an
        amount is not a non-negative number, or the band is inverted.
        """
        missing = [
            label
            for label, value in (
                ("name", name),
                ("min_bill", min_bill),
                ("max_bill", max_bill),
                ("total_price", total_price),
            )
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise ValidationError(f"Missing required package fields: {', '.join(missing)}")

        band = BillBand(
            min_bill=Money.of(min_bill, currency),  # type: ignore[arg-type]
            max_bill=Money.of(max_bill, currency),  # type: ignore[arg-type]
        )
        return PackageDetails(
            name=name.strip(),  # type: ignore[union-attr]
            band=band,
            total_price=Money.of(total_price, currency),  # type: ignore[arg-type]
            installation_cost=Money.of(
                installation_cost if installation_cost is not None else 0, currency
            ),
            description=description or "",
            system_power=system_power or "",
            image_url=image_url,
            savings=savings,
            payback_period=payback_period,
            status=PackageStatus.parse(status),
        )


@dataclass(frozen=True)
class PackageLineItem:
    """One (product, quantity) pairing attached to a package."""

    id: str
    package_id: str
    product_id: str
    quantity: Quantity


@dataclass(frozen=True)
class PackageLineView:
    """A line item joined with the product it references."""

    id: str
    package_id: str
    product_id: str
    quantity: int
    product_name: str
    unit_price: Money
    image_url: str | None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class SolarPackage:
    """Aggregate root for sellable bundles.

    Use ``SolarPackage.create()`` for new packages. The ``__init__`` is
    kept simple so the repository can reconstitute stored packages
    without re-validating them.
    """

    id: str
    name: str
    band: BillBand
    total_price: Money
    installation_cost: Money
    created_date: date
    description: str = ""
    system_power: str = ""
    image_url: str | None = None
    savings: str | None = None
    payback_period: str | None = None
    status: PackageStatus = PackageStatus.ACTIVE

    @staticmethod
    def create(package_id: str, details: PackageDetails, created_date: date) -> SolarPackage:
        package = SolarPackage(
            id=package_id,
            name=details.name,
            band=details.band,
            total_price=details.total_price,
            installation_cost=details.installation_cost,
            created_date=created_date,
        )
        package.apply(details)
        return package

    def apply(self, details: PackageDetails) -> None:
        """Overwrite every scalar field. ``id`` and ``created_date`` are kept."""
        self.name = details.name
        self.band = details.band
        self.total_price = details.total_price
        self.installation_cost = details.installation_cost
        self.description = details.description
        self.system_power = details.system_power
        self.image_url = details.image_url
        self.savings = details.savings
        self.payback_period = details.payback_period
        self.status = details.status

    @property
    def is_active(self) -> bool:
        return self.status == PackageStatus.ACTIVE

    @property
    def min_bill(self) -> Money:
        return self.band.min_bill

    @property
    def max_bill(self) -> Money:
        return self.band.max_bill

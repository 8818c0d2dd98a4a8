"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from solarcat.domain.model.product import Product
from solarcat.domain.model.solar_package import PackageLineView, SolarPackage

Amount = str | int | float | Decimal


# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class LineItemSpec:
    """Input: one product of a package's product list."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class PackageSpec:
    """Input: the fields of a create or update call, unvalidated.

    ``products`` is None when the caller did not send a product list,
    which leaves existing line items untouched on update.
    """

    name: str | None = None
    min_bill: Amount | None = None
    max_bill: Amount | None = None
    total_price: Amount | None = None
    installation_cost: Amount | None = None
    description: str | None = None
    system_power: str | None = None
    image_url: str | None = None
    savings: str | None = None
    payback_period: str | None = None
    status: str | None = None
    products: list[LineItemSpec] | None = None


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class PackageLineDTO:
    id: str
    product_id: str
    quantity: int
    product_name: str
    unit_price: Decimal
    line_total: Decimal
    image_url: str | None

    @staticmethod
    def from_view(view: PackageLineView) -> PackageLineDTO:
        return PackageLineDTO(
            id=view.id,
            product_id=view.product_id,
            quantity=view.quantity,
            product_name=view.product_name,
            unit_price=view.unit_price.amount,
            line_total=view.line_total.amount,
            image_url=view.image_url,
        )


@dataclass(frozen=True)
class PackageDTO:
    """Output: a package header, with its joined line items when loaded."""

    id: str
    name: str
    description: str
    min_bill: Decimal
    max_bill: Decimal
    system_power: str
    total_price: Decimal
    installation_cost: Decimal
    currency: str
    image_url: str | None
    savings: str | None
    payback_period: str | None
    status: str
    created_date: str
    products: list[PackageLineDTO] = field(default_factory=list)

    @staticmethod
    def from_domain(
        package: SolarPackage,
        lines: list[PackageLineView] | None = None,
    ) -> PackageDTO:
        return PackageDTO(
            id=package.id,
            name=package.name,
            description=package.description,
            min_bill=package.min_bill.amount,
            max_bill=package.max_bill.amount,
            system_power=package.system_power,
            total_price=package.total_price.amount,
            installation_cost=package.installation_cost.amount,
            currency=package.total_price.currency,
            image_url=package.image_url,
            savings=package.savings,
            payback_period=package.payback_period,
            status=package.status.value,
            created_date=package.created_date.isoformat(),
            products=[PackageLineDTO.from_view(v) for v in lines or []],
        )


@dataclass(frozen=True)
class RecommendationDTO:
    """Output: the package chosen for a bill, or ``package=None`` for no match."""

    bill_amount: Decimal
    package: PackageDTO | None

    @property
    def matched(self) -> bool:
        return self.package is not None


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    sku: str
    category: str
    price: Decimal
    currency: str
    stock: int
    stock_status: str
    status: str
    image_url: str | None
    specs: dict
    images: list[str]

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            sku=product.sku,
            category=product.category,
            price=product.price.amount,
            currency=product.price.currency,
            stock=product.stock,
            stock_status=product.stock_status,
            status=product.status,
            image_url=product.image_url,
            specs=dict(product.specs),
            images=list(product.images),
        )

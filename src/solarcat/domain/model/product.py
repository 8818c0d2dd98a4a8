"""Product aggregate.

Products live independently of packages. Packages reference them by id
through line items but never own them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.value_objects import Money

LOW_STOCK_THRESHOLD = 10


@dataclass
class Product:
    """A unit catalog entry (panel, inverter, battery, ...)."""

    id: str
    name: str
    price: Money
    sku: str = ""
    category: str = ""
    stock: int = 0
    status: str = "active"
    image_url: str | None = None
    specs: dict[str, Any] = field(default_factory=dict)
    images: list[str] = field(default_factory=list)

    @property
    def stock_status(self) -> str:
        if self.stock <= 0:
            return "outstock"
        if self.stock < LOW_STOCK_THRESHOLD:
            return "lowstock"
        return "instock"

    @staticmethod
    def create(
        product_id: str,
        name: str,
        sku: str,
        category: str,
        price: Money,
        stock: int = 0,
        status: str = "active",
        image_url: str | None = None,
        specs: dict[str, Any] | None = None,
        images: list[str] | None = None,
    ) -> Product:
        """Register a new product, enforcing the catalog's entry rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not sku or not sku.strip():
            raise ValidationError("Product SKU is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ValidationError(f"Invalid stock value: {stock!r}")

        return Product(
            id=product_id,
            name=name.strip(),
            price=price,
            sku=sku.strip(),
            category=category.strip(),
            stock=stock,
            status=status or "active",
            image_url=image_url,
            specs=dict(specs or {}),
            images=list(images or []),
        )

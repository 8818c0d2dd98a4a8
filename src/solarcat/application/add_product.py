"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from solarcat.application.dto import ProductDTO
from solarcat.domain.model.product import Product
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY, Money, new_id
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork

logger = logging.getLogger(__name__)

PRODUCT_ID_PREFIX = "prd"


class AddProductHandler:

    def __init__(self, uow: CatalogUnitOfWork, currency: str = DEFAULT_CURRENCY) -> None:
        self._uow = uow
        self._currency = currency

    def handle(
        self,
        name: str,
        sku: str,
        category: str,
        price: str | int | float | Decimal,
        stock: int = 0,
        status: str = "active",
        image_url: str | None = None,
        specs: dict[str, Any] | None = None,
        images: list[str] | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            product_id=new_id(PRODUCT_ID_PREFIX),
            name=name,
            sku=sku,
            category=category,
            price=Money.of(price, self._currency),
            stock=stock,
            status=status,
            image_url=image_url,
            specs=specs,
            images=images,
        )

        with self._uow:
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product %s '%s' added", product.id, product.name)
        return ProductDTO.from_domain(product)

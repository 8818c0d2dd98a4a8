"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from solarcat.domain.model.product import Product
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY, Money
from solarcat.domain.repository.product_repository import ProductRepository

Document = dict[str, list[dict]]


class JsonProductRepository(ProductRepository):

    def __init__(self, document: Document) -> None:
        self._document = document

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._rows:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(
        self,
        status: str | None = None,
        category: str | None = None,
    ) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._rows]
        if status is not None:
            products = [p for p in products if p.status == status]
        if category is not None:
            products = [p for p in products if p.category == category]
        return products

    def save(self, product: Product) -> None:
        rows = self._rows
        for i, raw in enumerate(rows):
            if raw["id"] == product.id:
                rows[i] = self._to_raw(product)
                return
        rows.append(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @property
    def _rows(self) -> list[dict]:
        return self._document.setdefault("products", [])

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "category": product.category,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "status": product.status,
            "image_url": product.image_url,
            "specs": dict(product.specs),
            "images": list(product.images),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(
                Decimal(str(raw.get("price", "0"))),
                raw.get("currency", DEFAULT_CURRENCY),
            ),
            sku=raw.get("sku", ""),
            category=raw.get("category", ""),
            stock=int(raw.get("stock", 0)),
            status=raw.get("status", "active"),
            image_url=raw.get("image_url"),
            specs=dict(raw.get("specs") or {}),
            images=list(raw.get("images") or []),
        )

"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer and are reached through a CatalogUnitOfWork.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solarcat.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(
        self,
        status: str | None = None,
        category: str | None = None,
    ) -> list[Product]:
        """Return products, optionally filtered by status and category."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

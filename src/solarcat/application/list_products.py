"""Application service: List Products use case (query)."""

from __future__ import annotations

from solarcat.application.dto import ProductDTO
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork


class ListProductsHandler:

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        status: str | None = None,
        category: str | None = None,
    ) -> list[ProductDTO]:
        with self._uow:
            products = self._uow.products.list_all(status=status, category=category)
        return [ProductDTO.from_domain(p) for p in products]

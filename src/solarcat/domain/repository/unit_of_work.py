"""Abstract unit of work — the transaction handle for catalog access.

Every handler receives one of these and performs all of its reads and
writes through the repositories it exposes::

    with uow:
        uow.packages.save(package)
        composer.set_line_items(uow, package.id, items)
        uow.commit()

Leaving the ``with`` block without ``commit()`` (or because of an
exception) discards every pending change, so a package header and its
line items are always written together or not at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from solarcat.domain.repository.line_item_repository import LineItemRepository
from solarcat.domain.repository.package_repository import PackageRepository
from solarcat.domain.repository.product_repository import ProductRepository


class CatalogUnitOfWork(ABC):

    products: ProductRepository
    packages: PackageRepository
    line_items: LineItemRepository

    def __enter__(self) -> CatalogUnitOfWork:
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Make every pending change durable and visible at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard pending changes. A no-op after a successful commit."""

    def _begin(self) -> None:
        """Hook: acquire locks and load a snapshot."""

    def _end(self) -> None:
        """Hook: release whatever ``_begin`` acquired."""

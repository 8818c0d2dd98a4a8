"""Application service: Show Package use case (query)."""

from __future__ import annotations

from solarcat.application.dto import PackageDTO
from solarcat.domain.exceptions import EntityNotFoundError
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.domain.service.package_composer import PackageComposer


class ShowPackageHandler:

    def __init__(
        self,
        uow: CatalogUnitOfWork,
        composer: PackageComposer | None = None,
    ) -> None:
        self._uow = uow
        self._composer = composer or PackageComposer()

    def handle(self, package_id: str) -> PackageDTO:
        with self._uow:
            package = self._uow.packages.get_by_id(package_id)
            if package is None:
                raise EntityNotFoundError(f"Package '{package_id}' not found")
            lines = self._composer.line_items_with_product_info(self._uow, package_id)
        return PackageDTO.from_domain(package, lines)

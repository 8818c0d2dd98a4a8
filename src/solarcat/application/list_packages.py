"""Application service: List Packages use case (query)."""

from __future__ import annotations

from solarcat.application.dto import PackageDTO
from solarcat.domain.model.solar_package import PackageStatus
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork


class ListPackagesHandler:

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self._uow = uow

    def handle(self, status: str | None = None) -> list[PackageDTO]:
        """Return package headers ordered by minimum bill.

        Line items are not loaded; use ShowPackageHandler for those.
        """
        status_filter = PackageStatus.parse(status) if status else None
        with self._uow:
            packages = self._uow.packages.list_all(status_filter)
        return [PackageDTO.from_domain(p) for p in packages]

"""Application service: Create Package use case.

Writes the package header and, when a product list is supplied, its
line items in one unit of work.  All input is validated before the
first write, so a rejected request leaves nothing behind.
"""

from __future__ import annotations

import logging
from datetime import date

from solarcat.application._details import details_from_spec, line_pairs_from_spec
from solarcat.application.dto import PackageSpec
from solarcat.domain.model.solar_package import PACKAGE_ID_PREFIX, SolarPackage
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY, new_id
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.domain.service.package_composer import PackageComposer

logger = logging.getLogger(__name__)


class CreatePackageHandler:

    def __init__(
        self,
        uow: CatalogUnitOfWork,
        composer: PackageComposer | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow = uow
        self._composer = composer or PackageComposer()
        self._currency = currency

    def handle(self, spec: PackageSpec, today: date | None = None) -> str:
        """Create a package and return its new id."""
        details = details_from_spec(spec, self._currency)
        lines = line_pairs_from_spec(spec)

        package = SolarPackage.create(
            package_id=new_id(PACKAGE_ID_PREFIX),
            details=details,
            created_date=today or date.today(),
        )

        with self._uow:
            self._uow.packages.save(package)
            if lines:
                self._composer.set_line_items(self._uow, package.id, lines)
            self._uow.commit()

        logger.info(
            "Package %s '%s' created with %d line items",
            package.id, package.name, len(lines or []),
        )
        return package.id

"""Application service: Update Package use case.

Overwrites every scalar field of an existing package.  The product list,
when present, replaces the line items in the same commit; when absent,
the line items are left as they are.
"""

from __future__ import annotations

import logging

from solarcat.application._details import details_from_spec, line_pairs_from_spec
from solarcat.application.dto import PackageSpec
from solarcat.domain.exceptions import EntityNotFoundError
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.domain.service.package_composer import PackageComposer

logger = logging.getLogger(__name__)


class UpdatePackageHandler:

    def __init__(
        self,
        uow: CatalogUnitOfWork,
        composer: PackageComposer | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow = uow
        self._composer = composer or PackageComposer()
        self._currency = currency

    def handle(self, package_id: str, spec: PackageSpec) -> None:
        details = details_from_spec(spec, self._currency)
        lines = line_pairs_from_spec(spec)

        with self._uow:
            package = self._uow.packages.get_by_id(package_id)
            if package is None:
                raise EntityNotFoundError(f"Package '{package_id}' not found")

            package.apply(details)
            self._uow.packages.save(package)
            if lines is not None:
                self._composer.set_line_items(self._uow, package_id, lines)
            self._uow.commit()

        logger.info(
            "Package %s updated%s",
            package_id,
            "" if lines is None else f" with {len(lines)} line items",
        )

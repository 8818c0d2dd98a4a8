"""Application service: Delete Package use case.

The line items go first, then the header, in a single commit, so no
orphaned line item can outlive its package.
"""

from __future__ import annotations

import logging

from solarcat.domain.exceptions import EntityNotFoundError
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.domain.service.package_composer import PackageComposer

logger = logging.getLogger(__name__)


class DeletePackageHandler:

    def __init__(
        self,
        uow: CatalogUnitOfWork,
        composer: PackageComposer | None = None,
    ) -> None:
        self._uow = uow
        self._composer = composer or PackageComposer()

    def handle(self, package_id: str) -> None:
        with self._uow:
            if self._uow.packages.get_by_id(package_id) is None:
                raise EntityNotFoundError(f"Package '{package_id}' not found")
            removed = self._composer.delete_line_items(self._uow, package_id)
            self._uow.packages.delete(package_id)
            self._uow.commit()

        logger.info("Package %s deleted (%d line items removed)", package_id, removed)

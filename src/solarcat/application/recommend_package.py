"""Application service: Recommend Package use case (query).

Parses the customer's monthly bill, asks the recommendation engine for
the best active package and attaches its joined line items.  Finding no
package is a normal outcome, reported as ``RecommendationDTO.package``
being None.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from solarcat.application.dto import PackageDTO, RecommendationDTO
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY, Money
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.domain.service.package_composer import PackageComposer
from solarcat.domain.service.recommendation_engine import RecommendationEngine

logger = logging.getLogger(__name__)


class RecommendPackageHandler:

    def __init__(
        self,
        uow: CatalogUnitOfWork,
        engine: RecommendationEngine | None = None,
        composer: PackageComposer | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow = uow
        self._engine = engine or RecommendationEngine()
        self._composer = composer or PackageComposer()
        self._currency = currency

    def handle(self, bill_amount: str | int | float | Decimal) -> RecommendationDTO:
        bill = Money.of(bill_amount, self._currency)

        with self._uow:
            package = self._engine.recommend(self._uow.packages.list_all(), bill)
            if package is None:
                logger.info("No package fits a monthly bill of %s", bill)
                return RecommendationDTO(bill_amount=bill.amount, package=None)
            lines = self._composer.line_items_with_product_info(self._uow, package.id)

        logger.debug("Bill %s matched package %s", bill, package.id)
        return RecommendationDTO(
            bill_amount=bill.amount,
            package=PackageDTO.from_domain(package, lines),
        )

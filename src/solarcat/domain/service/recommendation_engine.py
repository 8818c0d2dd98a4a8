"""Domain service: Recommendation Engine.

Selects the single best package for a customer's stated monthly bill.
Pure: it only looks at the packages it is given and never touches the
store.
"""

from __future__ import annotations

from collections.abc import Iterable

from solarcat.domain.model.solar_package import SolarPackage
from solarcat.domain.model.value_objects import Money


class RecommendationEngine:

    def candidates(
        self,
        packages: Iterable[SolarPackage],
        bill: Money,
    ) -> list[SolarPackage]:
        """Active packages priced in the bill's currency whose band contains *bill*."""
        return [
            p
            for p in packages
            if p.is_active
            and p.min_bill.currency == bill.currency
            and p.band.contains(bill)
        ]

    def recommend(
        self,
        packages: Iterable[SolarPackage],
        bill: Money,
    ) -> SolarPackage | None:
        """Return the candidate whose band midpoint is closest to *bill*.

        Ties go to the lower minimum bill, then the lower package id.
        Returns None when no active band contains the bill.
        """
        eligible = self.candidates(packages, bill)
        if not eligible:
            return None
        return min(
            eligible,
            key=lambda p: (p.band.distance_to(bill), p.min_bill.amount, p.id),
        )

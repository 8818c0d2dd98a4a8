"""JSON-document-backed implementation of PackageRepository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from solarcat.domain.model.solar_package import PackageStatus, SolarPackage
from solarcat.domain.model.value_objects import DEFAULT_CURRENCY, BillBand, Money
from solarcat.domain.repository.package_repository import PackageRepository

Document = dict[str, list[dict]]


class JsonPackageRepository(PackageRepository):

    def __init__(self, document: Document) -> None:
        self._document = document

    # --- PackageRepository interface ------------------------------------------

    def get_by_id(self, package_id: str) -> SolarPackage | None:
        for raw in self._rows:
            if raw["id"] == package_id:
                return self._to_domain(raw)
        return None

    def list_all(self, status: PackageStatus | None = None) -> list[SolarPackage]:
        packages = [self._to_domain(raw) for raw in self._rows]
        if status is not None:
            packages = [p for p in packages if p.status == status]
        # sorted() is stable, so equal bands keep insertion order
        return sorted(packages, key=lambda p: p.min_bill.amount)

    def save(self, package: SolarPackage) -> None:
        rows = self._rows
        for i, raw in enumerate(rows):
            if raw["id"] == package.id:
                rows[i] = self._to_raw(package)
                return
        rows.append(self._to_raw(package))

    def delete(self, package_id: str) -> bool:
        rows = self._rows
        remaining = [raw for raw in rows if raw["id"] != package_id]
        if len(remaining) == len(rows):
            return False
        rows[:] = remaining
        return True

    # --- Serialization --------------------------------------------------------

    @property
    def _rows(self) -> list[dict]:
        return self._document.setdefault("solar_packages", [])

    @staticmethod
    def _to_raw(package: SolarPackage) -> dict:
        return {
            "id": package.id,
            "name": package.name,
            "description": package.description,
            "min_bill": str(package.min_bill.amount),
            "max_bill": str(package.max_bill.amount),
            "system_power": package.system_power,
            "total_price": str(package.total_price.amount),
            "installation_cost": str(package.installation_cost.amount),
            "currency": package.total_price.currency,
            "image_url": package.image_url,
            "savings": package.savings,
            "payback_period": package.payback_period,
            "status": package.status.value,
            "created_date": package.created_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> SolarPackage:
        currency = raw.get("currency", DEFAULT_CURRENCY)

        def money(key: str) -> Money:
            return Money(Decimal(str(raw.get(key) or "0")), currency)

        return SolarPackage(
            id=raw["id"],
            name=raw["name"],
            band=BillBand(min_bill=money("min_bill"), max_bill=money("max_bill")),
            total_price=money("total_price"),
            installation_cost=money("installation_cost"),
            created_date=date.fromisoformat(raw["created_date"]),
            description=raw.get("description") or "",
            system_power=raw.get("system_power") or "",
            image_url=raw.get("image_url"),
            savings=raw.get("savings"),
            payback_period=raw.get("payback_period"),
            status=PackageStatus(raw.get("status", "active")),
        )

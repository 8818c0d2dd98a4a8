"""JSON-document-backed implementation of LineItemRepository."""

from __future__ import annotations

from solarcat.domain.model.solar_package import PackageLineItem
from solarcat.domain.model.value_objects import Quantity
from solarcat.domain.repository.line_item_repository import LineItemRepository

Document = dict[str, list[dict]]


class JsonLineItemRepository(LineItemRepository):

    def __init__(self, document: Document) -> None:
        self._document = document

    def list_for_package(self, package_id: str) -> list[PackageLineItem]:
        return [
            self._to_domain(raw)
            for raw in self._rows
            if raw["package_id"] == package_id
        ]

    def add(self, item: PackageLineItem) -> None:
        self._rows.append(self._to_raw(item))

    def delete_for_package(self, package_id: str) -> int:
        rows = self._rows
        remaining = [raw for raw in rows if raw["package_id"] != package_id]
        removed = len(rows) - len(remaining)
        rows[:] = remaining
        return removed

    @property
    def _rows(self) -> list[dict]:
        return self._document.setdefault("package_products", [])

    @staticmethod
    def _to_raw(item: PackageLineItem) -> dict:
        return {
            "id": item.id,
            "package_id": item.package_id,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> PackageLineItem:
        return PackageLineItem(
            id=raw["id"],
            package_id=raw["package_id"],
            product_id=raw["product_id"],
            quantity=Quantity(int(raw["quantity"])),
        )

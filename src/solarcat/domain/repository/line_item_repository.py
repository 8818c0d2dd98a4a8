"""Abstract repository for package line items.

Line items have no lifecycle of their own, so the interface only
works on whole per-package sets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solarcat.domain.model.solar_package import PackageLineItem


class LineItemRepository(ABC):

    @abstractmethod
    def list_for_package(self, package_id: str) -> list[PackageLineItem]:
        """Return the package's line items in insertion order."""

    @abstractmethod
    def add(self, item: PackageLineItem) -> None:
        """Insert a single line item."""

    @abstractmethod
    def delete_for_package(self, package_id: str) -> int:
        """Remove every line item of the package; return how many were removed."""

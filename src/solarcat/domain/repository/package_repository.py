"""Abstract repository for the SolarPackage aggregate header."""

from __future__ import annotations

from abc import ABC, abstractmethod

from solarcat.domain.model.solar_package import PackageStatus, SolarPackage


class PackageRepository(ABC):

    @abstractmethod
    def get_by_id(self, package_id: str) -> SolarPackage | None:
        """Return a package by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, status: PackageStatus | None = None) -> list[SolarPackage]:
        """Return packages ordered by minimum bill, ties in insertion order."""

    @abstractmethod
    def save(self, package: SolarPackage) -> None:
        """Persist a new or updated package header."""

    @abstractmethod
    def delete(self, package_id: str) -> bool:
        """Remove a package header. Returns False if it did not exist."""

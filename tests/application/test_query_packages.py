"""Integration tests for the ListPackages and ShowPackage queries."""

import pytest

from solarcat.application.create_package import CreatePackageHandler
from solarcat.application.dto import LineItemSpec, PackageSpec
from solarcat.application.list_packages import ListPackagesHandler
from solarcat.application.show_package import ShowPackageHandler
from solarcat.domain.exceptions import EntityNotFoundError, ValidationError
from solarcat.domain.model.product import Product
from solarcat.domain.model.value_objects import Money
from tests.fakes import FakeCatalogUnitOfWork


def _create(uow, name, min_bill, max_bill, status=None, products=None) -> str:
    return CreatePackageHandler(uow).handle(PackageSpec(
        name=name, min_bill=min_bill, max_bill=max_bill,
        total_price=1000, status=status, products=products,
    ))


class TestListPackages:

    def test_ordered_by_min_bill(self):
        uow = FakeCatalogUnitOfWork()
        _create(uow, "Large", 2000, 3000)
        _create(uow, "Small", 100, 500)
        _create(uow, "Medium", 800, 1200)

        names = [p.name for p in ListPackagesHandler(uow).handle()]
        assert names == ["Small", "Medium", "Large"]

    def test_status_filter(self):
        uow = FakeCatalogUnitOfWork()
        _create(uow, "On", 100, 500)
        _create(uow, "Off", 200, 600, status="inactive")

        assert [p.name for p in ListPackagesHandler(uow).handle("active")] == ["On"]
        assert [p.name for p in ListPackagesHandler(uow).handle("inactive")] == ["Off"]

    def test_bad_status_filter(self):
        with pytest.raises(ValidationError, match="Invalid package status"):
            ListPackagesHandler(FakeCatalogUnitOfWork()).handle("deleted")

    def test_empty(self):
        assert ListPackagesHandler(FakeCatalogUnitOfWork()).handle() == []


class TestShowPackage:

    def test_returns_header_and_products(self):
        uow = FakeCatalogUnitOfWork([Product(id="p1", name="Panel", price=Money.of("4500"))])
        package_id = _create(uow, "Home", 800, 1200, products=[LineItemSpec("p1", 10)])

        dto = ShowPackageHandler(uow).handle(package_id)
        assert dto.id == package_id
        assert dto.status == "active"
        assert [(p.product_id, p.product_name, p.quantity) for p in dto.products] == [
            ("p1", "Panel", 10),
        ]

    def test_deleted_product_omitted(self):
        uow = FakeCatalogUnitOfWork([
            Product(id="p1", name="Panel", price=Money.of("4500")),
            Product(id="p2", name="Inverter", price=Money.of("21000")),
        ])
        package_id = _create(
            uow, "Home", 800, 1200,
            products=[LineItemSpec("p1", 10), LineItemSpec("p2", 1)],
        )
        with uow:
            uow.products.remove("p2")
            uow.commit()

        dto = ShowPackageHandler(uow).handle(package_id)
        assert [p.product_id for p in dto.products] == ["p1"]

    def test_unknown_package(self):
        with pytest.raises(EntityNotFoundError, match="pkg-missing"):
            ShowPackageHandler(FakeCatalogUnitOfWork()).handle("pkg-missing")

"""Integration tests for the CreatePackage use case.

Uses the in-memory fake unit of work — no file I/O.
"""

from datetime import date

import pytest

from solarcat.application.create_package import CreatePackageHandler
from solarcat.application.dto import LineItemSpec, PackageSpec
from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.product import Product
from solarcat.domain.model.solar_package import PackageStatus
from solarcat.domain.model.value_objects import Money
from tests.fakes import FakeCatalogUnitOfWork


def _setup() -> tuple[CreatePackageHandler, FakeCatalogUnitOfWork]:
    uow = FakeCatalogUnitOfWork([
        Product(id="p1", name="Panel 450W", price=Money.of("4500")),
        Product(id="p2", name="Inverter 5kW", price=Money.of("21000")),
    ])
    return CreatePackageHandler(uow), uow


def _spec(**overrides) -> PackageSpec:
    fields = dict(name="Home 1000", min_bill=800, max_bill=1200, total_price=85000)
    fields.update(overrides)
    return PackageSpec(**fields)


class TestCreatePackageHappyPath:

    def test_returns_fresh_id(self):
        handler, _ = _setup()
        first = handler.handle(_spec())
        second = handler.handle(_spec())
        assert first.startswith("pkg-")
        assert first != second

    def test_persists_header_with_defaults(self):
        handler, uow = _setup()
        package_id = handler.handle(_spec(), today=date(2026, 10, 19))

        saved = uow.packages.get_by_id(package_id)
        assert saved is not None
        assert saved.status == PackageStatus.ACTIVE
        assert saved.installation_cost == Money.of(0)
        assert saved.created_date == date(2026, 10, 19)

    def test_installs_line_items(self):
        handler, uow = _setup()
        package_id = handler.handle(_spec(products=[
            LineItemSpec("p1", 10),
            LineItemSpec("p2", 1),
        ]))

        items = uow.line_items.list_for_package(package_id)
        assert [(i.product_id, i.quantity.value) for i in items] == [("p1", 10), ("p2", 1)]

    def test_duplicate_products_create_two_lines(self):
        handler, uow = _setup()
        package_id = handler.handle(_spec(products=[
            LineItemSpec("p1", 10),
            LineItemSpec("p1", 10),
        ]))

        items = uow.line_items.list_for_package(package_id)
        assert len(items) == 2
        assert items[0].id != items[1].id
        assert {(i.product_id, i.quantity.value) for i in items} == {("p1", 10)}

    def test_single_commit(self):
        handler, uow = _setup()
        handler.handle(_spec(products=[LineItemSpec("p1", 1)]))
        assert uow.commits == 1


class TestCreatePackageValidation:

    def test_missing_fields_rejected(self):
        handler, uow = _setup()
        with pytest.raises(ValidationError, match="total_price"):
            handler.handle(_spec(total_price=None))
        assert uow.commits == 0

    def test_inverted_band_rejected(self):
        handler, uow = _setup()
        with pytest.raises(ValidationError, match="exceeds maximum"):
            handler.handle(_spec(min_bill=2000))
        assert uow.packages.list_all() == []

    def test_bad_quantity_leaves_no_header(self):
        handler, uow = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_spec(products=[LineItemSpec("p1", 0)]))

        assert uow.packages.list_all() == []
        assert uow.line_items.all_rows == []
        assert uow.commits == 0

"""Unit tests for the PackageComposer domain service."""

from collections import Counter

import pytest

from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.product import Product
from solarcat.domain.model.value_objects import Money
from solarcat.domain.service.package_composer import PackageComposer
from tests.fakes import FakeCatalogUnitOfWork


def _setup() -> tuple[PackageComposer, FakeCatalogUnitOfWork]:
    uow = FakeCatalogUnitOfWork([
        Product(id="p1", name="Panel 450W", price=Money.of("4500"), image_url="panel.jpg"),
        Product(id="p2", name="Inverter 5kW", price=Money.of("21000")),
        Product(id="p3", name="Battery 10kWh", price=Money.of("60000")),
    ])
    return PackageComposer(), uow


def _content(lines) -> Counter:
    return Counter((line.product_id, line.quantity) for line in lines)


class TestSetLineItems:

    def test_installs_one_line_per_item(self):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 10), ("p2", 1)])
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert _content(lines) == Counter({("p1", 10): 1, ("p2", 1): 1})

    def test_replaces_previous_set(self):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 10), ("p2", 1)])
            composer.set_line_items(uow, "pkg-1", [("p3", 2)])
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert _content(lines) == Counter({("p3", 2): 1})

    def test_same_items_twice_gives_same_content(self):
        composer, uow = _setup()
        items = [("p1", 10), ("p2", 1)]
        with uow:
            first = composer.set_line_items(uow, "pkg-1", items)
            second = composer.set_line_items(uow, "pkg-1", items)
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert _content(lines) == Counter({("p1", 10): 1, ("p2", 1): 1})
        assert {i.id for i in first}.isdisjoint({i.id for i in second})

    def test_duplicate_products_kept_as_separate_lines(self):
        composer, uow = _setup()
        with uow:
            installed = composer.set_line_items(uow, "pkg-1", [("p1", 10), ("p1", 10)])
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert len(lines) == 2
        assert installed[0].id != installed[1].id
        assert all(line.product_id == "p1" and line.quantity == 10 for line in lines)

    def test_other_packages_untouched(self):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 1)])
            composer.set_line_items(uow, "pkg-2", [("p2", 2)])
            composer.set_line_items(uow, "pkg-1", [])

            assert composer.line_items_with_product_info(uow, "pkg-1") == []
            assert len(composer.line_items_with_product_info(uow, "pkg-2")) == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_bad_quantity_rejected_before_any_delete(self, quantity):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 10)])
            with pytest.raises(ValidationError, match="must be positive"):
                composer.set_line_items(uow, "pkg-1", [("p2", 1), ("p3", quantity)])
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert _content(lines) == Counter({("p1", 10): 1})

    def test_blank_product_id_rejected(self):
        composer, uow = _setup()
        with uow, pytest.raises(ValidationError, match="product id is required"):
            composer.set_line_items(uow, "pkg-1", [(" ", 1)])


class TestLineItemsWithProductInfo:

    def test_joins_product_fields(self):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 10)])
            (line,) = composer.line_items_with_product_info(uow, "pkg-1")

        assert line.product_name == "Panel 450W"
        assert line.unit_price == Money.of("4500")
        assert line.image_url == "panel.jpg"
        assert line.line_total == Money.of("45000")

    def test_missing_product_silently_excluded(self):
        composer, uow = _setup()
        with uow:
            composer.set_line_items(uow, "pkg-1", [("p1", 10), ("gone", 3)])
            lines = composer.line_items_with_product_info(uow, "pkg-1")

        assert [line.product_id for line in lines] == ["p1"]

    def test_unknown_package_is_empty(self):
        composer, uow = _setup()
        with uow:
            assert composer.line_items_with_product_info(uow, "pkg-x") == []


def test_delete_line_items_reports_count():
    composer, uow = _setup()
    with uow:
        composer.set_line_items(uow, "pkg-1", [("p1", 1), ("p2", 1)])
        assert composer.delete_line_items(uow, "pkg-1") == 2
        assert composer.line_items_with_product_info(uow, "pkg-1") == []

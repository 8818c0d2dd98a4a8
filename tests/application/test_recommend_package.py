"""Integration tests for the RecommendPackage use case."""

from decimal import Decimal

import pytest

from solarcat.application.create_package import CreatePackageHandler
from solarcat.application.dto import LineItemSpec, PackageSpec
from solarcat.application.recommend_package import RecommendPackageHandler
from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.product import Product
from solarcat.domain.model.value_objects import Money
from tests.fakes import FakeCatalogUnitOfWork


@pytest.fixture
def uow() -> FakeCatalogUnitOfWork:
    uow = FakeCatalogUnitOfWork([
        Product(id="p1", name="Panel 450W", price=Money.of("4500"), image_url="panel.jpg"),
        Product(id="p2", name="Inverter 5kW", price=Money.of("21000")),
    ])
    create = CreatePackageHandler(uow)
    create.handle(PackageSpec(
        name="A", min_bill=800, max_bill=1200, total_price=85000,
        products=[LineItemSpec("p1", 10), LineItemSpec("p2", 1)],
    ))
    create.handle(PackageSpec(name="B", min_bill=1000, max_bill=1500, total_price=110000))
    create.handle(PackageSpec(
        name="Hidden", min_bill=0, max_bill=100000, total_price=1, status="inactive",
    ))
    return uow


class TestRecommendPackage:

    def test_match_includes_joined_products(self, uow):
        result = RecommendPackageHandler(uow).handle("1100")

        assert result.matched
        assert result.bill_amount == Decimal("1100")
        assert result.package.name == "A"
        assert [(p.product_name, p.quantity) for p in result.package.products] == [
            ("Panel 450W", 10),
            ("Inverter 5kW", 1),
        ]
        assert result.package.products[0].unit_price == Decimal("4500")

    def test_no_match_is_not_an_error(self, uow):
        result = RecommendPackageHandler(uow).handle(50)
        assert not result.matched
        assert result.package is None

    def test_inactive_package_never_recommended(self, uow):
        assert RecommendPackageHandler(uow).handle(5000).package is None

    def test_repeated_calls_agree(self, uow):
        handler = RecommendPackageHandler(uow)
        ids = {handler.handle(1300).package.id for _ in range(3)}
        assert len(ids) == 1

    def test_read_only(self, uow):
        commits = uow.commits
        RecommendPackageHandler(uow).handle(1100)
        assert uow.commits == commits

    def test_bill_in_other_currency_is_no_match(self, uow):
        result = RecommendPackageHandler(uow, currency="USD").handle("1000")
        assert result.package is None

    @pytest.mark.parametrize("bill", ["abc", "-5", ""])
    def test_invalid_bill_rejected(self, uow, bill):
        with pytest.raises(ValidationError):
            RecommendPackageHandler(uow).handle(bill)

"""Integration tests for the AddProduct and ListProducts use cases."""

from decimal import Decimal

import pytest

from solarcat.application.add_product import AddProductHandler
from solarcat.application.list_products import ListProductsHandler
from solarcat.domain.exceptions import ValidationError
from tests.fakes import FakeCatalogUnitOfWork


def test_add_product_persists_and_returns_dto():
    uow = FakeCatalogUnitOfWork()
    dto = AddProductHandler(uow).handle(
        name="Panel 450W", sku="VUR-450W", category="solar", price="4500", stock=5,
        specs={"power": "450W"},
    )

    assert dto.id.startswith("prd-")
    assert dto.price == Decimal("4500")
    assert dto.stock_status == "lowstock"
    assert uow.products.get_by_id(dto.id).specs == {"power": "450W"}


def test_add_product_rejects_negative_price():
    uow = FakeCatalogUnitOfWork()
    with pytest.raises(ValidationError, match="cannot be negative"):
        AddProductHandler(uow).handle(name="X", sku="X", category="c", price="-1")
    assert uow.commits == 0


def test_list_products_filters():
    uow = FakeCatalogUnitOfWork()
    add = AddProductHandler(uow)
    add.handle(name="Panel", sku="P", category="solar", price=1, stock=100)
    add.handle(name="Inverter", sku="I", category="inverter", price=1)
    add.handle(name="Old Panel", sku="O", category="solar", price=1, status="archived")

    handler = ListProductsHandler(uow)
    assert {p.name for p in handler.handle(category="solar")} == {"Panel", "Old Panel"}
    assert {p.name for p in handler.handle(status="active", category="solar")} == {"Panel"}
    assert len(handler.handle()) == 3

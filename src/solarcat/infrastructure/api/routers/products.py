"""Product router — the catalog read API packages are composed from."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from solarcat.application.add_product import AddProductHandler
from solarcat.application.list_products import ListProductsHandler
from solarcat.domain.exceptions import DomainException
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.infrastructure.api.dependencies import get_currency, get_uow
from solarcat.infrastructure.api.errors import http_error
from solarcat.infrastructure.api.serializers import product_to_dict

router = APIRouter()


class ProductIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    sku: str
    category: str
    price: Decimal = Decimal("0")
    stock: int = 0
    status: str = "active"
    image_url: str | None = None
    specs: dict = {}
    images: list[str] = []


@router.get("")
def list_products(
    status: str | None = None,
    category: str | None = None,
    uow: CatalogUnitOfWork = Depends(get_uow),
):
    try:
        products = ListProductsHandler(uow).handle(status=status, category=category)
    except DomainException as exc:
        raise http_error(exc)
    return [product_to_dict(p) for p in products]


@router.post("", status_code=201)
def create_product(
    req: ProductIn,
    uow: CatalogUnitOfWork = Depends(get_uow),
    currency: str = Depends(get_currency),
):
    try:
        product = AddProductHandler(uow, currency=currency).handle(
            name=req.name,
            sku=req.sku,
            category=req.category,
            price=req.price,
            stock=req.stock,
            status=req.status,
            image_url=req.image_url,
            specs=req.specs,
            images=req.images,
        )
    except DomainException as exc:
        raise http_error(exc)
    return product_to_dict(product)

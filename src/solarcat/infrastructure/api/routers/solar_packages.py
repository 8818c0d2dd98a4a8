"""Solar package router — admin CRUD plus the public bill recommendation."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from solarcat.application.create_package import CreatePackageHandler
from solarcat.application.delete_package import DeletePackageHandler
from solarcat.application.dto import LineItemSpec, PackageSpec
from solarcat.application.list_packages import ListPackagesHandler
from solarcat.application.recommend_package import RecommendPackageHandler
from solarcat.application.show_package import ShowPackageHandler
from solarcat.application.update_package import UpdatePackageHandler
from solarcat.domain.exceptions import DomainException
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.infrastructure.api.dependencies import get_currency, get_uow
from solarcat.infrastructure.api.errors import http_error
from solarcat.infrastructure.api.serializers import package_to_dict

router = APIRouter()


class LineItemIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    quantity: int


class PackageIn(BaseModel):
    """Create/update body. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    description: str | None = None
    min_bill: Decimal | None = None
    max_bill: Decimal | None = None
    system_power: str | None = None
    total_price: Decimal | None = None
    installation_cost: Decimal | None = None
    image_url: str | None = None
    savings: str | None = None
    payback_period: str | None = None
    status: str | None = None
    products: list[LineItemIn] | None = None

    def to_spec(self) -> PackageSpec:
        return PackageSpec(
            name=self.name,
            min_bill=self.min_bill,
            max_bill=self.max_bill,
            total_price=self.total_price,
            installation_cost=self.installation_cost,
            description=self.description,
            system_power=self.system_power,
            image_url=self.image_url,
            savings=self.savings,
            payback_period=self.payback_period,
            status=self.status,
            products=(
                None
                if self.products is None
                else [LineItemSpec(p.product_id, p.quantity) for p in self.products]
            ),
        )


@router.get("")
def list_packages(
    status: str | None = None,
    uow: CatalogUnitOfWork = Depends(get_uow),
):
    """List packages ordered by minimum bill, optionally filtered by status."""
    try:
        packages = ListPackagesHandler(uow).handle(status=status)
    except DomainException as exc:
        raise http_error(exc)
    return [package_to_dict(p, with_products=False) for p in packages]


@router.get("/recommend/{bill_amount}")
def recommend_package(
    bill_amount: str,
    uow: CatalogUnitOfWork = Depends(get_uow),
    currency: str = Depends(get_currency),
):
    """Pick the active package whose bill band best fits a monthly bill."""
    try:
        result = RecommendPackageHandler(uow, currency=currency).handle(bill_amount)
    except DomainException as exc:
        raise http_error(exc)

    if not result.matched:
        return {"success": False, "message": "No suitable package found"}
    return {"success": True, "package": package_to_dict(result.package)}


@router.get("/{package_id}")
def get_package(package_id: str, uow: CatalogUnitOfWork = Depends(get_uow)):
    try:
        package = ShowPackageHandler(uow).handle(package_id)
    except DomainException as exc:
        raise http_error(exc)
    return package_to_dict(package)


@router.post("", status_code=201)
def create_package(
    req: PackageIn,
    uow: CatalogUnitOfWork = Depends(get_uow),
    currency: str = Depends(get_currency),
):
    try:
        package_id = CreatePackageHandler(uow, currency=currency).handle(req.to_spec())
    except DomainException as exc:
        raise http_error(exc)
    return {"success": True, "id": package_id}


@router.put("/{package_id}")
def update_package(
    package_id: str,
    req: PackageIn,
    uow: CatalogUnitOfWork = Depends(get_uow),
    currency: str = Depends(get_currency),
):
    """Replace every field of a package; a product list replaces its line items."""
    try:
        UpdatePackageHandler(uow, currency=currency).handle(package_id, req.to_spec())
    except DomainException as exc:
        raise http_error(exc)
    return {"success": True}


@router.delete("/{package_id}")
def delete_package(package_id: str, uow: CatalogUnitOfWork = Depends(get_uow)):
    try:
        DeletePackageHandler(uow).handle(package_id)
    except DomainException as exc:
        raise http_error(exc)
    return {"success": True}

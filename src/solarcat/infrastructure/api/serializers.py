"""DTO → JSON-ready dict conversion for HTTP responses."""

from __future__ import annotations

from decimal import Decimal

from solarcat.application.dto import PackageDTO, PackageLineDTO, ProductDTO


def _number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def line_to_dict(line: PackageLineDTO) -> dict:
    return {
        "id": line.id,
        "product_id": line.product_id,
        "quantity": line.quantity,
        "product_name": line.product_name,
        "unit_price": _number(line.unit_price),
        "line_total": _number(line.line_total),
        "image_url": line.image_url,
    }


def package_to_dict(package: PackageDTO, with_products: bool = True) -> dict:
    data = {
        "id": package.id,
        "name": package.name,
        "description": package.description,
        "min_bill": _number(package.min_bill),
        "max_bill": _number(package.max_bill),
        "system_power": package.system_power,
        "total_price": _number(package.total_price),
        "installation_cost": _number(package.installation_cost),
        "currency": package.currency,
        "image_url": package.image_url,
        "savings": package.savings,
        "payback_period": package.payback_period,
        "status": package.status,
        "created_date": package.created_date,
    }
    if with_products:
        data["products"] = [line_to_dict(line) for line in package.products]
    return data


def product_to_dict(product: ProductDTO) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "sku": product.sku,
        "category": product.category,
        "price": _number(product.price),
        "currency": product.currency,
        "stock": product.stock,
        "stock_status": product.stock_status,
        "status": product.status,
        "image_url": product.image_url,
        "specs": product.specs,
        "images": product.images,
    }

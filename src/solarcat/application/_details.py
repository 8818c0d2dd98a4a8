"""Shared input mapping for the create and update use cases."""

from __future__ import annotations

from solarcat.application.dto import PackageSpec
from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.solar_package import PackageDetails


def details_from_spec(spec: PackageSpec, currency: str) -> PackageDetails:
    return PackageDetails.parse(
        name=spec.name,
        min_bill=spec.min_bill,
        max_bill=spec.max_bill,
        total_price=spec.total_price,
        installation_cost=spec.installation_cost,
        description=spec.description,
        system_power=spec.system_power,
        image_url=spec.image_url,
        savings=spec.savings,
        payback_period=spec.payback_period,
        status=spec.status,
        currency=currency,
    )


def line_pairs_from_spec(spec: PackageSpec) -> list[tuple[str, int]] | None:
    if spec.products is None:
        return None
    if not isinstance(spec.products, list):
        raise ValidationError("Products must be a list of {product_id, quantity}")
    return [(item.product_id, item.quantity) for item in spec.products]

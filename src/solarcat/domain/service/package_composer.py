"""Domain service: Package Composer.

Keeps a package's line items consistent with the product list most
recently supplied for it.  Every operation runs inside the caller's
unit of work, so a replacement is either fully visible after commit or
not visible at all.

The two-phase approach (validate-then-mutate) ensures a bad quantity
is rejected before any existing line item is removed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from solarcat.domain.exceptions import ValidationError
from solarcat.domain.model.solar_package import (
    LINE_ITEM_ID_PREFIX,
    PackageLineItem,
    PackageLineView,
)
from solarcat.domain.model.value_objects import Quantity, new_id
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork

logger = logging.getLogger(__name__)


class PackageComposer:

    def set_line_items(
        self,
        uow: CatalogUnitOfWork,
        package_id: str,
        items: Sequence[tuple[str, int]],
    ) -> list[PackageLineItem]:
        """Replace the package's line items with *items*.

        *items* is a sequence of ``(product_id, quantity)`` pairs.
        Duplicate product ids are kept as separate line items.
        """
        # Phase 1: validate every pair
        validated: list[tuple[str, Quantity]] = []
        for product_id, quantity in items:
            if not product_id or not str(product_id).strip():
                raise ValidationError("Line item product id is required")
            validated.append((str(product_id).strip(), Quantity(quantity)))

        # Phase 2: delete-all, insert-new
        removed = uow.line_items.delete_for_package(package_id)
        installed: list[PackageLineItem] = []
        for product_id, quantity in validated:
            item = PackageLineItem(
                id=new_id(LINE_ITEM_ID_PREFIX),
                package_id=package_id,
                product_id=product_id,
                quantity=quantity,
            )
            uow.line_items.add(item)
            installed.append(item)

        logger.info(
            "Package %s line items replaced (%d removed, %d installed)",
            package_id, removed, len(installed),
        )
        return installed

    def line_items_with_product_info(
        self,
        uow: CatalogUnitOfWork,
        package_id: str,
    ) -> list[PackageLineView]:
        """Join the package's line items with their products.

        Line items whose product no longer exists are skipped.
        """
        views: list[PackageLineView] = []
        for item in uow.line_items.list_for_package(package_id):
            product = uow.products.get_by_id(item.product_id)
            if product is None:
                logger.debug(
                    "Skipping line item %s: product %s not found",
                    item.id, item.product_id,
                )
                continue
            views.append(
                PackageLineView(
                    id=item.id,
                    package_id=item.package_id,
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    product_name=product.name,
                    unit_price=product.price,
                    image_url=product.image_url,
                )
            )
        return views

    def delete_line_items(self, uow: CatalogUnitOfWork, package_id: str) -> int:
        return uow.line_items.delete_for_package(package_id)

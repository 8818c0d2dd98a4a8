"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.infrastructure.bootstrap import catalog_unit_of_work
from solarcat.infrastructure.config import settings


def get_uow() -> CatalogUnitOfWork:
    """A fresh unit of work per request. Tests override this dependency."""
    return catalog_unit_of_work()


def get_currency() -> str:
    return settings.currency

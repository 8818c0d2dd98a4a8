"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from solarcat.infrastructure.config import settings
from solarcat.infrastructure.persistence.json_unit_of_work import (
    JsonCatalogUnitOfWork,
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def catalog_unit_of_work() -> JsonCatalogUnitOfWork:
    return JsonCatalogUnitOfWork(settings.catalog_path)

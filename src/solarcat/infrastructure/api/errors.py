"""Translation of domain errors into HTTP errors."""

from __future__ import annotations

import logging

from fastapi import HTTPException

from solarcat.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def http_error(exc: DomainException) -> HTTPException:
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, StorageError):
        logger.error("Storage failure: %s", exc)
        return HTTPException(status_code=500, detail="Storage failure")
    logger.error("Unhandled domain error: %s", exc)
    return HTTPException(status_code=500, detail="Internal error")

from __future__ import annotations

import logging

from fastapi import HTTPException

from app.application.exceptions import (
    BookingEngineError,
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: BookingEngineError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail={"message": exc.message, **exc.details})
    if isinstance(exc, InvalidArgumentError):
        return HTTPException(status_code=400, detail={"message": exc.message, **exc.details})
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=409, detail={"message": exc.message, **exc.details})
    # Storage failures: log everything, expose nothing.
    logger.error("Internal booking engine failure", extra={"error": exc.message})
    return HTTPException(status_code=500, detail="Internal server error")

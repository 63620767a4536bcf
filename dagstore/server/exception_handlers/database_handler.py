"""
Database Exception Handler.

Constraint checks belong to the database engine. When it rejects a write
(duplicate primary key, reference to a missing row, NULL in a NOT NULL
column, delete of a still-referenced row) the ``IntegrityError`` reaches this
handler and is reported as 409 Conflict with the driver's message.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from dagstore.core.logging_config import get_logger

logger = get_logger(__name__)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """
    Translate an engine constraint violation into a 409 response.

    Args:
        request: The HTTP request that caused the exception
        exc: The IntegrityError raised while flushing

    Returns:
        JSONResponse with status 409
    """
    reason = str(exc.orig) if exc.orig is not None else str(exc)
    logger.info(f"Constraint violation in {request.method} {request.url.path}: {reason}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": "Integrity constraint violated",
            "error_type": type(exc).__name__,
            "reason": reason,
        },
    )

"""
Global Exception Handler for FastAPI Application.

Last-resort handler for the dags, nodes and edges API. Constraint violations
(``IntegrityError``) are answered with 409 by ``database_handler`` and never
reach this handler, so anything logged here is a server-side fault rather than
a bad reference sent by the client.
"""

import traceback

from fastapi import Request
from fastapi.responses import JSONResponse

from dagstore.core.logging_config import get_logger

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected failure and answer 500.

    The response carries only the error ID and exception type; the message
    and traceback stay in the server log under the same ID.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )

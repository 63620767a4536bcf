"""
Exception handlers for the dagstore server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI
from sqlalchemy.exc import IntegrityError

from dagstore.core.logging_config import get_logger

from .database_handler import integrity_error_handler
from .global_handler import global_exception_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "global_exception_handler",
    "integrity_error_handler",
    "setup_exception_handlers",
]

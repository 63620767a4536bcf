"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
dagstore server, including:
- API endpoint tracing
- Database operation monitoring
- Request timing records

The initialization is conditional: nothing is sent unless ``LOGFIRE_ENABLED``
is true and ``LOGFIRE_TOKEN`` is set. Both are read through ``settings.logfire``
so values from the .env file apply as well.
"""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from dagstore.server.core.config import settings

logger = logging.getLogger(__name__)

# Logfire configuration from settings
_config = settings.logfire
LOGFIRE_ENABLED = _config.enabled
LOGFIRE_TOKEN = _config.token
LOGFIRE_ENVIRONMENT = _config.environment
LOGFIRE_SERVICE_NAME = _config.service_name

# Feature flags
LOGFIRE_TRACE_SQLALCHEMY = _config.trace_sqlalchemy
LOGFIRE_TRACE_FASTAPI = _config.trace_fastapi

_logfire_active = False


def is_logfire_active() -> bool:
    """Whether Logfire has been configured for this process."""
    return _logfire_active


def initialize_logfire(app: Optional[FastAPI] = None, engine: Optional[AsyncEngine] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application to instrument (optional).
        engine: Async engine whose queries should be traced (optional).

    Returns:
        True when Logfire was configured, False when monitoring stays off.
    """
    global _logfire_active

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    from dagstore import __version__

    logfire.configure(
        token=LOGFIRE_TOKEN,
        service_name=LOGFIRE_SERVICE_NAME,
        service_version=__version__,
        environment=LOGFIRE_ENVIRONMENT,
    )
    _logfire_active = True

    if LOGFIRE_TRACE_SQLALCHEMY and engine is not None:
        logfire.instrument_sqlalchemy(engine=engine.sync_engine)
        logger.info("Logfire: SQLAlchemy instrumentation enabled")

    if LOGFIRE_TRACE_FASTAPI and app is not None:
        logfire.instrument_fastapi(app=app)
        logger.info("Logfire: FastAPI instrumentation enabled")

    logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Record an API request with its timing.

    Sent to Logfire when it is active, otherwise written to the module logger
    at DEBUG level.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if _logfire_active:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
        return
    logger.debug(f"{method} {path} -> {status_code} in {duration_ms:.2f}ms")

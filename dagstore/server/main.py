"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dagstore import __version__
from dagstore.core.database import engine, init_db
from dagstore.core.logging_config import get_logger, setup_logging
from dagstore.core.monitoring import initialize_logfire

from .api.v1 import dags, edges, health, nodes
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the database is prepared (tables are only created when
    ``DAGSTORE_AUTO_CREATE_TABLES`` is set); on shutdown the engine's
    connection pool is released.
    """
    logger.info("Starting up dagstore server...")
    await init_db()

    try:
        yield
    finally:
        logger.info("Shutting down dagstore server...")
        await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    dagstore API

    Stores directed acyclic graph topology: named graphs, their nodes and the
    directed edges between them. Integrity is enforced by the database only.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app=app, engine=engine)

app.include_router(health.router, tags=["health"])
app.include_router(dags.router, prefix=f"{constant.API_V1_STR}/dags", tags=["dags"])
app.include_router(nodes.router, prefix=f"{constant.API_V1_STR}/nodes", tags=["nodes"])
app.include_router(edges.router, prefix=f"{constant.API_V1_STR}/edges", tags=["edges"])


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    logger.info(f"Server running at http://{settings.server_host}:{settings.server_port}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    run()

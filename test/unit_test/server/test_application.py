"""
Unit tests for FastAPI application assembly and lifespan management.

Tests verify router registration, middleware order, the startup and shutdown
hooks, and the console entry point.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dagstore.server import main
from dagstore.server.middleware import LogfireMiddleware


class TestAppAssembly:
    """Test the module-level application object."""

    def test_routes_registered(self):
        paths = set(main.app.openapi()["paths"])

        assert {
            "/health",
            "/version",
            "/api/v1/dags",
            "/api/v1/dags/{dag_id}",
            "/api/v1/dags/{dag_id}/nodes",
            "/api/v1/dags/{dag_id}/edges",
            "/api/v1/nodes",
            "/api/v1/nodes/{node_id}",
            "/api/v1/edges",
            "/api/v1/edges/{edge_id}",
        } <= paths

    def test_middleware_installed(self):
        classes = [m.cls for m in main.app.user_middleware]

        assert CORSMiddleware in classes
        assert LogfireMiddleware in classes

    def test_docs_under_api_prefix(self):
        assert main.app.openapi_url == "/api/v1/openapi.json"
        assert main.app.docs_url == "/api/v1/docs"


class TestLifespan:
    """Test application startup and shutdown events."""

    async def test_startup_initializes_database_and_shutdown_disposes(self):
        with (
            patch.object(main, "init_db", new=AsyncMock()) as mock_init_db,
            patch.object(main, "engine") as mock_engine,
        ):
            mock_engine.dispose = AsyncMock()

            async with main.lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()
                mock_engine.dispose.assert_not_awaited()

            mock_engine.dispose.assert_awaited_once()

    async def test_engine_disposed_when_app_fails(self):
        with (
            patch.object(main, "init_db", new=AsyncMock()),
            patch.object(main, "engine") as mock_engine,
        ):
            mock_engine.dispose = AsyncMock()

            with pytest.raises(RuntimeError, match="serving failed"):
                async with main.lifespan(FastAPI()):
                    raise RuntimeError("serving failed")

            mock_engine.dispose.assert_awaited_once()

    async def test_startup_failure_propagates(self):
        with patch.object(main, "init_db", new=AsyncMock(side_effect=ConnectionError("db down"))):
            with pytest.raises(ConnectionError, match="db down"):
                async with main.lifespan(FastAPI()):
                    pass


class TestRun:
    """Test the console entry point."""

    def test_run_uses_configured_host_and_port(self, monkeypatch):
        monkeypatch.setattr(main.settings, "server_host", "0.0.0.0")
        monkeypatch.setattr(main.settings, "server_port", 4321)

        with patch.object(main.uvicorn, "run") as mock_run:
            main.run()

        mock_run.assert_called_once_with(main.app, host="0.0.0.0", port=4321, log_config=None)

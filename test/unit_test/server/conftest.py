from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client whose requests all run on the test session.

    ``ASGITransport`` does not send lifespan events, so the application's
    startup hook never touches the global engine.
    """
    from dagstore.core.database import get_session
    from dagstore.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def dag(client: AsyncClient) -> dict:
    """A DAG created through the API."""
    response = await client.post("/api/v1/dags", json={"name": "pipeline"})
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def two_nodes(client: AsyncClient, dag: dict) -> tuple[dict, dict]:
    """Nodes "start" and "end" owned by ``dag``."""
    created = []
    for label in ("start", "end"):
        response = await client.post("/api/v1/nodes", json={"dag_id": dag["id"], "label": label})
        assert response.status_code == 201
        created.append(response.json())
    return created[0], created[1]

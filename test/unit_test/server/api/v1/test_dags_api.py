"""
Unit tests for DAG API endpoints.

Tests cover:
- Creating DAGs and server-side id generation
- Lookup by id and listing with pagination
- Listing the nodes and edges a DAG owns
- 404 for unknown graphs and 422 for malformed input
"""

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCreateDag:
    """Test DAG creation endpoint."""

    async def test_create_dag_success(self, client: AsyncClient):
        response = await client.post("/api/v1/dags", json={"name": "nightly build"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "nightly build"
        assert uuid.UUID(data["id"]).version == 4

    async def test_create_dag_ignores_client_id(self, client: AsyncClient):
        client_id = str(uuid.uuid4())

        response = await client.post("/api/v1/dags", json={"id": client_id, "name": "x"})

        assert response.status_code == 201
        assert response.json()["id"] != client_id

    async def test_create_dag_empty_name(self, client: AsyncClient):
        response = await client.post("/api/v1/dags", json={"name": ""})

        assert response.status_code == 201
        assert response.json()["name"] == ""

    @pytest.mark.parametrize("payload", [{}, {"name": None}, {"name": 12}])
    async def test_create_dag_invalid_payload(self, client: AsyncClient, payload):
        response = await client.post("/api/v1/dags", json=payload)

        assert response.status_code == 422


class TestGetDag:
    """Test DAG lookup endpoints."""

    async def test_get_dag(self, client: AsyncClient, dag: dict):
        response = await client.get(f"/api/v1/dags/{dag['id']}")

        assert response.status_code == 200
        assert response.json() == dag

    async def test_get_unknown_dag(self, client: AsyncClient):
        missing = uuid.uuid4()

        response = await client.get(f"/api/v1/dags/{missing}")

        assert response.status_code == 404
        assert str(missing) in response.json()["detail"]

    async def test_get_dag_malformed_id(self, client: AsyncClient):
        response = await client.get("/api/v1/dags/not-a-uuid")

        assert response.status_code == 422


class TestListDags:
    """Test DAG listing endpoint."""

    async def test_list_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/dags")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_ordered_by_name(self, client: AsyncClient):
        for name in ["b", "c", "a"]:
            await client.post("/api/v1/dags", json={"name": name})

        response = await client.get("/api/v1/dags")

        assert [d["name"] for d in response.json()] == ["a", "b", "c"]

    async def test_list_pagination(self, client: AsyncClient):
        for name in ["a", "b", "c"]:
            await client.post("/api/v1/dags", json={"name": name})

        response = await client.get("/api/v1/dags", params={"limit": 1, "offset": 2})

        assert [d["name"] for d in response.json()] == ["c"]

    @pytest.mark.parametrize("params", [{"limit": 0}, {"offset": -1}])
    async def test_list_rejects_bad_pagination(self, client: AsyncClient, params):
        response = await client.get("/api/v1/dags", params=params)

        assert response.status_code == 422


class TestDagChildren:
    """Test listing nodes and edges owned by a DAG."""

    async def test_list_dag_nodes(self, client: AsyncClient, dag: dict, two_nodes):
        await client.post("/api/v1/nodes", json={"label": "orphan"})

        response = await client.get(f"/api/v1/dags/{dag['id']}/nodes")

        assert response.status_code == 200
        assert {n["id"] for n in response.json()} == {two_nodes[0]["id"], two_nodes[1]["id"]}

    async def test_list_dag_edges_scenario(self, client: AsyncClient, dag: dict, two_nodes):
        start, end = two_nodes
        owned = await client.post(
            "/api/v1/edges", json={"source": start["id"], "target": end["id"], "dag_id": dag["id"]}
        )
        await client.post("/api/v1/edges", json={"source": end["id"], "target": start["id"]})

        response = await client.get(f"/api/v1/dags/{dag['id']}/edges")

        assert response.status_code == 200
        assert response.json() == [owned.json()]

    @pytest.mark.parametrize("child", ["nodes", "edges"])
    async def test_children_of_unknown_dag(self, client: AsyncClient, child):
        response = await client.get(f"/api/v1/dags/{uuid.uuid4()}/{child}")

        assert response.status_code == 404

    @pytest.mark.parametrize("child", ["nodes", "edges"])
    async def test_children_of_empty_dag(self, client: AsyncClient, dag: dict, child):
        response = await client.get(f"/api/v1/dags/{dag['id']}/{child}")

        assert response.status_code == 200
        assert response.json() == []

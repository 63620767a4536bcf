"""Test configuration for database unit tests.

Provides a populated graph on top of the in-memory engine from the root
conftest: one DAG named "pipeline" with a "start" and an "end" node.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from dagstore.core.database.entities import Dag, Node
from dagstore.core.database.repositories import DagStoreRepos, build_repos


@dataclass(frozen=True)
class PipelineIds:
    dag_id: uuid.UUID
    start_id: uuid.UUID
    end_id: uuid.UUID


@pytest.fixture
def repos(session: AsyncSession) -> DagStoreRepos:
    """All repositories bound to the test session."""
    return build_repos(session)


@pytest_asyncio.fixture
async def pipeline(repos: DagStoreRepos) -> PipelineIds:
    """Persist Dag "pipeline" with nodes "start" and "end" and return their ids."""
    dag = await repos.dags.create(Dag(name="pipeline"))
    start = await repos.nodes.create(Node(dag_id=dag.id, label="start"))
    end = await repos.nodes.create(Node(dag_id=dag.id, label="end"))
    return PipelineIds(dag_id=dag.id, start_id=start.id, end_id=end.id)

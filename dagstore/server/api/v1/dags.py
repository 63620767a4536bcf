"""
DAG Endpoints.

Create and look up named graphs, and list the nodes and edges a graph owns.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from dagstore.core.database.entities import Dag
from dagstore.core.logging_config import get_logger
from dagstore.core.models.io import DagCreate, DagRead, EdgeRead, NodeRead
from dagstore.server.services.deps import (
    DagRepositoryDep,
    EdgeRepositoryDep,
    NodeRepositoryDep,
)

logger = get_logger(__name__)

router = APIRouter()


async def _require_dag(dag_id: uuid.UUID, dags: DagRepositoryDep) -> Dag:
    dag = await dags.get_by_id(dag_id)
    if dag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"DAG {dag_id} not found")
    return dag


@router.post(
    "",
    response_model=DagRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create DAG",
    description="Create a new named graph. The identifier is generated by the server.",
    responses={
        201: {"description": "DAG created successfully"},
        409: {"description": "Rejected by a database constraint"},
    },
)
async def create_dag(payload: DagCreate, dags: DagRepositoryDep) -> DagRead:
    """
    Create a DAG.

    - **name**: Human-readable graph name.
    """
    dag = await dags.create(Dag(name=payload.name))
    logger.info(f"Created DAG {dag.id} ({dag.name})")
    return DagRead.model_validate(dag)


@router.get(
    "",
    response_model=list[DagRead],
    summary="List DAGs",
    description="Retrieve all graphs ordered by name.",
)
async def list_dags(
    dags: DagRepositoryDep,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[DagRead]:
    """List DAGs with optional pagination."""
    rows = await dags.list(limit=limit, offset=offset)
    logger.debug(f"Retrieved {len(rows)} DAGs (limit={limit}, offset={offset})")
    return [DagRead.model_validate(row) for row in rows]


@router.get(
    "/{dag_id}",
    response_model=DagRead,
    summary="Get DAG",
    responses={404: {"description": "DAG not found"}},
)
async def get_dag(dag_id: uuid.UUID, dags: DagRepositoryDep) -> DagRead:
    """Get a DAG by its identifier."""
    return DagRead.model_validate(await _require_dag(dag_id, dags))


@router.get(
    "/{dag_id}/nodes",
    response_model=list[NodeRead],
    summary="List DAG Nodes",
    description="Retrieve the nodes whose dag_id is this graph.",
    responses={404: {"description": "DAG not found"}},
)
async def list_dag_nodes(dag_id: uuid.UUID, dags: DagRepositoryDep, nodes: NodeRepositoryDep) -> list[NodeRead]:
    """List the nodes owned by a DAG."""
    await _require_dag(dag_id, dags)
    return [NodeRead.model_validate(row) for row in await nodes.list_by_dag(dag_id)]


@router.get(
    "/{dag_id}/edges",
    response_model=list[EdgeRead],
    summary="List DAG Edges",
    description="Retrieve the edges whose dag_id is this graph. Endpoint ownership is not considered.",
    responses={404: {"description": "DAG not found"}},
)
async def list_dag_edges(dag_id: uuid.UUID, dags: DagRepositoryDep, edges: EdgeRepositoryDep) -> list[EdgeRead]:
    """List the edges owned by a DAG."""
    await _require_dag(dag_id, dags)
    return [EdgeRead.model_validate(row) for row in await edges.list_by_dag(dag_id)]

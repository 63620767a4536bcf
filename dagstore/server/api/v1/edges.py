"""
Edge Endpoints.

Edges are stored as given: no cycle, self loop, duplicate or same-DAG check
is performed before the insert.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from dagstore.core.database.entities import Edge
from dagstore.core.logging_config import get_logger
from dagstore.core.models.io import EdgeCreate, EdgeRead
from dagstore.server.services.deps import EdgeRepositoryDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EdgeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Edge",
    description="Create a directed edge. Any reference that matches no row is rejected by the database.",
    responses={
        201: {"description": "Edge created successfully"},
        409: {"description": "Rejected by a database constraint"},
    },
)
async def create_edge(payload: EdgeCreate, edges: EdgeRepositoryDep) -> EdgeRead:
    """
    Create an edge.

    - **source**: Tail node, may be null.
    - **target**: Head node, may be null.
    - **dag_id**: Owning DAG, may be null.
    """
    edge = await edges.create(Edge(source=payload.source, target=payload.target, dag_id=payload.dag_id))
    logger.info(f"Created edge {edge.id}: {edge.source} -> {edge.target} in DAG {edge.dag_id}")
    return EdgeRead.model_validate(edge)


@router.get(
    "",
    response_model=list[EdgeRead],
    summary="List Edges",
    description="Retrieve edges, optionally filtered by owning DAG, source node or target node.",
)
async def list_edges(
    edges: EdgeRepositoryDep,
    dag_id: Optional[uuid.UUID] = None,
    source: Optional[uuid.UUID] = None,
    target: Optional[uuid.UUID] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[EdgeRead]:
    """List edges filtered by owning DAG and endpoints, with pagination."""
    rows = await edges.list(limit=limit, offset=offset, filters={"dag_id": dag_id, "source": source, "target": target})
    return [EdgeRead.model_validate(row) for row in rows]


@router.get(
    "/{edge_id}",
    response_model=EdgeRead,
    summary="Get Edge",
    responses={404: {"description": "Edge not found"}},
)
async def get_edge(edge_id: uuid.UUID, edges: EdgeRepositoryDep) -> EdgeRead:
    """Get an edge by its identifier."""
    edge = await edges.get_by_id(edge_id)
    if edge is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Edge {edge_id} not found")
    return EdgeRead.model_validate(edge)

"""
Node Endpoints.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from dagstore.core.database.entities import Node
from dagstore.core.logging_config import get_logger
from dagstore.core.models.io import NodeCreate, NodeRead
from dagstore.server.services.deps import NodeRepositoryDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=NodeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Node",
    description="Create a node, optionally owned by a DAG. A dag_id that matches no DAG is rejected by the database.",
    responses={
        201: {"description": "Node created successfully"},
        409: {"description": "Rejected by a database constraint"},
    },
)
async def create_node(payload: NodeCreate, nodes: NodeRepositoryDep) -> NodeRead:
    """
    Create a node.

    - **dag_id**: Owning DAG, may be omitted or null.
    - **label**: Node label.
    """
    node = await nodes.create(Node(dag_id=payload.dag_id, label=payload.label))
    logger.info(f"Created node {node.id} in DAG {node.dag_id}")
    return NodeRead.model_validate(node)


@router.get(
    "",
    response_model=list[NodeRead],
    summary="List Nodes",
    description="Retrieve nodes, optionally only those owned by one DAG.",
)
async def list_nodes(
    nodes: NodeRepositoryDep,
    dag_id: Optional[uuid.UUID] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[NodeRead]:
    """List nodes with optional DAG filter and pagination."""
    rows = await nodes.list(limit=limit, offset=offset, filters={"dag_id": dag_id})
    return [NodeRead.model_validate(row) for row in rows]


@router.get(
    "/{node_id}",
    response_model=NodeRead,
    summary="Get Node",
    responses={404: {"description": "Node not found"}},
)
async def get_node(node_id: uuid.UUID, nodes: NodeRepositoryDep) -> NodeRead:
    """Get a node by its identifier."""
    node = await nodes.get_by_id(node_id)
    if node is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Node {node_id} not found")
    return NodeRead.model_validate(node)

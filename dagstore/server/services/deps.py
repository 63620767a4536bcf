"""
Repository Dependencies.

Provides request-scoped repositories for API endpoints. Every repository
resolved during one request shares the same session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dagstore.core.database import get_session
from dagstore.core.database.repositories import (
    DagRepository,
    EdgeRepository,
    NodeRepository,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_dag_repository(session: SessionDep) -> DagRepository:
    return DagRepository(session)


def get_node_repository(session: SessionDep) -> NodeRepository:
    return NodeRepository(session)


def get_edge_repository(session: SessionDep) -> EdgeRepository:
    return EdgeRepository(session)


DagRepositoryDep = Annotated[DagRepository, Depends(get_dag_repository)]
NodeRepositoryDep = Annotated[NodeRepository, Depends(get_node_repository)]
EdgeRepositoryDep = Annotated[EdgeRepository, Depends(get_edge_repository)]

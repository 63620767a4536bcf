"""
Edge repository.

Data access for the ``edges`` table. Lookups by DAG use the edge's own
``dag_id`` column, not the DAG of its endpoints; the two may differ.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.edges import Edge
from .base import AsyncBaseRepository, QueryBuilder


class EdgeRepository(AsyncBaseRepository[Edge]):
    """Repository for edge data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Edge)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Edge]:
        """List edges.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (dag_id, source, target)

        Returns:
            List of Edge instances
        """
        stmt = select(Edge).order_by(Edge.id)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Edge, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_dag(self, dag_id: uuid.UUID) -> List[Edge]:
        """Get all edges whose ``dag_id`` matches.

        Args:
            dag_id: Owning DAG identifier

        Returns:
            List of Edge instances
        """
        stmt = select(Edge).where(Edge.dag_id == dag_id).order_by(Edge.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_node(self, node_id: uuid.UUID) -> List[Edge]:
        """Get all edges touching a node, incoming or outgoing.

        A self loop on the node is returned once.

        Args:
            node_id: Node identifier

        Returns:
            List of Edge instances
        """
        stmt = select(Edge).where(or_(Edge.source == node_id, Edge.target == node_id)).order_by(Edge.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

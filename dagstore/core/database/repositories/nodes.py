"""
Node repository.

Data access for the ``nodes`` table, including lookups by owning DAG.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.nodes import Node
from .base import AsyncBaseRepository, QueryBuilder


class NodeRepository(AsyncBaseRepository[Node]):
    """Repository for node data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Node)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Node]:
        """List nodes ordered by label.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (dag_id, label)

        Returns:
            List of Node instances
        """
        stmt = select(Node).order_by(Node.label, Node.id)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Node, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_dag(self, dag_id: uuid.UUID) -> List[Node]:
        """Get all nodes owned by a DAG.

        Nodes with a NULL ``dag_id`` are never returned.

        Args:
            dag_id: Owning DAG identifier

        Returns:
            List of Node instances
        """
        stmt = select(Node).where(Node.dag_id == dag_id).order_by(Node.label, Node.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

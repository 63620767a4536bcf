"""
DAG repository.

Data access for the ``dags`` table.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.dags import Dag
from .base import AsyncBaseRepository, QueryBuilder


class DagRepository(AsyncBaseRepository[Dag]):
    """Repository for DAG data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Dag)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Dag]:
        """List DAGs ordered by name.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (name)

        Returns:
            List of Dag instances
        """
        stmt = select(Dag).order_by(Dag.name, Dag.id)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Dag, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

"""
Repository layer.

One repository per table, all sharing the ``AsyncBaseRepository`` contract,
plus ``DagStoreRepos``, a bundle of the three bound to a single session.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import AsyncBaseRepository, QueryBuilder
from .dags import DagRepository
from .edges import EdgeRepository
from .nodes import NodeRepository


@dataclass(frozen=True)
class DagStoreRepos:
    """Convenience bundle of all repositories for dependency injection."""

    dags: DagRepository
    nodes: NodeRepository
    edges: EdgeRepository


def build_repos(session: AsyncSession) -> DagStoreRepos:
    """Build a ``DagStoreRepos`` sharing one session.

    Args:
        session: Async session all repositories operate on

    Returns:
        Bundle containing all repository instances
    """
    return DagStoreRepos(
        dags=DagRepository(session),
        nodes=NodeRepository(session),
        edges=EdgeRepository(session),
    )


__all__ = [
    "AsyncBaseRepository",
    "DagRepository",
    "DagStoreRepos",
    "EdgeRepository",
    "NodeRepository",
    "QueryBuilder",
    "build_repos",
]

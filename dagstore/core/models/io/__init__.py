"""
I/O models for API requests and responses.

These schemas are separate from the entity models so the HTTP contract can
evolve independently of the table definitions.
"""

from .dags import DagCreate, DagRead
from .edges import EdgeCreate, EdgeRead
from .nodes import NodeCreate, NodeRead

__all__ = [
    "DagCreate",
    "DagRead",
    "EdgeCreate",
    "EdgeRead",
    "NodeCreate",
    "NodeRead",
]

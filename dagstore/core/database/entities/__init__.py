"""
Database entity models.

Each module maps exactly one table:

- dags: named graphs
- nodes: graph vertices, optionally owned by a DAG
- edges: directed edges between nodes, optionally owned by a DAG
"""

from .dags import Dag
from .edges import Edge
from .nodes import Node

__all__ = [
    "Dag",
    "Edge",
    "Node",
]

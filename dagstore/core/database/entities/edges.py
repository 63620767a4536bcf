"""
Edge entity model.

An edge points from ``source`` to ``target`` and separately records the DAG
it belongs to. All three references are nullable and independent: the table
accepts self loops, duplicate edges, cycles, and endpoints that belong to a
different DAG than the edge itself.
"""

import uuid
from typing import Optional

from sqlalchemy import Uuid
from sqlmodel import Field

from ..base import Base


class Edge(Base, table=True):
    """Entity for a directed edge between two nodes.

    Table: edges
    """

    __tablename__ = "edges"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, sa_type=Uuid)
    source: Optional[uuid.UUID] = Field(default=None, sa_type=Uuid, foreign_key="nodes.id", description="Tail node")
    target: Optional[uuid.UUID] = Field(default=None, sa_type=Uuid, foreign_key="nodes.id", description="Head node")
    dag_id: Optional[uuid.UUID] = Field(default=None, sa_type=Uuid, foreign_key="dags.id", description="Owning DAG")

    def __repr__(self) -> str:
        return f"Edge(id={self.id}, source={self.source}, target={self.target}, dag_id={self.dag_id})"

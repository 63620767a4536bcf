"""
Node entity model.

The owning DAG reference is nullable, so a node may exist without a graph.
"""

import uuid
from typing import Optional

from sqlalchemy import Text, Uuid
from sqlmodel import Field

from ..base import Base


class Node(Base, table=True):
    """Entity for a vertex of a graph.

    Table: nodes
    """

    __tablename__ = "nodes"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, sa_type=Uuid)
    dag_id: Optional[uuid.UUID] = Field(default=None, sa_type=Uuid, foreign_key="dags.id", description="Owning DAG")
    label: str = Field(sa_type=Text, description="Node label")

    def __repr__(self) -> str:
        return f"Node(id={self.id}, dag_id={self.dag_id}, label={self.label})"

"""
DAG entity model.

A DAG is a named container for nodes and edges. The table only stores its
identifier and a human-readable name; nothing about acyclicity is recorded
or enforced here.
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlmodel import Field

from ..base import Base


class Dag(Base, table=True):
    """Entity for a named graph.

    Table: dags
    """

    __tablename__ = "dags"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, sa_type=Uuid)
    name: str = Field(sa_type=Text, description="Human-readable graph name")

    def __repr__(self) -> str:
        return f"Dag(id={self.id}, name={self.name})"

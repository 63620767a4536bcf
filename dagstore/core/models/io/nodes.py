"""
Node I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeCreate(BaseModel):
    """Schema for creating a node via API."""

    dag_id: Optional[uuid.UUID] = Field(default=None, description="Owning DAG, may be omitted")
    label: str = Field(description="Node label")


class NodeRead(BaseModel):
    """Schema for reading a node from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    dag_id: Optional[uuid.UUID] = Field(default=None, description="Owning DAG")
    label: str = Field(description="Node label")

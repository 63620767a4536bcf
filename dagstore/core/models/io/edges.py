"""
Edge I/O models for API requests and responses.

Every reference is optional, matching the nullable columns of ``edges``.
"""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EdgeCreate(BaseModel):
    """Schema for creating an edge via API."""

    source: Optional[uuid.UUID] = Field(default=None, description="Tail node")
    target: Optional[uuid.UUID] = Field(default=None, description="Head node")
    dag_id: Optional[uuid.UUID] = Field(default=None, description="Owning DAG")


class EdgeRead(BaseModel):
    """Schema for reading an edge from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    source: Optional[uuid.UUID] = None
    target: Optional[uuid.UUID] = None
    dag_id: Optional[uuid.UUID] = None

"""
DAG I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class DagCreate(BaseModel):
    """Schema for creating a DAG via API. The identifier is generated by the server."""

    name: str = Field(description="Human-readable graph name")


class DagRead(BaseModel):
    """Schema for reading a DAG from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str = Field(description="Human-readable graph name")

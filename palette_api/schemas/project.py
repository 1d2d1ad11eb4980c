from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ProjectRead(BaseModel):
    """Project read model."""
    id: int = Field(..., description="Project ID")
    name: str = Field(..., description="Project name (unique)")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True


class ProjectWrite(BaseModel):
    """Create or rename payload, after the name has been checked for presence."""
    name: str = Field(..., min_length=1, description="Project name")

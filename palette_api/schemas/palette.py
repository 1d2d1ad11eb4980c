from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class PaletteRead(BaseModel):
    """Palette read model."""
    id: int = Field(..., description="Palette ID")
    name: str = Field(..., description="Palette name (unique within its project)")
    color1: str = Field(...)
    color2: str = Field(...)
    color3: str = Field(...)
    color4: str = Field(...)
    color5: str = Field(...)
    project_id: int = Field(..., description="Owning project id")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True


class PaletteUpdate(BaseModel):
    """Full replacement of a palette's name and colors."""
    name: str = Field(..., min_length=1)
    color1: str = Field(..., min_length=1)
    color2: str = Field(..., min_length=1)
    color3: str = Field(..., min_length=1)
    color4: str = Field(..., min_length=1)
    color5: str = Field(..., min_length=1)


class PaletteCreate(PaletteUpdate):
    """Create palette payload."""
    project_id: int = Field(..., description="Owning project id")

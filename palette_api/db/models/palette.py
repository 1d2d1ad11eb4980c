from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from palette_api.db.base import Base, IntPkMixin, TimestampMixin


class Palette(IntPkMixin, TimestampMixin, Base):
    """A named set of five color tokens belonging to exactly one project."""
    __tablename__ = "palettes"
    __table_args__ = (UniqueConstraint("name", "project_id"),)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    color1: Mapped[str] = mapped_column(Text, nullable=False)
    color2: Mapped[str] = mapped_column(Text, nullable=False)
    color3: Mapped[str] = mapped_column(Text, nullable=False)
    color4: Mapped[str] = mapped_column(Text, nullable=False)
    color5: Mapped[str] = mapped_column(Text, nullable=False)
    # No ON DELETE CASCADE: project deletion removes palettes explicitly.
    project_id: Mapped[int] = mapped_column(Integer, ForeignKey("projects.id"), nullable=False, index=True)

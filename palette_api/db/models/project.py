from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from palette_api.db.base import Base, IntPkMixin, TimestampMixin


class Project(IntPkMixin, TimestampMixin, Base):
    """Named container owning zero or more palettes."""
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

"""
ORM models for projects and their palettes.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .project import Project  # noqa: F401
from .palette import Palette  # noqa: F401

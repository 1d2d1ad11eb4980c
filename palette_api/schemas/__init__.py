"""
Public Pydantic schemas used by FastAPI routes, services, and tests.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
from .palette import PaletteCreate, PaletteRead, PaletteUpdate  # noqa: F401
from .project import ProjectRead, ProjectWrite  # noqa: F401

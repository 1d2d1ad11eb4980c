from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.db.session import get_async_session
from palette_api.services.palettes import PaletteService
from palette_api.services.projects import ProjectService


# PUBLIC_INTERFACE
async def get_project_service(
    session: AsyncSession = Depends(get_async_session),
) -> ProjectService:
    """Project service bound to the request's session."""
    return ProjectService(session)


# PUBLIC_INTERFACE
async def get_palette_service(
    session: AsyncSession = Depends(get_async_session),
) -> PaletteService:
    """Palette service bound to the request's session."""
    return PaletteService(session)

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.db.models import Palette
from palette_api.schemas.palette import PaletteCreate, PaletteUpdate
from .base import BaseRepository


class PaletteRepository(BaseRepository):
    """Repository for palettes."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_palette(self, palette_id: int, *, for_update: bool = False) -> Optional[Palette]:
        stmt = select(Palette).where(Palette.id == palette_id)
        if for_update:
            stmt = stmt.with_for_update()
        return await self.scalar_one_or_none(stmt)

    async def list_for_project(self, project_id: int) -> List[Palette]:
        stmt = select(Palette).where(Palette.project_id == project_id).order_by(Palette.id)
        res = await self.scalars(stmt)
        return list(res)

    async def find_by_name(self, *, name: str, project_id: int) -> Optional[Palette]:
        stmt = select(Palette).where(Palette.name == name, Palette.project_id == project_id)
        return await self.scalar_one_or_none(stmt)

    async def create_palette(self, payload: PaletteCreate) -> Palette:
        row = Palette(
            name=payload.name,
            color1=payload.color1,
            color2=payload.color2,
            color3=payload.color3,
            color4=payload.color4,
            color5=payload.color5,
            project_id=payload.project_id,
        )
        await self.add(row)
        return row

    async def replace_palette(self, palette: Palette, payload: PaletteUpdate) -> Palette:
        palette.name = payload.name
        palette.color1 = payload.color1
        palette.color2 = payload.color2
        palette.color3 = payload.color3
        palette.color4 = payload.color4
        palette.color5 = payload.color5
        await self.flush()
        return palette

    async def delete_palette(self, palette_id: int) -> None:
        stmt = delete(Palette).where(Palette.id == palette_id).execution_options(synchronize_session=False)
        await self.execute(stmt)

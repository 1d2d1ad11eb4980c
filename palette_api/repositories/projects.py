from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.db.models import Palette, Project
from .base import BaseRepository


class ProjectRepository(BaseRepository):
    """Repository for projects."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_projects(self, *, name: Optional[str] = None) -> List[Project]:
        stmt = select(Project)
        if name:
            stmt = stmt.where(Project.name.icontains(name, autoescape=True))
        stmt = stmt.order_by(Project.id)
        res = await self.scalars(stmt)
        return list(res)

    async def get_project(self, project_id: int, *, lock: Optional[str] = None) -> Optional[Project]:
        """
        Load a project by id.

        lock="update" takes a row lock for a following update/delete;
        lock="key_share" only blocks concurrent deletion of the row.
        """
        stmt = select(Project).where(Project.id == project_id)
        if lock == "update":
            stmt = stmt.with_for_update()
        elif lock == "key_share":
            stmt = stmt.with_for_update(key_share=True, read=True)
        return await self.scalar_one_or_none(stmt)

    async def get_project_by_name(self, name: str) -> Optional[Project]:
        stmt = select(Project).where(Project.name == name)
        return await self.scalar_one_or_none(stmt)

    async def create_project(self, *, name: str) -> Project:
        row = Project(name=name)
        await self.add(row)
        return row

    async def rename_project(self, project: Project, *, name: str) -> Project:
        project.name = name
        await self.flush()
        return project

    async def delete_project_cascade(self, project_id: int) -> int:
        """
        Delete the project's palettes, then the project itself.

        Returns the number of palettes removed. Runs inside the caller's
        transaction so both statements commit or roll back together.
        """
        res = await self.execute(
            delete(Palette)
            .where(Palette.project_id == project_id)
            .execution_options(synchronize_session=False)
        )
        await self.execute(
            delete(Project)
            .where(Project.id == project_id)
            .execution_options(synchronize_session=False)
        )
        return int(res.rowcount or 0)

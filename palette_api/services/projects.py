from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.core import validation
from palette_api.core.errors import ConflictError, EmptyResultError, NotFoundError, ValidationError
from palette_api.db.models import Palette, Project
from palette_api.repositories.palettes import PaletteRepository
from palette_api.repositories.projects import ProjectRepository
from palette_api.schemas.project import ProjectWrite
from palette_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _read_name(payload: Optional[Mapping[str, Any]], missing_message: str) -> ProjectWrite:
    if validation.first_missing_field(payload, validation.PROJECT_FIELDS):
        raise ValidationError(missing_message, field="name")
    if validation.first_non_text_field(payload, validation.PROJECT_FIELDS):  # type: ignore[arg-type]
        raise ValidationError(validation.PROJECT_NAME_NOT_TEXT, field="name")
    return ProjectWrite(name=payload["name"])  # type: ignore[index]


class ProjectService(BaseService):
    """
    Project operations: listing, lookup, create, rename and cascade delete.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.projects = ProjectRepository(session)
        self.palettes = PaletteRepository(session)

    # PUBLIC_INTERFACE
    async def list_projects(self, name: Optional[str] = None) -> List[Project]:
        """
        Projects whose name contains `name` case-insensitively, in insertion order.

        Raises:
            EmptyResultError: nothing matched.
        """
        async with self.unit_of_work():
            rows = await self.projects.list_projects(name=name or None)
        if not rows:
            raise EmptyResultError(validation.no_matching("projects"))
        return rows

    # PUBLIC_INTERFACE
    async def get_project(self, raw_id: Any) -> Project:
        """Return a project by its opaque id or raise NotFoundError."""
        project_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            project = await self.projects.get_project(project_id) if project_id else None
        if project is None:
            raise NotFoundError(validation.project_not_found(raw_id))
        return project

    # PUBLIC_INTERFACE
    async def get_palettes_of(self, raw_id: Any) -> List[Palette]:
        """
        All palettes owned by a project. An existing project with no palettes
        yields an empty list; a missing project raises NotFoundError.
        """
        project_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            project = await self.projects.get_project(project_id) if project_id else None
            if project is None:
                raise NotFoundError(validation.project_palettes_not_found(raw_id))
            return await self.palettes.list_for_project(project.id)

    # PUBLIC_INTERFACE
    async def create_project(self, payload: Optional[Mapping[str, Any]]) -> Project:
        """
        Create a project with a name no other project uses.

        Raises:
            ValidationError: name absent or empty.
            ConflictError: name already taken (also when a concurrent insert wins).
        """
        data = _read_name(payload, validation.PROJECT_NAME_MISSING)
        async with self.unit_of_work():
            if await self.projects.get_project_by_name(data.name) is not None:
                raise ConflictError(validation.project_name_conflict(data.name))
            try:
                created = await self.projects.create_project(name=data.name)
            except IntegrityError as exc:
                raise ConflictError(validation.project_name_conflict(data.name)) from exc
        logger.info("Created project id=%s name=%r", created.id, created.name)
        return created

    # PUBLIC_INTERFACE
    async def rename_project(self, raw_id: Any, payload: Optional[Mapping[str, Any]]) -> Project:
        """
        Rename a project in place.

        Raises:
            ValidationError: name absent or empty.
            NotFoundError: no such project.
            ConflictError: another project already has that name.
        """
        data = _read_name(payload, validation.PROJECT_RENAME_MISSING)
        project_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            project = await self.projects.get_project(project_id, lock="update") if project_id else None
            if project is None:
                raise NotFoundError(validation.project_not_found(raw_id))
            other = await self.projects.get_project_by_name(data.name)
            if other is not None and other.id != project.id:
                raise ConflictError(validation.project_name_conflict(data.name))
            try:
                await self.projects.rename_project(project, name=data.name)
            except IntegrityError as exc:
                raise ConflictError(validation.project_name_conflict(data.name)) from exc
        logger.info("Renamed project id=%s to %r", project.id, data.name)
        return project

    # PUBLIC_INTERFACE
    async def delete_project(self, raw_id: Any) -> None:
        """
        Delete a project and every palette it owns, all or nothing.

        Raises:
            NotFoundError: no such project; nothing is modified.
        """
        project_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            project = await self.projects.get_project(project_id, lock="update") if project_id else None
            if project is None:
                raise NotFoundError(validation.project_not_found(raw_id, terminal_period=False))
            removed = await self.projects.delete_project_cascade(project.id)
        logger.info("Deleted project id=%s with %d palette(s)", project_id, removed)

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.core import validation
from palette_api.core.errors import ConflictError, NotFoundError, ValidationError
from palette_api.db.models import Palette
from palette_api.repositories.palettes import PaletteRepository
from palette_api.repositories.projects import ProjectRepository
from palette_api.schemas.palette import PaletteCreate, PaletteUpdate
from palette_api.services.base import BaseService

logger = logging.getLogger(__name__)

COLOR_FIELDS = ("color1", "color2", "color3", "color4", "color5")


def _check_required(payload: Optional[Mapping[str, Any]], fields) -> Mapping[str, Any]:
    missing = validation.first_missing_field(payload, fields)
    if missing:
        logger.info("Rejected palette payload: missing %s", missing)
        raise ValidationError(validation.missing_palette_field_message(missing), field=missing)
    not_text = validation.first_non_text_field(payload, validation.PALETTE_UPDATE_FIELDS)  # type: ignore[arg-type]
    if not_text:
        logger.info("Rejected palette payload: %s is not a string", not_text)
        raise ValidationError(validation.palette_field_not_text_message(not_text), field=not_text)
    return payload  # type: ignore[return-value]


def _tokens(payload: Mapping[str, Any]) -> dict[str, str]:
    return {field: payload[field] for field in ("name",) + COLOR_FIELDS}


class PaletteService(BaseService):
    """
    Palette operations. A palette always belongs to an existing project and its
    name is unique within that project.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.palettes = PaletteRepository(session)
        self.projects = ProjectRepository(session)

    # PUBLIC_INTERFACE
    async def get_palette(self, raw_id: Any) -> Palette:
        """Return a palette by its opaque id or raise NotFoundError."""
        palette_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            palette = await self.palettes.get_palette(palette_id) if palette_id else None
        if palette is None:
            raise NotFoundError(validation.palette_not_found(raw_id))
        return palette

    # PUBLIC_INTERFACE
    async def create_palette(self, payload: Optional[Mapping[str, Any]]) -> Palette:
        """
        Create a palette.

        Required fields are checked in order: name, color1..color5, project_id.

        Raises:
            ValidationError: names the first missing field.
            NotFoundError: the referenced project does not exist.
            ConflictError: the project already has a palette with this name.
        """
        body = _check_required(payload, validation.PALETTE_CREATE_FIELDS)
        raw_project_id = body["project_id"]
        project_id = validation.parse_id(raw_project_id)
        async with self.unit_of_work():
            # Key-share lock: a concurrent project delete waits for this insert.
            project = await self.projects.get_project(project_id, lock="key_share") if project_id else None
            if project is None:
                raise NotFoundError(validation.project_not_found(raw_project_id))
            data = PaletteCreate(project_id=project.id, **_tokens(body))
            conflict = validation.palette_name_conflict(data.name, data.project_id)
            if await self.palettes.find_by_name(name=data.name, project_id=data.project_id) is not None:
                raise ConflictError(conflict)
            try:
                created = await self.palettes.create_palette(data)
            except IntegrityError as exc:
                raise ConflictError(conflict) from exc
        logger.info("Created palette id=%s in project id=%s", created.id, created.project_id)
        return created

    # PUBLIC_INTERFACE
    async def update_palette(self, raw_id: Any, payload: Optional[Mapping[str, Any]]) -> Palette:
        """
        Replace a palette's name and five colors. project_id is not required
        and is ignored: palettes are never moved between projects.

        Raises:
            ValidationError: names the first missing field.
            NotFoundError: no such palette.
            ConflictError: another palette in the same project has the new name.
        """
        body = _check_required(payload, validation.PALETTE_UPDATE_FIELDS)
        data = PaletteUpdate(**_tokens(body))
        palette_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            palette = await self.palettes.get_palette(palette_id, for_update=True) if palette_id else None
            if palette is None:
                raise NotFoundError(validation.palette_not_found(raw_id))
            conflict = validation.palette_name_conflict(data.name, palette.project_id)
            other = await self.palettes.find_by_name(name=data.name, project_id=palette.project_id)
            if other is not None and other.id != palette.id:
                raise ConflictError(conflict)
            try:
                await self.palettes.replace_palette(palette, data)
            except IntegrityError as exc:
                raise ConflictError(conflict) from exc
        logger.info("Updated palette id=%s", palette.id)
        return palette

    # PUBLIC_INTERFACE
    async def delete_palette(self, raw_id: Any) -> None:
        """Delete a single palette or raise NotFoundError."""
        palette_id = validation.parse_id(raw_id)
        async with self.unit_of_work():
            palette = await self.palettes.get_palette(palette_id, for_update=True) if palette_id else None
            if palette is None:
                raise NotFoundError(validation.palette_not_found(raw_id, terminal_period=False))
            await self.palettes.delete_palette(palette.id)
        logger.info("Deleted palette id=%s", palette_id)

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from palette_api.core.deps import get_project_service
from palette_api.schemas.palette import PaletteRead
from palette_api.schemas.project import ProjectRead
from palette_api.services.projects import ProjectService

router = APIRouter(prefix="/projects", tags=["Projects"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[ProjectRead],
    summary="List projects",
    description="List projects in insertion order, optionally filtered by a case-insensitive name substring. 404 when nothing matches.",
)
async def list_projects(
    name: Optional[str] = Query(None, description="Filter by name (substring, case-insensitive)"),
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRead]:
    projects = await service.list_projects(name)
    return [ProjectRead.model_validate(x) for x in projects]


# PUBLIC_INTERFACE
@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
)
async def get_project(
    project_id: str = Path(...),
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


# PUBLIC_INTERFACE
@router.get(
    "/{project_id}/palettes",
    response_model=List[PaletteRead],
    summary="List project palettes",
    description="All palettes of a project; an empty array when the project has none.",
)
async def list_project_palettes(
    project_id: str = Path(...),
    service: ProjectService = Depends(get_project_service),
) -> List[PaletteRead]:
    palettes = await service.get_palettes_of(project_id)
    return [PaletteRead.model_validate(x) for x in palettes]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project. 422 without a name, 409 when the name is taken.",
)
async def create_project(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    created = await service.create_project(payload)
    return ProjectRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Rename project",
)
async def rename_project(
    project_id: str = Path(...),
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProjectService = Depends(get_project_service),
) -> Response:
    await service.rename_project(project_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project together with all of its palettes.",
)
async def delete_project(
    project_id: str = Path(...),
    service: ProjectService = Depends(get_project_service),
) -> Response:
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Response, status

from palette_api.core.deps import get_palette_service
from palette_api.schemas.palette import PaletteRead
from palette_api.services.palettes import PaletteService

router = APIRouter(prefix="/palettes", tags=["Palettes"])


# PUBLIC_INTERFACE
@router.get(
    "/{palette_id}",
    response_model=PaletteRead,
    summary="Get palette",
)
async def get_palette(
    palette_id: str = Path(...),
    service: PaletteService = Depends(get_palette_service),
) -> PaletteRead:
    palette = await service.get_palette(palette_id)
    return PaletteRead.model_validate(palette)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=PaletteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create palette",
    description=(
        "Create a palette. Requires name, color1..color5 and project_id; the 422 message "
        "names the first missing field. 409 when the project already has a palette with that name."
    ),
)
async def create_palette(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PaletteService = Depends(get_palette_service),
) -> PaletteRead:
    created = await service.create_palette(payload)
    return PaletteRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put(
    "/{palette_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace palette",
    description="Replace the name and all five colors. The owning project cannot be changed.",
)
async def update_palette(
    palette_id: str = Path(...),
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PaletteService = Depends(get_palette_service),
) -> Response:
    await service.update_palette(palette_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.delete(
    "/{palette_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete palette",
)
async def delete_palette(
    palette_id: str = Path(...),
    service: PaletteService = Depends(get_palette_service),
) -> Response:
    await service.delete_palette(palette_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

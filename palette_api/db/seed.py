"""
Database seeding with the sample projects.

Seeds:
- "Project 1" with Palette1 and Palette2
- "Project 2" with Palette3 and Palette4
- "Empty" with no palettes

Existing palettes and projects are removed first, so the result is always
exactly this data set.

Usage:
  python -m palette_api.db.run_migrations upgrade head
  python -m palette_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.db.models import Palette, Project
from palette_api.db.session import get_session_maker

logger = logging.getLogger(__name__)


SAMPLE_PROJECTS: List[Dict[str, Any]] = [
    {
        "name": "Project 1",
        "palettes": [
            {"name": "Palette1", "colors": ("#ff0000", "#ffff00", "#ffffff", "#808000", "#239b56")},
            {"name": "Palette2", "colors": ("#2980b9", "#85929e", "#dc7633", "#73c6b6", "#d6eaf8")},
        ],
    },
    {
        "name": "Project 2",
        "palettes": [
            {"name": "Palette3", "colors": ("#ff0000", "#ffff00", "#ffffff", "#808000", "#239b56")},
            {"name": "Palette4", "colors": ("#2980b9", "#85929e", "#dc7633", "#73c6b6", "#d6eaf8")},
        ],
    },
    {
        "name": "Empty",
        "palettes": [],
    },
]


# PUBLIC_INTERFACE
async def seed_all(session: Optional[AsyncSession] = None) -> Dict[str, int]:
    """
    Replace all data with the sample projects in a single transaction.

    Parameters:
      session: optional session to use; a new one is opened when omitted.
    Returns:
      mapping of project name -> generated id
    """
    if session is not None:
        return await _seed(session)

    async with get_session_maker()() as new_session:
        return await _seed(new_session)


async def _seed(session: AsyncSession) -> Dict[str, int]:
    try:
        await session.execute(delete(Palette))
        await session.execute(delete(Project))
        ids: Dict[str, int] = {}
        for project in SAMPLE_PROJECTS:
            res = await session.execute(
                insert(Project).values(name=project["name"]).returning(Project.id)
            )
            project_id = res.scalar_one()
            ids[project["name"]] = project_id
            for palette in project["palettes"]:
                await session.execute(
                    insert(Palette).values(
                        name=palette["name"],
                        color1=palette["colors"][0],
                        color2=palette["colors"][1],
                        color3=palette["colors"][2],
                        color4=palette["colors"][3],
                        color5=palette["colors"][4],
                        project_id=project_id,
                    )
                )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    logger.info("Seeded %d projects", len(ids))
    return ids


# PUBLIC_INTERFACE
def main() -> None:
    """Entrypoint to run the asynchronous seeding."""
    asyncio.run(seed_all())


if __name__ == "__main__":
    main()

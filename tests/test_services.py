"""Service-level tests: integrity rules, transactions and outcome types."""

import pytest
from sqlalchemy.exc import OperationalError

from palette_api.core.errors import (
    ConflictError,
    EmptyResultError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from palette_api.repositories.palettes import PaletteRepository
from palette_api.repositories.projects import ProjectRepository
from palette_api.services.palettes import PaletteService
from palette_api.services.projects import ProjectService


def _palette(project_id, name, **overrides):
    body = {
        "name": name,
        "color1": "#000000",
        "color2": "#111111",
        "color3": "#222222",
        "color4": "#333333",
        "color5": "#444444",
        "project_id": project_id,
    }
    body.update(overrides)
    return body


@pytest.mark.parametrize("name", ["Alpha", "beta gamma", "ünïcode", "x" * 200])
async def test_created_project_is_readable(db_session, name):
    service = ProjectService(db_session)
    created = await service.create_project({"name": name})
    fetched = await service.get_project(str(created.id))
    assert fetched.name == name


async def test_duplicate_name_never_creates_second_row(db_session, store):
    service = ProjectService(db_session)
    await service.create_project({"name": "Shared"})
    with pytest.raises(ConflictError):
        await service.create_project({"name": "Shared"})
    assert await store.count_projects() == 1


async def test_unique_constraint_backs_up_the_name_check(db_session, store, monkeypatch):
    """A concurrent insert that wins the race surfaces as a conflict, not a 500."""
    service = ProjectService(db_session)
    await service.create_project({"name": "Raced"})

    async def nothing_found(self, name):
        return None

    monkeypatch.setattr(ProjectRepository, "get_project_by_name", nothing_found)
    with pytest.raises(ConflictError) as excinfo:
        await service.create_project({"name": "Raced"})
    assert excinfo.value.message == "Project name Raced already exists."
    assert await store.count_projects() == 1

    # The session is usable again after the rolled back transaction.
    assert (await service.create_project({"name": "Next"})).name == "Next"


async def test_palette_unique_constraint_backs_up_the_name_check(db_session, store, monkeypatch):
    project_id = (await ProjectService(db_session).create_project({"name": "P"})).id
    service = PaletteService(db_session)
    await service.create_palette(_palette(project_id, "Dup"))

    async def nothing_found(self, *, name, project_id):
        return None

    monkeypatch.setattr(PaletteRepository, "find_by_name", nothing_found)
    with pytest.raises(ConflictError):
        await service.create_palette(_palette(project_id, "Dup"))
    assert await store.count_palettes(project_id) == 1


@pytest.mark.parametrize("count", [0, 1, 5])
async def test_delete_leaves_no_palettes_behind(db_session, store, count):
    projects = ProjectService(db_session)
    palettes = PaletteService(db_session)
    doomed = await projects.create_project({"name": "Doomed"})
    other = await projects.create_project({"name": "Other"})
    for i in range(count):
        await palettes.create_palette(_palette(doomed.id, f"p{i}"))
    await palettes.create_palette(_palette(other.id, "keep"))

    await projects.delete_project(str(doomed.id))

    assert await store.count_palettes(doomed.id) == 0
    assert await store.count_palettes(other.id) == 1
    assert await store.project(doomed.id) is None


async def test_failed_cascade_rolls_back_everything(db_session, store, monkeypatch):
    projects = ProjectService(db_session)
    project_id = (await projects.create_project({"name": "Kept"})).id
    await PaletteService(db_session).create_palette(_palette(project_id, "still here"))

    original = ProjectRepository.execute
    calls = []

    async def fail_on_project_delete(self, statement, params=None):
        calls.append(statement)
        if len(calls) == 3:
            raise OperationalError("DELETE FROM projects", {}, Exception("connection lost"))
        return await original(self, statement, params)

    monkeypatch.setattr(ProjectRepository, "execute", fail_on_project_delete)
    with pytest.raises(InternalError) as excinfo:
        await projects.delete_project(str(project_id))
    assert isinstance(excinfo.value.cause, OperationalError)

    assert await store.project(project_id) is not None
    assert await store.count_palettes(project_id) == 1


async def test_delete_of_unknown_project_changes_nothing(db_session, seeded, store):
    projects, palettes = await store.count_projects(), await store.count_palettes()
    with pytest.raises(NotFoundError):
        await ProjectService(db_session).delete_project("424242")
    assert await store.count_projects() == projects
    assert await store.count_palettes() == palettes


async def test_missing_field_is_reported_in_order(db_session, seeded):
    body = _palette(seeded["Project 1"], "Fresh")
    del body["color2"]
    del body["project_id"]
    with pytest.raises(ValidationError) as excinfo:
        await PaletteService(db_session).create_palette(body)
    assert excinfo.value.field == "color2"
    assert "You're missing a color2 property." in excinfo.value.message


async def test_update_does_not_require_project_id(db_session, seeded, store):
    palette = (await store.palettes_of(seeded["Project 2"]))[0]
    body = _palette(None, "Renamed")
    del body["project_id"]
    await PaletteService(db_session).update_palette(str(palette.id), body)
    stored = await store.palette(palette.id)
    assert stored.name == "Renamed"
    assert stored.project_id == seeded["Project 2"]


async def test_seeded_scenario(db_session, seeded, store):
    projects = ProjectService(db_session)

    matching = await projects.list_projects("Project")
    assert [p.name for p in matching] == ["Project 1", "Project 2"]

    assert await projects.get_palettes_of(str(seeded["Empty"])) == []

    untouched = [p.id for p in await store.palettes_of(seeded["Project 2"])]
    await projects.delete_project(str(seeded["Project 1"]))
    assert await store.count_palettes(seeded["Project 1"]) == 0
    assert [p.id for p in await store.palettes_of(seeded["Project 2"])] == untouched


async def test_empty_listing_is_its_own_outcome(db_session):
    with pytest.raises(EmptyResultError) as excinfo:
        await ProjectService(db_session).list_projects()
    assert excinfo.value.message == "No matching projects found."


async def test_palettes_of_unknown_project_ignores_orphan_ids(db_session, seeded):
    with pytest.raises(NotFoundError) as excinfo:
        await ProjectService(db_session).get_palettes_of("0")
    assert excinfo.value.message == "No matching palettes found with project id 0."

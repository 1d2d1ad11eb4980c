"""Shared fixtures: in-memory SQLite database, seeded data and an HTTP client.

Every test gets a fresh database built from the ORM metadata. The request
session dependency is overridden so routes run against the same database.
"""

import os

# Never reach a real database or run migrations from tests.
os.environ.setdefault("POSTGRES_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("AUTO_SEED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from palette_api.api.main import app  # noqa: E402
from palette_api.db.base import Base  # noqa: E402
from palette_api.db.models import Palette, Project  # noqa: E402
from palette_api.db.seed import seed_all  # noqa: E402
from palette_api.db.session import get_async_session  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory):
    """Sample data; returns project name -> id."""
    async with session_factory() as session:
        return await seed_all(session)


@pytest.fixture
async def client(session_factory):
    """HTTP client with the session dependency bound to the test database."""

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


class Store:
    """Direct reads against the test database, each in a fresh session."""

    def __init__(self, factory):
        self._factory = factory

    async def count_projects(self) -> int:
        async with self._factory() as session:
            return (await session.execute(select(func.count(Project.id)))).scalar_one()

    async def count_palettes(self, project_id=None) -> int:
        stmt = select(func.count(Palette.id))
        if project_id is not None:
            stmt = stmt.where(Palette.project_id == project_id)
        async with self._factory() as session:
            return (await session.execute(stmt)).scalar_one()

    async def project(self, project_id):
        async with self._factory() as session:
            return await session.get(Project, project_id)

    async def palette(self, palette_id):
        async with self._factory() as session:
            return await session.get(Palette, palette_id)

    async def palettes_of(self, project_id):
        async with self._factory() as session:
            res = await session.execute(
                select(Palette).where(Palette.project_id == project_id).order_by(Palette.id)
            )
            return list(res.scalars())


@pytest.fixture
def store(session_factory):
    return Store(session_factory)

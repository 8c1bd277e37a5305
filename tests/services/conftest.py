"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_today pinned to 2026-03-10 so calendar/upcoming results are stable
    - db_manager patched so the readiness probe sees the test DB
"""

from datetime import date, time

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from wardsite.db.base import Base
from wardsite.infrastructure.database import get_db, DatabaseSessionManager
from wardsite.api.routes.auxiliaries import get_today
from wardsite.models.event import Event
from wardsite.models.post import Post
import wardsite.infrastructure.database as db_module
from wardsite.main import app

TODAY = date(2026, 3, 10)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_event(test_db):
    """Insert an event row directly; returns the refreshed ORM object."""
    async def _make(
        title: str,
        starts_on: date,
        ends_on: date | None = None,
        auxiliary: str = "eq",
        start_time: time | None = None,
        location: str | None = None,
    ) -> Event:
        event = Event(
            title=title, starts_on=starts_on, ends_on=ends_on,
            auxiliary=auxiliary, start_time=start_time, location=location,
        )
        test_db.add(event)
        await test_db.commit()
        await test_db.refresh(event)
        return event
    return _make


@pytest.fixture
def make_post(test_db):
    async def _make(title: str, auxiliary: str = "eq", body: str = "<p>Body</p>") -> Post:
        post = Post(title=title, body=body, auxiliary=auxiliary)
        test_db.add(post)
        await test_db.commit()
        await test_db.refresh(post)
        return post
    return _make

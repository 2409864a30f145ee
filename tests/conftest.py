"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
session_factory: async sessions on a fresh in-memory SQLite database
app            : the FastAPI app wired to that database and to a private hub
hub            : the MeasurementsHub instance the app pushes to
client         : httpx client carrying a valid bearer token
anon_client    : httpx client without credentials
teacher/student: seeded persons; lesson: a lesson owned by ``teacher``
enrollment     : ``student`` enrolled in ``lesson``
"""

from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backeye.core.database import get_db
from backeye.core.dependencies import get_measurements_hub
from backeye.core.security import create_access_token
from backeye.main import app as backeye_app
from backeye.models import Base, Lesson, Person, PersonType, StudentLesson
from backeye.services.hub import MeasurementsHub

LESSON_START = datetime(2024, 3, 4, 9, 0)
LESSON_END = datetime(2024, 3, 4, 10, 30)


# ── Database ─────────────────────────────────────────────────────────────────


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


async def persist(session_factory, obj):
    """Insert one row in its own session and return it detached"""
    async with session_factory() as session:
        session.add(obj)
        await session.commit()
        await session.refresh(obj)
        return obj


# ── Application ──────────────────────────────────────────────────────────────


@pytest.fixture
def hub() -> MeasurementsHub:
    return MeasurementsHub()


@pytest.fixture
def app(session_factory, hub):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    backeye_app.dependency_overrides[get_db] = override_get_db
    backeye_app.dependency_overrides[get_measurements_hub] = lambda: hub
    yield backeye_app
    backeye_app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {create_access_token(1, PersonType.TEACHER.name)}"}


@pytest.fixture
async def client(app, auth_headers):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", headers=auth_headers) as client:
        yield client


@pytest.fixture
async def anon_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ── Seed data ────────────────────────────────────────────────────────────────


@pytest.fixture
async def teacher(session_factory) -> Person:
    return await persist(session_factory, Person(
        first_name="Dana",
        last_name="Levi",
        email="dana.levi@school.example",
        password="teach-123",
        type=PersonType.TEACHER,
    ))


@pytest.fixture
async def student(session_factory) -> Person:
    return await persist(session_factory, Person(
        first_name="Noa",
        last_name="Cohen",
        email="noa@school.example",
        birth_id="123456789",
        password="stud-456",
        type=PersonType.STUDENT,
    ))


@pytest.fixture
async def lesson(session_factory, teacher) -> Lesson:
    return await persist(session_factory, Lesson(
        person_id=teacher.id,
        name="Algebra",
        description="Linear equations",
        platform="Zoom",
        link="https://zoom.example/j/1",
        is_active=True,
        day_of_week="Monday",
        start_time=LESSON_START,
        end_time=LESSON_END,
        max_late=10,
        class_code="ALG-1",
    ))


@pytest.fixture
async def enrollment(session_factory, lesson, student) -> StudentLesson:
    return await persist(session_factory, StudentLesson(lesson_id=lesson.id, person_id=student.id))

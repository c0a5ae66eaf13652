"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hunt.core.config import Settings
from hunt.core.deps import get_app_settings, get_db
from hunt.db.base import Base
from hunt.db import models_registry  # noqa: F401 - Import to register models
from hunt.db.seed import SEED_TASKS
from hunt.main import app
from hunt.models.task import Task
from hunt.models.upload import Upload
from hunt.services.task_service import TaskService

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Smallest valid data URI the upload validation accepts
PHOTO_DATA = "data:image/png;base64,AAA="


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the default (reject) upload validation."""
    return Settings(_env_file=None)


def _make_client(
    db_session: AsyncSession,
    settings: Settings,
    raise_app_exceptions: bool = True,
) -> AsyncClient:
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_app_settings] = lambda: settings

    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions),
        base_url="http://test",
    )


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, test_settings: Settings
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""
    async with _make_client(db_session, test_settings) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def permissive_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an app that accepts unvalidated uploads.

    Unhandled errors come back as 500 responses instead of being raised.
    """
    settings = Settings(_env_file=None, upload_validation="accept")
    async with _make_client(db_session, settings, raise_app_exceptions=False) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def seeded_tasks(db_session: AsyncSession) -> list[Task]:
    """Seed the task catalog."""
    task_service = TaskService(db_session)
    await task_service.seed_if_empty(SEED_TASKS)
    return await task_service.list_tasks()


@pytest_asyncio.fixture(scope="function")
async def sample_uploads(
    db_session: AsyncSession, seeded_tasks: list[Task]
) -> list[Upload]:
    """Create three uploads one minute apart, oldest first."""
    base_time = datetime(2026, 3, 1, 18, 0, 0)
    uploads = []

    for i in range(3):
        upload = Upload(
            task_id=seeded_tasks[i].id,
            user_name=f"Hunter {i}",
            photo_url=PHOTO_DATA,
            caption=f"Caption {i}",
            votes=0,
            created_at=base_time + timedelta(minutes=i),
        )
        uploads.append(upload)
        db_session.add(upload)

    await db_session.commit()
    return uploads


@pytest.fixture
def file_settings(tmp_path):
    """Factory for settings backed by an on-disk database under tmp_path."""

    def _make(**kwargs) -> Settings:
        return Settings(
            _env_file=None,
            data_dir=str(tmp_path / "data"),
            db_file="hunt-test.db",
            static_dir=str(tmp_path / "dist"),
            **kwargs,
        )

    return _make

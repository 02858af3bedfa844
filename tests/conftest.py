"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the posts table created
    - StaticPool: all sessions share the one in-memory connection
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")

import logging  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from blogpost.db.base import Base  # noqa: E402
from blogpost.infrastructure.database import DatabaseSessionManager  # noqa: E402
from blogpost.infrastructure.post_repository import (  # noqa: E402
    PostRepositoryConfig, SqlAlchemyPostRepository,
)
import blogpost.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def repository(db):
    return SqlAlchemyPostRepository(PostRepositoryConfig(
        db=db, logger=logging.getLogger("tests.post_repository"),
    ))

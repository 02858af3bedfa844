"""API test fixtures — FastAPI test client wired to the test database.

Invariants:
    - app.state.post_rpc built over the per-test DatabaseSessionManager
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - ASGITransport does not run the lifespan, so the fixture does the wiring itself
"""

import pytest
from httpx import ASGITransport, AsyncClient

import blogpost.infrastructure.database as db_module
from blogpost.api.dependencies import build_post_rpc
from blogpost.main import app


@pytest.fixture
async def client(db):
    app.state.post_rpc = build_post_rpc(db)
    original_manager = db_module.db_manager
    db_module.db_manager = db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    del app.state.post_rpc
    db_module.db_manager = original_manager

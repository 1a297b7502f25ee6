import os

os.environ.setdefault("DB_DSN", "sqlite+aiosqlite:///./official_id.db")
os.environ.setdefault("RESEND_API_KEY", "")

from contextlib import asynccontextmanager  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import src.events.repository.orm_models  # noqa: E402,F401
import src.models  # noqa: E402,F401
from src.config.database import engine  # noqa: E402
from src.main import app  # noqa: E402
from src.models.base import BaseModel  # noqa: E402
from src.rate_limit import RateLimiter, get_rate_limiter  # noqa: E402


@pytest.fixture(autouse=True)
async def db_tables():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
def client_factory():
    """Build a client with dependency overrides; rate limits start empty."""

    @asynccontextmanager
    async def factory(overrides: dict | None = None, rate_limiter: RateLimiter | None = None):
        limiter = rate_limiter or RateLimiter()
        app.dependency_overrides[get_rate_limiter] = lambda: limiter
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac

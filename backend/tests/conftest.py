"""Root conftest — shared test configuration.

Invariants:
    - Every test gets its own store and app: ids always start at 1
    - Settings never read a developer's .env file

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real middleware and
      error handler stack without binding a port
"""

import pytest
from httpx import ASGITransport, AsyncClient

from people_api.config import Settings
from people_api.infrastructure.person_store import InMemoryPersonStore
from people_api.main import create_app
from people_api.services.person_service import PersonService


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    return InMemoryPersonStore()


@pytest.fixture
def service(store):
    return PersonService(store)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client(app):
    """Client that receives 500 responses instead of re-raising app exceptions."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

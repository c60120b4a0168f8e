"""Pytest configuration and fixtures for rentals.

HTTP tests use rentals.main:app with get_database overridden to a Database on
a temporary SQLite file (aiosqlite); repository tests use the same Database
directly. The app lifespan is not run by ASGITransport.
"""

import os
from collections.abc import AsyncIterator

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./rentals-test.db")

from httpx import ASGITransport, AsyncClient  # noqa: E402

from rentals.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from rentals.application.dtos.person import PersonData  # noqa: E402
from rentals.core.limiter import limiter  # noqa: E402
from rentals.domain.enums import RoleType  # noqa: E402
from rentals.infrastructure.persistence.database import (  # noqa: E402
    Database,
    get_database,
)
from rentals.infrastructure.persistence.models import ROLE_DESCRIPTORS  # noqa: E402
from rentals.infrastructure.persistence.repositories import (  # noqa: E402
    PersonRepository,
    RoleMembershipRepository,
)
from rentals.main import app  # noqa: E402


def person_data(
    n: int = 1,
    *,
    last_name: str = "Garcia",
    first_name: str = "Maria",
) -> PersonData:
    """Valid PersonData whose national id and email are unique per n."""
    return PersonData(
        national_id=str(30000000 + n),
        last_name=last_name,
        first_name=first_name,
        phone="+54 11 5555 0000",
        email=f"person{n}@example.com",
    )


def person_payload(
    n: int = 1,
    *,
    last_name: str = "Garcia",
    first_name: str = "Maria",
) -> dict[str, str]:
    """JSON body for POST /{role} and PUT /persons/{id}."""
    data = person_data(n, last_name=last_name, first_name=first_name)
    return {
        "national_id": data.national_id,
        "last_name": data.last_name,
        "first_name": data.first_name,
        "phone": data.phone,
        "email": data.email,
    }


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Rate limit counters are process-wide; start every test from zero."""
    limiter.reset()


@pytest.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    """Database on a fresh SQLite file with all tables created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'rentals.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def person_repo(database: Database) -> PersonRepository:
    return PersonRepository(database)


@pytest.fixture
def role_repos(database: Database) -> dict[RoleType, RoleMembershipRepository]:
    return {
        role: RoleMembershipRepository(database, descriptor)
        for role, descriptor in ROLE_DESCRIPTORS.items()
    }


@pytest.fixture
async def client(database: Database) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database."""
    app.dependency_overrides[get_database] = lambda: database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_person_data():
    """Factory: make_person_data(n, last_name=..., first_name=...) -> PersonData."""
    return person_data


@pytest.fixture
def make_person_payload():
    """Factory: make_person_payload(n, ...) -> JSON body dict."""
    return person_payload

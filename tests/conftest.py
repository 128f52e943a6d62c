"""Shared fixtures: a throwaway SQLite store per test and an app wired to it."""

# Standard library imports
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import UTC, datetime
import os
import tempfile
from typing import Any
import uuid

# Settings are read at import time, so the environment must be in place first
_TEST_DB_DIR = tempfile.mkdtemp(prefix="civicconnect-tests-")
os.environ["ENVIRONMENT"] = "dev"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/default.db"
os.environ["DATABASE_ECHO"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-key"

# Third-party imports
from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

# Local application imports
from civicconnect.core.db import get_async_session  # noqa: E402
from civicconnect.core.errors import RemoteFailure  # noqa: E402
from civicconnect.db_selectors.auth import insert_user_with_profile  # noqa: E402
from civicconnect.models import Base, Issue, IssuePriority, IssueStatus, User  # noqa: E402
from civicconnect.services.auth import get_authority_code_validator  # noqa: E402
from civicconnect.utils.password_utils import get_password_hash  # noqa: E402
from main import create_app  # noqa: E402

API = "/api/v1"
DEFAULT_PASSWORD = "secret123"
VALID_AUTHORITY_CODE = "CITY-2024"


class FakeAuthorityCodeValidator:
    """Stands in for the remote access-code check and records every call."""

    def __init__(self, valid_codes: set[str] | None = None, error: RemoteFailure | None = None) -> None:
        self.valid_codes = valid_codes if valid_codes is not None else {VALID_AUTHORITY_CODE}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def validate(self, code: str, email: str) -> bool:
        self.calls.append((code, email))
        if self.error is not None:
            raise self.error
        return code in self.valid_codes


def build_issue(**overrides: Any) -> Issue:
    """A transient ``Issue`` with every column filled, for tests that never touch the store."""
    now = datetime.now(UTC)
    fields: dict[str, Any] = {
        "id": uuid.uuid4(),
        "title": "Pothole",
        "description": "deep pothole",
        "location": "5th Ave",
        "category": "roads",
        "contact_info": "555-1234",
        "image_url": None,
        "status": IssueStatus.PENDING,
        "priority": IssuePriority.MEDIUM,
        "user_id": uuid.uuid4(),
        "assigned_to": None,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Issue(**fields)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'civicconnect.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_account(session_factory) -> Callable[..., Awaitable[User]]:
    """Create an identity plus profile directly in the store."""

    async def _make_account(
        email: str,
        role: str = "citizen",
        password: str = DEFAULT_PASSWORD,
        display_name: str = "Test User",
    ) -> User:
        async with session_factory() as session:
            return await insert_user_with_profile(
                session,
                email=email,
                hashed_password=get_password_hash(password),
                display_name=display_name,
                role=role,
            )

    return _make_account


@pytest.fixture
def authority_codes() -> FakeAuthorityCodeValidator:
    return FakeAuthorityCodeValidator()


@pytest_asyncio.fixture
async def client(session_factory, authority_codes) -> AsyncIterator[AsyncClient]:
    app = create_app(seed_admin=False)

    async def _override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = _override_session
    app.dependency_overrides[get_authority_code_validator] = lambda: authority_codes

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def login(client) -> Callable[..., Awaitable[dict[str, str]]]:
    """Sign in through the API and return the bearer header."""

    async def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        resp = await client.post(f"{API}/auth/token", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _login


@pytest.fixture
def issue_factory() -> Callable[..., Issue]:
    return build_issue

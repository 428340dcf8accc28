"""Test configuration and fixtures for the transcription adapter."""

import os

# Settings are read at import time; these must be set before importing src.
os.environ.setdefault("ENVIRONMENT", "local")
os.environ.setdefault("TRANSCRIPTION_IMPORT_TYPE", "plain_text")
os.environ.setdefault("FILES_BASE_URL", "http://repository.test/files")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("INSTALL_ELEMENT_SETS_ON_STARTUP", "false")

from typing import Any, Dict, List  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# mypy: disable-error-code="import-untyped"
from testcontainers.core.docker_client import DockerClient  # noqa: E402
from testcontainers.postgres import PostgresContainer  # noqa: E402

from src.infrastructure.database.session import Base, async_session  # noqa: E402
from src.infrastructure.logging import configure_testing_logging  # noqa: E402
from src.interfaces.main import app  # noqa: E402
from src.modules.element.services import ElementSetService  # noqa: E402

from tests.helpers import create_file, create_item  # noqa: E402

SQLITE_TEST_URL = "sqlite+aiosqlite://"

configure_testing_logging()


def is_docker_running() -> bool:
    """Check if Docker daemon is running."""
    try:
        DockerClient()
        return True
    except Exception:
        return False


def use_postgres() -> bool:
    """Run against a PostgreSQL container instead of in-memory SQLite."""
    return os.environ.get("TEST_DATABASE", "sqlite").lower() == "postgres"


@pytest.fixture(scope="session")
def pg_container():
    """Create a PostgreSQL container for testing."""
    if not is_docker_running():
        pytest.skip("Docker is required, but not running")

    with PostgresContainer("postgres:16-alpine", driver="asyncpg") as pg:
        yield pg


@pytest.fixture(scope="session")
def test_db_url(request) -> str:
    """Database URL for the test engine."""
    if not use_postgres():
        return SQLITE_TEST_URL

    pg_container = request.getfixturevalue("pg_container")
    return pg_container.get_connection_url()


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(test_db_url):
    """Create a SQLAlchemy engine with fresh repository tables."""
    if test_db_url.startswith("sqlite"):
        engine = create_async_engine(
            test_db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(test_db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session_factory(test_db_engine):
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(test_session_factory):
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_session_factory):
    """Create a test client whose requests each get their own session on the test engine."""
    app.dependency_overrides = {}

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def element_sets(db_session: AsyncSession) -> Dict[str, List[str]]:
    """Install the Dublin Core and Scripto element sets."""
    return await ElementSetService().install_default_element_sets(db_session)


@pytest_asyncio.fixture
async def sample_document(db_session: AsyncSession, element_sets) -> Dict[str, Any]:
    """A titled document with one titled and one untitled page."""
    document_id = await create_item(db_session, title="Letter from Clara Barton")
    titled_page_id = await create_file(db_session, document_id, "scan001.jpg", title="Page 1")
    untitled_page_id = await create_file(db_session, document_id, "scan002.jpg")

    return {
        "id": document_id,
        "title": "Letter from Clara Barton",
        "pages": [titled_page_id, untitled_page_id],
        "page_names": ["Page 1", "scan002.jpg"],
    }


@pytest_asyncio.fixture
async def empty_item(db_session: AsyncSession, element_sets) -> int:
    """An item without files, which is not a valid document."""
    return await create_item(db_session, title="Empty item")

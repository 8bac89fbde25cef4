import os
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.movie_search_service import MovieSearchService
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.domain.services.movie_validator import MovieValidator
from movie_catalog.infrastructure.persistence.database import create_tables, get_session
from tests.fakes import InMemoryMovieRepository


def pytest_collection_modifyitems(config, items):
    if os.getenv("RUN_POSTGRES_TESTS") == "1":
        return
    skip_postgres = pytest.mark.skip(reason="set RUN_POSTGRES_TESTS=1 to run PostgreSQL integration tests")
    for item in items:
        if "postgres" in item.keywords:
            item.add_marker(skip_postgres)


@pytest.fixture
def mock_logger():
    """Logger port double so tests can assert on log calls"""
    return Mock(spec=LoggerPort)


@pytest.fixture
def validator():
    return MovieValidator()


@pytest.fixture
def movie_repository():
    """In-memory repository with real transaction semantics"""
    return InMemoryMovieRepository()


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for tests that check which gateway call is made"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def movie_service(movie_repository, validator, mock_logger):
    return MovieService(movie_repository=movie_repository, validator=validator, logger=mock_logger)


@pytest.fixture
def search_service(movie_repository, mock_logger):
    return MovieSearchService(movie_repository=movie_repository, logger=mock_logger)


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """File-backed SQLite engine so each session gets its own connection"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'movies.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(sqlite_engine):
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture
async def client(sqlite_engine):
    """HTTP client whose requests each get a fresh session on the test database"""

    async def override_get_session():
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()

"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Test engines get the same SQLite setup as the app (foreign keys on,
      BEGIN IMMEDIATE)
    - get_db dependency overridden to use the test engine
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency
    - Tests that race two sessions use a file-backed database: an in-memory
      database lives on a single shared connection
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import catalog.infrastructure.database as db_module
from catalog.db.schema import create_schema, drop_schema
from catalog.infrastructure.database import (
    DatabaseSessionManager, configure_sqlite, get_db,
)
from catalog.main import app
from catalog.services.author_store import AuthorStore
from catalog.services.paper_store import PaperStore


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    configure_sqlite(engine)
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def paper_store(test_db):
    return PaperStore(test_db)


@pytest.fixture
def author_store(test_db):
    return AuthorStore(test_db)


@pytest.fixture
async def file_session_factory(tmp_path):
    """Sessions on a file-backed database, one connection each."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", echo=False,
    )
    configure_sqlite(engine)
    await create_schema(engine)
    yield async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    await engine.dispose()


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager

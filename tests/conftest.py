"""
Pytest configuration and fixtures.
"""

import base64
import os
import tempfile

# Settings are read at import time; point them at throwaway locations first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("UPLOAD_ROOT", tempfile.mkdtemp(prefix="deckstudio-tests-"))
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from deckstudio.api.dependencies import get_file_store
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.infra.config.database import get_db_session, init_models
from deckstudio.infra.storage.local_file_store import LocalFileStore

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
PNG_DATA_URI = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def png_data_uri():
    return PNG_DATA_URI


@pytest.fixture
def sample_content():
    """Slide content tree with nested text and one image."""
    return {
        "slides": [
            {
                "id": "s1",
                "content": [
                    {"type": "h1", "children": [{"text": "Quarterly review"}]},
                    {
                        "type": "p",
                        "children": [
                            {"text": "Revenue grew"},
                            {"type": "img", "url": PNG_DATA_URI},
                        ],
                    },
                ],
            },
            {"id": "s2", "content": [{"type": "p", "children": [{"text": "Next steps"}]}]},
        ]
    }


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow(session):
    return UnitOfWork(session)


@pytest.fixture
def file_store(tmp_path):
    return LocalFileStore(tmp_path / "uploads")


@pytest.fixture
def app(session_factory, file_store):
    """The application with its database and file storage redirected."""
    from deckstudio.main import app

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_file_store] = lambda: file_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def owner_headers():
    return {"X-Owner-Id": "owner-1"}

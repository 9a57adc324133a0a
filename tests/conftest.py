"""
Shared fixtures for the back-office test suite.

Everything runs without external services: an in-memory SQLite database
(aiosqlite) stands in for PostgreSQL, fakeredis for Redis, and the media
store gets a fake uploader in place of the Cloudinary SDK.
"""

import pytest
from cloudinary.exceptions import Error as CloudinaryError
from fakeredis import FakeAsyncRedis
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  (registers the mappers)
from app.db.base_class import Base
from app.db.redis_client import get_redis
from app.db.session import get_db
from app.main import app as fastapi_app
from app.services.media_store import MediaStore, get_media_store


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    # SAVEPOINT support for aiosqlite, as documented by SQLAlchemy
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Redis / media store
# ---------------------------------------------------------------------------

@pytest.fixture
def redis():
    return FakeAsyncRedis(decode_responses=True)


def fake_cloudinary_upload(file, **options):
    if "broken" in file:
        raise CloudinaryError("upload failed")
    return {"secure_url": f"https://cdn.test/img/{len(file)}.png", "folder": options["folder"]}


@pytest.fixture
def media_store():
    return MediaStore(
        cloud_name="demo",
        api_key="key",
        api_secret="secret",
        folder="tests",
        uploader=fake_cloudinary_upload,
    )


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(session_factory, redis, media_store):
    """API client with database, redis and media store swapped for test doubles."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_redis] = lambda: redis
    fastapi_app.dependency_overrides[get_media_store] = lambda: media_store

    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as c:
        yield c

    fastapi_app.dependency_overrides.clear()

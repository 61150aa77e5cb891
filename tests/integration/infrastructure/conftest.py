import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from signoff.backend.app.core.config import settings
from signoff.backend.app.infrastructure.db import models  # noqa: F401  registers tables on Base.metadata
from signoff.backend.app.infrastructure.db.base import Base
from signoff.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


@pytest_asyncio.fixture
async def db_engine():
    test_url = settings.TEST_SQLALCHEMY_DATABASE_URL

    if is_sqlite(test_url):
        # a fresh in-memory database per test; StaticPool keeps it on one connection
        engine = create_async_engine(
            test_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    else:
        engine = create_async_engine(test_url, pool_pre_ping=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session):
    return SqlAlchemyUnitOfWork(session)

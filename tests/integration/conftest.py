from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine

import pytest

from statusify.domain.entities.user import UserLink
from statusify.domain.ports.repositories.users import UserLinkRepository
from statusify.infrastructure.adapters.database.models import Base
from statusify.infrastructure.adapters.database.repositories.users import UserLinkSQLRepository

from tests.unit.factories.entities.user import UserLinkFactory


@pytest.fixture
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """
    Provides a throwaway SQLite database (through aiosqlite) with all tables created.

    The repository builds a SQLite flavoured upsert for it, so a file database per
    test is enough to check real commits without a running PostgreSQL server.
    """
    async_engine = create_async_engine(url=f"sqlite+aiosqlite:///{tmp_path / 'statusify.db'}")

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_engine

    await async_engine.dispose()


@pytest.fixture
def async_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def async_session_db(async_session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    async with async_session_factory() as async_session:
        yield async_session


# --- Repository impl ---


@pytest.fixture
def user_link_repository(async_session_db: AsyncSession) -> UserLinkRepository:
    return UserLinkSQLRepository(async_session_db)


# --- Entity factories ---


@pytest.fixture
def user_link(request: pytest.FixtureRequest) -> UserLink:
    return UserLinkFactory.build(**getattr(request, "param", {}))

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine

from statusify.infrastructure.adapters.database.models import Base
from statusify.infrastructure.config.settings.database import database_settings

assert database_settings.URI is not None, "Did you forget to export DATABASE_ env vars?"

async_engine: AsyncEngine = create_async_engine(
    url=str(database_settings.URI),
    echo=database_settings.ECHO,
    pool_pre_ping=database_settings.POOL_PRE_PING,
)
async_session_factory: async_sessionmaker = async_sessionmaker(
    bind=async_engine,
    # Prevent attributes from being expired after commit/transaction for async DB.
    # @see https://docs.sqlalchemy.org/en/20/orm/session_api.html#sqlalchemy.orm.Session.params.expire_on_commit
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession]:
    db_session: AsyncSession = async_session_factory()

    try:
        yield db_session
    except Exception:
        await db_session.rollback()
        raise
    finally:
        await db_session.close()


async def create_tables() -> None:
    """Creates the missing tables, for deployments without migrations."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

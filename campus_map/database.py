import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlmodel import SQLModel

from campus_map.config import Settings

logger = logging.getLogger(__name__)

def _casefold(value):
    return value.casefold() if isinstance(value, str) else value

def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async engine backing the place store file.
    SQLite connections get a unicode-aware ``casefold`` SQL function,
    since the builtin ``lower()`` only folds ASCII.
    """
    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        future=True
    )

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def register_functions(dbapi_connection, connection_record):
            dbapi_connection.create_function("casefold", 1, _casefold)

    return engine

def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

# Create tables
async def create_db_and_tables(engine: AsyncEngine):
    # Table models must be imported so they register on the metadata
    from campus_map.models import place  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.debug("Store tables ensured on %s", engine.url)

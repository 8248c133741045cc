"""Async engine, session factory and the request-scoped session dependency."""

from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from society_cms.config import settings


def enable_sqlite_savepoints(engine: Engine) -> None:
    """Let the SQLite driver hand transaction control to SQLAlchemy.

    Without this the driver issues its own BEGIN lazily and SAVEPOINT
    (``begin_nested``) does not behave.
    """

    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_engine(url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create an async engine, with SQLite fixes applied when needed."""
    new_engine = create_async_engine(url, echo=echo, **kwargs)
    if new_engine.dialect.name == "sqlite":
        enable_sqlite_savepoints(new_engine.sync_engine)
    return new_engine


engine = create_engine(settings.database_url, echo=settings.app_debug)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for one request; commit on success, roll back on error."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

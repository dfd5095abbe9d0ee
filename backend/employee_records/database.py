"""Database engine and session management."""
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import Settings, get_settings


def _enable_case_sensitive_like(dbapi_connection, connection_record) -> None:
    # SQLite's LIKE ignores ASCII case unless told otherwise.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine for ``settings.database_url``."""

    is_sqlite = settings.database_url.startswith("sqlite+")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        connect_args=connect_args,
    )
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_case_sensitive_like)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


settings = get_settings()
engine = create_engine(settings)
AsyncSessionLocal = create_session_factory(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session per request."""

    async with AsyncSessionLocal() as session:
        yield session

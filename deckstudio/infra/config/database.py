"""
Database configuration and session management.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from deckstudio.infra.config.settings import get_settings

settings = get_settings()
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug_sql,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


def get_engine() -> AsyncEngine:
    """Get the database engine."""
    return engine


def get_session_factory() -> async_sessionmaker:
    """Get the session factory."""
    return async_session_factory


async def init_models(target: Optional[AsyncEngine] = None) -> None:
    """Create all tables known to the declarative base."""
    from deckstudio.data.models import Base

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database session.

    Yields an async database session and ensures proper cleanup.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

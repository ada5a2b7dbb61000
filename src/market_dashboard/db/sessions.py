"""Database engine and session management."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from market_dashboard.db.models import (  # noqa: F401  # pylint: disable=unused-import
    CurrencyPair, MarketIndex, NewsArticle, Stock, User, UserFavorite)
from market_dashboard.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

# Errors that mean the database cannot serve the request (driver, pool,
# connection refused, unexpected constraint violations).
_STORAGE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, OSError)


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create the async engine. Pool sizing only applies to server databases."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


@asynccontextmanager
async def get_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Yield a session; commit on success, roll back and close on error.

    Driver and SQLAlchemy errors are re-raised as StorageUnavailableError.
    """
    session = AsyncSession(engine, expire_on_commit=False)
    try:
        yield session
        await session.commit()
    except _STORAGE_ERRORS as exc:
        try:
            await session.rollback()
        except _STORAGE_ERRORS as rollback_exc:
            logger.debug("Rollback failed: %s", rollback_exc)
        raise StorageUnavailableError(str(exc)) from exc
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables. Safe to call on startup (idempotent for existing tables)."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except _STORAGE_ERRORS as exc:
        raise StorageUnavailableError(str(exc)) from exc

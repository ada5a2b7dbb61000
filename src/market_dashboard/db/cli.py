"""CLI entry points for database setup: create tables and load sample data."""
import asyncio
import logging
import sys

from market_dashboard.config import Settings
from market_dashboard.container import init_container
from market_dashboard.db.seed import seed_sample_data
from market_dashboard.db.sessions import init_db
from market_dashboard.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


async def _init(settings: Settings, *, with_seed: bool) -> int:
    container = init_container(settings)
    engine = container.engine()
    try:
        await init_db(engine)
        logger.info("Tables created")
        if with_seed and not await seed_sample_data(container.market_store()):
            return 1
        return 0
    except StorageUnavailableError as exc:
        logger.error("Database unavailable: %s", exc)
        return 1
    finally:
        await engine.dispose()


def init() -> None:
    """Create all tables (idempotent)."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(_init(settings, with_seed=False)))


def seed() -> None:
    """Create all tables and upsert the sample indices, stocks, pairs and news."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(_init(settings, with_seed=True)))

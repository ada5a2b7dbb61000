"""Shared fixtures: a fresh SQLite database per test and stores over it."""

import pytest

from market_dashboard.db.sessions import create_engine, init_db
from market_dashboard.store import FavoritesLedger, MarketStore, UserStore


@pytest.fixture
def database_url(tmp_path):
    """URL of an empty SQLite file unique to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}"


@pytest.fixture
async def engine(database_url):
    engine = create_engine(database_url)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def market_store(engine):
    return MarketStore(engine)


@pytest.fixture
def user_store(engine):
    return UserStore(engine)


@pytest.fixture
def favorites(engine):
    return FavoritesLedger(engine)

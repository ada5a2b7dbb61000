"""App fixtures: a TestClient over a seeded SQLite file with two known users."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from market_dashboard.config import Settings
from market_dashboard.container import init_container
from market_dashboard.db.models import Role, UserUpsert
from market_dashboard.db.sessions import create_engine, init_db
from market_dashboard.main import create_app
from market_dashboard.store import UserStore

ADMIN_ID = "admin-sub"
USER_ID = "user-sub"


async def _create_users(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await init_db(engine)
        store = UserStore(engine)
        await store.upsert(UserUpsert(id=ADMIN_ID, email="admin@example.com", role=Role.ADMIN))
        await store.upsert(UserUpsert(id=USER_ID, email="trader@example.com"))
    finally:
        await engine.dispose()


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url, broadcast_interval_seconds=0.1)


@pytest.fixture
def app(settings):
    asyncio.run(_create_users(settings.database_url))
    return create_app(init_container(settings))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(settings):
    return {settings.identity_header: ADMIN_ID}


@pytest.fixture
def user_headers(settings):
    return {settings.identity_header: USER_ID}

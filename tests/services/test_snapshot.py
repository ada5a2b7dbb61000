"""Tests for SnapshotAssembler."""

import json

import pytest

from market_dashboard.db.seed import seed_sample_data
from market_dashboard.db.sessions import create_engine
from market_dashboard.exceptions import StorageUnavailableError
from market_dashboard.schemas import MarketUpdateMessage
from market_dashboard.services import SnapshotAssembler
from market_dashboard.store import MarketStore


@pytest.mark.asyncio
class TestSnapshotAssembler:
    """Aggregated reads across the four market entity kinds."""

    async def test_assembles_all_lists(self, market_store):
        """Seeded data appears in every list."""
        assert await seed_sample_data(market_store)

        snapshot = await SnapshotAssembler(market_store).assemble()

        assert {s.symbol for s in snapshot.stocks} == {"AAPL", "MSFT", "GOOGL", "TSLA", "NVDA"}
        assert {c.symbol for c in snapshot.currencies} == {"EUR/USD", "GBP/USD", "USD/JPY", "AUD/USD"}
        assert {i.symbol for i in snapshot.indices} == {"SPX", "IXIC", "DJI", "VIX"}
        assert len(snapshot.news) == 4

    async def test_news_limited(self, market_store):
        """Only the most recent news_limit articles are included."""
        await seed_sample_data(market_store)

        snapshot = await SnapshotAssembler(market_store, news_limit=2).assemble()

        assert len(snapshot.news) == 2
        assert snapshot.news[0].published_at > snapshot.news[1].published_at

    async def test_empty_store(self, market_store):
        """An empty database yields empty lists, not an error."""
        snapshot = await SnapshotAssembler(market_store).assemble()

        assert snapshot.stocks == snapshot.currencies == snapshot.indices == snapshot.news == []

    async def test_envelope_serialization(self, market_store):
        """Envelope carries the discriminator, decimal strings and an ISO timestamp."""
        await seed_sample_data(market_store)
        snapshot = await SnapshotAssembler(market_store).assemble()

        payload = json.loads(MarketUpdateMessage(data=snapshot).model_dump_json())

        assert payload["type"] == "market_update"
        assert set(payload["data"]) == {"stocks", "currencies", "indices", "news", "timestamp"}
        aapl = next(s for s in payload["data"]["stocks"] if s["symbol"] == "AAPL")
        assert aapl["price"] == "175.43"
        assert "T" in payload["data"]["timestamp"]

    async def test_storage_unavailable_propagates(self, tmp_path):
        """Assembly surfaces the storage error to its caller."""
        engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
        try:
            with pytest.raises(StorageUnavailableError):
                await SnapshotAssembler(MarketStore(engine)).assemble()
        finally:
            await engine.dispose()

    async def test_seeding_is_idempotent_for_upsertable_kinds(self, market_store):
        """Running the seed twice does not duplicate stocks, pairs, indices or news."""
        await seed_sample_data(market_store)
        await seed_sample_data(market_store)

        snapshot = await SnapshotAssembler(market_store).assemble()

        assert len(snapshot.stocks) == 5
        assert len(snapshot.currencies) == 4
        assert len(snapshot.indices) == 4
        assert len(snapshot.news) == 4

"""Snapshot assembly: one consistent-enough read across all market entity kinds."""
import asyncio

from market_dashboard.schemas import MarketSnapshot
from market_dashboard.store import MarketStore

SNAPSHOT_NEWS_LIMIT = 10


class SnapshotAssembler:
    """Gathers stocks, currency pairs, indices and recent news concurrently.

    The four reads run in separate sessions without a shared transaction, so
    each list is internally consistent but the lists are not mutually atomic.
    Store errors (StorageUnavailableError) propagate to the caller.
    """

    def __init__(self, store: MarketStore, news_limit: int = SNAPSHOT_NEWS_LIMIT) -> None:
        self._store = store
        self._news_limit = news_limit

    async def assemble(self) -> MarketSnapshot:
        stocks, currencies, indices, news = await asyncio.gather(
            self._store.list_stocks(),
            self._store.list_currency_pairs(),
            self._store.list_indices(),
            self._store.list_news(self._news_limit),
        )
        return MarketSnapshot(
            stocks=stocks,
            currencies=currencies,
            indices=indices,
            news=news,
        )

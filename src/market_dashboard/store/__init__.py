"""Entity store: async persistence for market entities, users and favorites."""
from market_dashboard.store.favorites import FavoritesLedger
from market_dashboard.store.market_store import DEFAULT_NEWS_LIMIT, MarketStore
from market_dashboard.store.users import UserStore

__all__ = [
    "DEFAULT_NEWS_LIMIT",
    "FavoritesLedger",
    "MarketStore",
    "UserStore",
]

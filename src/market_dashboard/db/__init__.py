"""Database package: models and session management."""
from market_dashboard.db.models import (CurrencyPair, CurrencyPairCreate,
                                        ItemType, MarketIndex,
                                        MarketIndexCreate, NewsArticle,
                                        NewsArticleCreate, Role, Stock,
                                        StockCreate, User, UserFavorite,
                                        UserUpsert)

__all__ = [
    "CurrencyPair",
    "CurrencyPairCreate",
    "ItemType",
    "MarketIndex",
    "MarketIndexCreate",
    "NewsArticle",
    "NewsArticleCreate",
    "Role",
    "Stock",
    "StockCreate",
    "User",
    "UserFavorite",
    "UserUpsert",
]

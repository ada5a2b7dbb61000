"""Database models for the market dashboard.

Market entities are keyed on natural business keys (symbol, name) so seeding
and feed refreshes can upsert them. Monetary and rate columns are NUMERIC and
surface as Decimal, never float.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlmodel import Field, SQLModel

from market_dashboard.utils import utcnow


class ItemType(str, Enum):
    """Kinds of items a user can mark as favorite."""

    STOCK = "stock"
    CURRENCY = "currency"
    NEWS = "news"


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class StockBase(SQLModel):
    symbol: str = Field(unique=True, index=True)
    company: str
    price: Decimal = Field(max_digits=10, decimal_places=2)
    change: Decimal = Field(max_digits=10, decimal_places=2)
    change_percent: Decimal = Field(max_digits=5, decimal_places=2)
    volume: str  # display string, e.g. "47.2M"
    market_cap: str | None = None  # display string, e.g. "$2.75T"
    pe_ratio: Decimal | None = Field(default=None, max_digits=8, decimal_places=2)
    high_52: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    low_52: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class StockCreate(StockBase):
    """Stock fields accepted by upsert_stock."""


class Stock(StockBase, table=True):
    """Equity quote snapshot, one row per ticker symbol."""

    __tablename__ = "stocks"

    id: int | None = Field(default=None, primary_key=True)
    updated_at: datetime = Field(default_factory=utcnow)


class CurrencyPairBase(SQLModel):
    symbol: str = Field(unique=True, index=True)  # e.g. "EUR/USD"
    base: str
    quote: str
    rate: Decimal = Field(max_digits=10, decimal_places=6)
    change: Decimal = Field(max_digits=8, decimal_places=6)
    change_percent: Decimal = Field(max_digits=5, decimal_places=2)
    margin: Decimal = Field(default=Decimal("0.25"), max_digits=5, decimal_places=2)


class CurrencyPairCreate(CurrencyPairBase):
    """Currency pair fields accepted by upsert_currency_pair."""


class CurrencyPair(CurrencyPairBase, table=True):
    """FX rate snapshot with an independently adjustable margin (percent)."""

    __tablename__ = "currency_pairs"

    id: int | None = Field(default=None, primary_key=True)
    updated_at: datetime = Field(default_factory=utcnow)


class MarketIndexBase(SQLModel):
    name: str = Field(unique=True, index=True)  # e.g. "S&P 500"
    symbol: str = Field(unique=True, index=True)  # e.g. "SPX"
    value: Decimal = Field(max_digits=10, decimal_places=2)
    change: Decimal = Field(max_digits=10, decimal_places=2)
    change_percent: Decimal = Field(max_digits=5, decimal_places=2)


class MarketIndexCreate(MarketIndexBase):
    """Market index fields accepted by upsert_index."""


class MarketIndex(MarketIndexBase, table=True):
    __tablename__ = "market_indices"

    id: int | None = Field(default=None, primary_key=True)
    updated_at: datetime = Field(default_factory=utcnow)


class NewsArticleBase(SQLModel):
    title: str
    summary: str
    content: str | None = None
    source: str
    image_url: str | None = None
    published_at: datetime = Field(index=True)


class NewsArticleCreate(NewsArticleBase):
    """News fields accepted by add_news_article."""


class NewsArticle(NewsArticleBase, table=True):
    """Append-only news item; created_at is assigned by the store."""

    __tablename__ = "news_articles"

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)


class User(SQLModel, table=True):
    """User account keyed by the identity provider's subject."""

    __tablename__ = "users"

    id: str = Field(primary_key=True)
    email: str | None = Field(default=None, unique=True, index=True)
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: str = Field(default=Role.USER.value)  # user | admin
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class UserUpsert(SQLModel):
    """Claims from a successful external login. role=None keeps the stored role."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: Role | None = None


class UserFavorite(SQLModel, table=True):
    """A (item_type, item_id) reference followed by a user. Not unique per triple."""

    __tablename__ = "user_favorites"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    item_type: str  # stock | currency | news
    item_id: str  # symbol or numeric id, as a string
    created_at: datetime = Field(default_factory=utcnow)

"""Pydantic schemas for API and push payloads. Not persisted to DB."""
from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field

from market_dashboard.db.models import CurrencyPair, MarketIndex, NewsArticle, Stock
from market_dashboard.utils import utcnow


class MarketSnapshot(BaseModel):
    """Point-in-time view of every market entity list.

    The four lists are read independently; a concurrent write may show up in
    one list and not another.
    """

    stocks: list[Stock]
    currencies: list[CurrencyPair]
    indices: list[MarketIndex]
    news: list[NewsArticle]
    timestamp: datetime = Field(default_factory=utcnow)


class MarketUpdateMessage(BaseModel):
    """Push channel envelope."""

    type: Literal["market_update"] = "market_update"
    data: MarketSnapshot


class MarginUpdate(BaseModel):
    """Body of PUT /currencies/{symbol}/margin. Checked by the service, not here."""

    margin: Any = None


class FavoriteRequest(BaseModel):
    """Body of POST /favorites. Checked by the service, not here.

    Clients send camelCase (itemType, itemId); snake_case is also accepted.
    """

    item_type: Any = Field(default=None, validation_alias=AliasChoices("itemType", "item_type"))
    item_id: Any = Field(default=None, validation_alias=AliasChoices("itemId", "item_id"))


class LoginClaims(BaseModel):
    """Verified claims forwarded by the identity provider after login."""

    sub: str = Field(min_length=1)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "FavoriteRequest",
    "LoginClaims",
    "MarginUpdate",
    "MarketSnapshot",
    "MarketUpdateMessage",
    "MessageResponse",
]

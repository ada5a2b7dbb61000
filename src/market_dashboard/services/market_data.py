"""Market data service: read paths and admin margin updates over MarketStore."""
import math
from decimal import Decimal

from market_dashboard.db.models import CurrencyPair, MarketIndex, NewsArticle, Stock
from market_dashboard.exceptions import (DashboardError, NotFoundError,
                                         ValidationError)
from market_dashboard.services.error_mapper import ServiceErrorMapper
from market_dashboard.store import DEFAULT_NEWS_LIMIT, MarketStore


# NUMERIC(5, 2) holds at most 999.99.
MAX_MARGIN = Decimal("999.99")


def parse_margin(value: object) -> Decimal:
    """Validate a margin from a request body: a non-negative JSON number the column can hold."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Invalid margin value")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError("Invalid margin value")
    if value < 0:
        raise ValidationError("Invalid margin value")
    margin = Decimal(str(value))
    if margin > MAX_MARGIN:
        raise ValidationError(f"Margin must not exceed {MAX_MARGIN}")
    return margin


class MarketDataService:
    """Thin service over MarketStore; maps store errors to HTTP."""

    def __init__(self, store: MarketStore) -> None:
        self._store = store
        self._stocks = ServiceErrorMapper("Stock", "stocks")
        self._currencies = ServiceErrorMapper("Currency pair", "currency pairs")
        self._indices = ServiceErrorMapper("Market index", "market indices")
        self._news = ServiceErrorMapper("News article", "news")

    async def list_indices(self) -> list[MarketIndex]:
        try:
            return await self._store.list_indices()
        except DashboardError as e:
            self._indices.raise_http(e)

    async def list_stocks(self) -> list[Stock]:
        try:
            return await self._store.list_stocks()
        except DashboardError as e:
            self._stocks.raise_http(e)

    async def get_stock(self, stock_id: int) -> Stock:
        """Get a stock by id. Raises HTTPException(404) when absent."""
        try:
            stock = await self._store.get_stock(stock_id)
            if stock is None:
                raise NotFoundError(stock_id)
            return stock
        except DashboardError as e:
            self._stocks.raise_http(e, key=str(stock_id))

    async def list_currencies(self) -> list[CurrencyPair]:
        try:
            return await self._store.list_currency_pairs()
        except DashboardError as e:
            self._currencies.raise_http(e)

    async def update_margin(self, symbol: str, margin: object) -> None:
        """Validate then set the pair's margin.

        Unknown symbols are not reported; the store update is fire-and-forget.
        """
        try:
            value = parse_margin(margin)
            await self._store.update_margin(symbol, value)
        except DashboardError as e:
            self._currencies.raise_http(e, key=symbol)

    async def list_news(self, limit: int = DEFAULT_NEWS_LIMIT) -> list[NewsArticle]:
        try:
            return await self._store.list_news(limit)
        except DashboardError as e:
            self._news.raise_http(e)

    async def get_news(self, article_id: int) -> NewsArticle:
        try:
            article = await self._store.get_news(article_id)
            if article is None:
                raise NotFoundError(article_id)
            return article
        except DashboardError as e:
            self._news.raise_http(e, key=str(article_id))

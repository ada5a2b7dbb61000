"""Persistence for stocks, currency pairs, market indices and news."""
from decimal import Decimal

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel, col, select

from market_dashboard.db.models import (CurrencyPair, CurrencyPairCreate,
                                        MarketIndex, MarketIndexCreate,
                                        NewsArticle, NewsArticleCreate, Stock,
                                        StockCreate)
from market_dashboard.db.sessions import get_session
from market_dashboard.store.upsert import build_upsert
from market_dashboard.utils import utcnow

DEFAULT_NEWS_LIMIT = 20


class MarketStore:
    """Async store for market entities.

    Upserts are single native ON CONFLICT statements, so uniqueness of the
    natural keys is enforced by the database rather than by this class. Each
    call runs in its own session; there is no in-process cache.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _upsert(self, model: type[SQLModel], record: SQLModel, conflict_column: str):
        values = record.model_dump()
        provided = record.model_dump(exclude_unset=True).keys()
        stmt = build_upsert(
            self._engine.dialect.name,
            model,
            values,
            conflict_column=conflict_column,
            update_keys=provided,
        )
        async with get_session(self._engine) as session:
            result = await session.scalars(
                stmt, execution_options={"populate_existing": True}
            )
            return result.one()

    async def _get(self, model: type[SQLModel], *where):
        async with get_session(self._engine) as session:
            result = await session.exec(select(model).where(*where))
            return result.first()

    # ---- Stocks ----
    async def list_stocks(self) -> list[Stock]:
        async with get_session(self._engine) as session:
            result = await session.exec(
                select(Stock).order_by(col(Stock.updated_at).desc())
            )
            return list(result.all())

    async def get_stock(self, stock_id: int) -> Stock | None:
        return await self._get(Stock, Stock.id == stock_id)

    async def get_stock_by_symbol(self, symbol: str) -> Stock | None:
        return await self._get(Stock, Stock.symbol == symbol)

    async def upsert_stock(self, stock: StockCreate) -> Stock:
        """Insert a stock or replace the row with the same symbol."""
        return await self._upsert(Stock, stock, "symbol")

    # ---- Currency pairs ----
    async def list_currency_pairs(self) -> list[CurrencyPair]:
        async with get_session(self._engine) as session:
            result = await session.exec(
                select(CurrencyPair).order_by(col(CurrencyPair.updated_at).desc())
            )
            return list(result.all())

    async def get_currency_pair(self, pair_id: int) -> CurrencyPair | None:
        return await self._get(CurrencyPair, CurrencyPair.id == pair_id)

    async def get_currency_pair_by_symbol(self, symbol: str) -> CurrencyPair | None:
        return await self._get(CurrencyPair, CurrencyPair.symbol == symbol)

    async def upsert_currency_pair(self, pair: CurrencyPairCreate) -> CurrencyPair:
        """Insert a pair or replace the row with the same symbol.

        An omitted margin keeps the stored margin on update and falls back to
        the column default on insert.
        """
        return await self._upsert(CurrencyPair, pair, "symbol")

    async def update_margin(self, symbol: str, margin: Decimal) -> None:
        """Set margin (and updated_at) only. No-op when the symbol is absent."""
        stmt = (
            update(CurrencyPair)
            .where(col(CurrencyPair.symbol) == symbol)
            .values(margin=margin, updated_at=utcnow())
        )
        async with get_session(self._engine) as session:
            await session.execute(stmt)

    # ---- Market indices ----
    async def list_indices(self) -> list[MarketIndex]:
        async with get_session(self._engine) as session:
            result = await session.exec(
                select(MarketIndex).order_by(col(MarketIndex.updated_at).desc())
            )
            return list(result.all())

    async def get_index(self, index_id: int) -> MarketIndex | None:
        return await self._get(MarketIndex, MarketIndex.id == index_id)

    async def get_index_by_symbol(self, symbol: str) -> MarketIndex | None:
        return await self._get(MarketIndex, MarketIndex.symbol == symbol)

    async def get_index_by_name(self, name: str) -> MarketIndex | None:
        return await self._get(MarketIndex, MarketIndex.name == name)

    async def upsert_index(self, index: MarketIndexCreate) -> MarketIndex:
        """Insert an index or replace the row with the same symbol.

        A new symbol reusing an existing name violates the name constraint and
        surfaces as StorageUnavailableError.
        """
        return await self._upsert(MarketIndex, index, "symbol")

    # ---- News ----
    async def list_news(self, limit: int = DEFAULT_NEWS_LIMIT) -> list[NewsArticle]:
        """Newest articles first; the limit is applied in SQL."""
        async with get_session(self._engine) as session:
            result = await session.exec(
                select(NewsArticle)
                .order_by(col(NewsArticle.published_at).desc(), col(NewsArticle.id).desc())
                .limit(limit)
            )
            return list(result.all())

    async def get_news(self, article_id: int) -> NewsArticle | None:
        return await self._get(NewsArticle, NewsArticle.id == article_id)

    async def add_news_article(self, article: NewsArticleCreate) -> NewsArticle:
        row = NewsArticle.model_validate(article, update={"created_at": utcnow()})
        async with get_session(self._engine) as session:
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return row

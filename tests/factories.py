"""Builders for upsert payloads used across tests."""

from datetime import datetime

from market_dashboard.db.models import (CurrencyPairCreate, MarketIndexCreate,
                                        NewsArticleCreate, StockCreate)


def make_stock(symbol="AAPL", price="175.43", **overrides) -> StockCreate:
    data = {
        "symbol": symbol,
        "company": f"{symbol} Inc.",
        "price": price,
        "change": "3.64",
        "change_percent": "2.10",
        "volume": "47.2M",
        "market_cap": "$2.75T",
        "pe_ratio": "28.5",
        "high_52": "199.62",
        "low_52": "124.17",
    }
    data.update(overrides)
    return StockCreate.model_validate(data)


def make_pair(symbol="EUR/USD", rate="1.084200", **overrides) -> CurrencyPairCreate:
    base, quote = symbol.split("/")
    data = {
        "symbol": symbol,
        "base": base,
        "quote": quote,
        "rate": rate,
        "change": "0.001300",
        "change_percent": "0.12",
        "margin": "0.25",
    }
    data.update(overrides)
    return CurrencyPairCreate.model_validate(data)


def make_index(name="S&P 500", symbol="SPX", value="4547.38", **overrides) -> MarketIndexCreate:
    data = {
        "name": name,
        "symbol": symbol,
        "value": value,
        "change": "54.23",
        "change_percent": "1.20",
    }
    data.update(overrides)
    return MarketIndexCreate.model_validate(data)


def make_article(title: str, published_at: datetime) -> NewsArticleCreate:
    return NewsArticleCreate(
        title=title,
        summary=f"Summary of {title}",
        source="Reuters",
        published_at=published_at,
    )

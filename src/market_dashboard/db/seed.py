"""Sample market data for local runs and demos. The dashboard has no live feed."""
import logging
from datetime import timedelta

from market_dashboard.db.models import (CurrencyPairCreate, MarketIndexCreate,
                                        NewsArticleCreate, StockCreate)
from market_dashboard.exceptions import StorageUnavailableError
from market_dashboard.store import MarketStore
from market_dashboard.utils import utcnow

logger = logging.getLogger(__name__)

SAMPLE_INDICES = [
    {"name": "S&P 500", "symbol": "SPX", "value": "4547.38", "change": "54.23", "change_percent": "1.20"},
    {"name": "NASDAQ", "symbol": "IXIC", "value": "14221.71", "change": "-71.23", "change_percent": "-0.50"},
    {"name": "DOW JONES", "symbol": "DJI", "value": "35630.68", "change": "280.15", "change_percent": "0.80"},
    {"name": "VIX", "symbol": "VIX", "value": "18.42", "change": "0.02", "change_percent": "0.10"},
]

SAMPLE_STOCKS = [
    {
        "symbol": "AAPL", "company": "Apple Inc.", "price": "175.43", "change": "3.64",
        "change_percent": "2.10", "volume": "47.2M", "market_cap": "$2.75T",
        "pe_ratio": "28.5", "high_52": "199.62", "low_52": "124.17",
    },
    {
        "symbol": "MSFT", "company": "Microsoft Corp.", "price": "378.85", "change": "-2.15",
        "change_percent": "-0.60", "volume": "23.1M", "market_cap": "$2.81T",
        "pe_ratio": "32.1", "high_52": "384.30", "low_52": "212.43",
    },
    {
        "symbol": "GOOGL", "company": "Alphabet Inc.", "price": "2847.63", "change": "-22.41",
        "change_percent": "-0.80", "volume": "18.9M", "market_cap": "$1.84T",
        "pe_ratio": "25.8", "high_52": "2950.10", "low_52": "2193.62",
    },
    {
        "symbol": "TSLA", "company": "Tesla Inc.", "price": "248.91", "change": "12.34",
        "change_percent": "5.20", "volume": "62.7M", "market_cap": "$789B",
        "pe_ratio": "78.2", "high_52": "299.29", "low_52": "138.80",
    },
    {
        "symbol": "NVDA", "company": "NVIDIA Corp.", "price": "452.28", "change": "8.92",
        "change_percent": "2.00", "volume": "34.5M", "market_cap": "$1.12T",
        "pe_ratio": "65.4", "high_52": "502.66", "low_52": "180.68",
    },
]

SAMPLE_CURRENCIES = [
    {"symbol": "EUR/USD", "base": "EUR", "quote": "USD", "rate": "1.084200",
     "change": "0.001300", "change_percent": "0.12", "margin": "0.25"},
    {"symbol": "GBP/USD", "base": "GBP", "quote": "USD", "rate": "1.215600",
     "change": "-0.000973", "change_percent": "-0.08", "margin": "0.30"},
    {"symbol": "USD/JPY", "base": "USD", "quote": "JPY", "rate": "149.850000",
     "change": "0.360000", "change_percent": "0.24", "margin": "0.20"},
    {"symbol": "AUD/USD", "base": "AUD", "quote": "USD", "rate": "0.645500",
     "change": "-0.000968", "change_percent": "-0.15", "margin": "0.35"},
]

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=150"

# (title, summary, source, image id, hours ago)
SAMPLE_NEWS = [
    (
        "Fed Signals Potential Rate Cuts in 2024 as Inflation Shows Signs of Cooling",
        "Federal Reserve officials hint at possible interest rate reductions next year "
        "as consumer price index shows encouraging downward trend...",
        "Reuters",
        "photo-1551288049-bebda4e38f71",
        2,
    ),
    (
        "Tech Stocks Rally as AI Sector Continues Strong Performance",
        "Major technology companies see significant gains as artificial intelligence "
        "investments drive market confidence and quarterly earnings exceed expectations...",
        "MarketWatch",
        "photo-1590283603385-17ffb3a7f29f",
        4,
    ),
    (
        "Oil Prices Surge on OPEC+ Production Cut Announcement",
        "Crude oil futures jump 3% following OPEC+ decision to extend production cuts "
        "through Q2 2024, supporting global energy market stability...",
        "Bloomberg",
        "photo-1578662996442-48f60103fc96",
        6,
    ),
    (
        "Major Banks Report Strong Q4 Earnings Amid Rising Interest Rates",
        "Leading financial institutions benefit from higher net interest margins, with "
        "several banks beating analyst expectations for fourth quarter performance...",
        "Financial Times",
        "photo-1486406146926-c627a92ad1ab",
        8,
    ),
]


async def seed_sample_data(store: MarketStore, *, include_news: bool = True) -> bool:
    """Upsert the sample indices, stocks and pairs, then append sample news.

    Upsertable kinds are idempotent across runs; news is append-only and is
    skipped when the table already has articles. Returns False (and logs) if
    the store is unavailable.
    """
    try:
        for index in SAMPLE_INDICES:
            await store.upsert_index(MarketIndexCreate.model_validate(index))
        for stock in SAMPLE_STOCKS:
            await store.upsert_stock(StockCreate.model_validate(stock))
        for pair in SAMPLE_CURRENCIES:
            await store.upsert_currency_pair(CurrencyPairCreate.model_validate(pair))
        if include_news and not await store.list_news(limit=1):
            now = utcnow()
            for title, summary, source, image, hours_ago in SAMPLE_NEWS:
                await store.add_news_article(
                    NewsArticleCreate(
                        title=title,
                        summary=summary,
                        content="Full article content here...",
                        source=source,
                        image_url=_IMAGE.format(image),
                        published_at=now - timedelta(hours=hours_ago),
                    )
                )
    except StorageUnavailableError as exc:
        logger.error("Error initializing sample data: %s", exc)
        return False
    logger.info("Sample data initialized")
    return True

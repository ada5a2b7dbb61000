"""News routes."""
from fastapi import APIRouter, Query

from market_dashboard.db.models import NewsArticle
from market_dashboard.deps import MarketDataServiceDep
from market_dashboard.store import DEFAULT_NEWS_LIMIT

router = APIRouter(prefix="/news", tags=["news"])


@router.get("", response_model=list[NewsArticle])
async def list_news(
    service: MarketDataServiceDep,
    limit: int = Query(default=DEFAULT_NEWS_LIMIT, ge=1, description="Max articles"),
) -> list[NewsArticle]:
    """Most recent articles first, at most `limit`."""
    return await service.list_news(limit)


@router.get("/{article_id}", response_model=NewsArticle)
async def get_news_article(article_id: int, service: MarketDataServiceDep) -> NewsArticle:
    return await service.get_news(article_id)

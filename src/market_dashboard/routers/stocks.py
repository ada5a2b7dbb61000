"""Stock routes."""
from fastapi import APIRouter

from market_dashboard.db.models import Stock
from market_dashboard.deps import MarketDataServiceDep

router = APIRouter(prefix="/stocks", tags=["stocks"])


@router.get("", response_model=list[Stock])
async def list_stocks(service: MarketDataServiceDep) -> list[Stock]:
    """All stocks, most recently updated first."""
    return await service.list_stocks()


@router.get("/{stock_id}", response_model=Stock)
async def get_stock(stock_id: int, service: MarketDataServiceDep) -> Stock:
    """Get a stock by numeric id.

    Args:
        stock_id: Generated row id (not the ticker symbol).

    Returns:
        The stock, or 404 when no row has that id.
    """
    return await service.get_stock(stock_id)

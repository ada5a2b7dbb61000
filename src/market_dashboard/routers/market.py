"""Market index routes."""
from fastapi import APIRouter

from market_dashboard.db.models import MarketIndex
from market_dashboard.deps import MarketDataServiceDep

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/indices", response_model=list[MarketIndex])
async def list_market_indices(service: MarketDataServiceDep) -> list[MarketIndex]:
    """All market indices, most recently updated first."""
    return await service.list_indices()

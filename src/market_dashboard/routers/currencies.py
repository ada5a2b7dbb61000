"""Currency pair routes.

Pair symbols contain a slash ("EUR/USD"), so the symbol path parameter uses
the path convertor; "/currencies/EUR/USD/margin" and the percent-encoded
form both resolve.
"""
from fastapi import APIRouter

from market_dashboard.db.models import CurrencyPair
from market_dashboard.deps import AdminUser, MarketDataServiceDep
from market_dashboard.schemas import MarginUpdate, MessageResponse

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("", response_model=list[CurrencyPair])
async def list_currencies(service: MarketDataServiceDep) -> list[CurrencyPair]:
    """All currency pairs, most recently updated first."""
    return await service.list_currencies()


@router.put("/{symbol:path}/margin", response_model=MessageResponse)
async def update_currency_margin(
    symbol: str,
    body: MarginUpdate,
    _admin: AdminUser,
    service: MarketDataServiceDep,
) -> MessageResponse:
    """Set the margin (percent) of a currency pair. Admin only.

    The update does not confirm the pair exists; an unknown symbol is a no-op.
    """
    await service.update_margin(symbol, body.margin)
    return MessageResponse(message="Margin updated successfully")

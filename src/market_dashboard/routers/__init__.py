"""API routers for market dashboard endpoints.

Includes routes for:
- /market/indices - Market indices
- /stocks - Stocks
- /currencies - Currency pairs and admin margin updates
- /news - News articles
- /favorites - Per-user favorites
- /auth, /admin - Identity hand-off and admin listing
- /ws - WebSocket real-time market updates
"""
from market_dashboard.routers.admin import router as admin_router
from market_dashboard.routers.auth import router as auth_router
from market_dashboard.routers.currencies import router as currencies_router
from market_dashboard.routers.favorites import router as favorites_router
from market_dashboard.routers.market import router as market_router
from market_dashboard.routers.news import router as news_router
from market_dashboard.routers.stocks import router as stocks_router
from market_dashboard.routers.stream import router as stream_router

__all__ = [
    "admin_router",
    "auth_router",
    "currencies_router",
    "favorites_router",
    "market_router",
    "news_router",
    "stocks_router",
    "stream_router",
]

"""Service layer: store orchestration, input validation and exception-to-HTTP mapping."""
from market_dashboard.services.error_mapper import ServiceErrorMapper
from market_dashboard.services.favorites import FavoritesService
from market_dashboard.services.market_data import MarketDataService
from market_dashboard.services.snapshot import SnapshotAssembler
from market_dashboard.services.users import UsersService

__all__ = [
    "FavoritesService",
    "MarketDataService",
    "ServiceErrorMapper",
    "SnapshotAssembler",
    "UsersService",
]

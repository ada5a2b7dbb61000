"""Favorites service: validates favorite requests before they reach the ledger."""
from market_dashboard.db.models import ItemType, UserFavorite
from market_dashboard.exceptions import DashboardError, ValidationError
from market_dashboard.services.error_mapper import ServiceErrorMapper
from market_dashboard.store import FavoritesLedger

_ITEM_TYPES = {t.value for t in ItemType}


def parse_favorite(item_type: object, item_id: object) -> tuple[str, str]:
    """Both fields required; item_type must be one of stock, currency, news."""
    if not item_type or not item_id:
        raise ValidationError("item_type and item_id are required")
    if not isinstance(item_type, str) or item_type not in _ITEM_TYPES:
        raise ValidationError(f"item_type must be one of: {', '.join(sorted(_ITEM_TYPES))}")
    if isinstance(item_id, bool) or not isinstance(item_id, (str, int)):
        raise ValidationError("item_id must be a string or integer")
    return item_type, str(item_id)


class FavoritesService:
    def __init__(self, ledger: FavoritesLedger) -> None:
        self._ledger = ledger
        self._errors = ServiceErrorMapper("Favorite", "favorites")

    async def list(self, user_id: str) -> list[UserFavorite]:
        try:
            return await self._ledger.list(user_id)
        except DashboardError as e:
            self._errors.raise_http(e)

    async def add(self, user_id: str, item_type: object, item_id: object) -> UserFavorite:
        """Always creates a new row; repeated adds of the same item are kept."""
        try:
            kind, key = parse_favorite(item_type, item_id)
            return await self._ledger.add(user_id, kind, key)
        except DashboardError as e:
            self._errors.raise_http(e)

    async def remove(self, user_id: str, item_type: str, item_id: str) -> int:
        """Remove every matching row; zero matches is not an error."""
        try:
            return await self._ledger.remove(user_id, item_type, item_id)
        except DashboardError as e:
            self._errors.raise_http(e)

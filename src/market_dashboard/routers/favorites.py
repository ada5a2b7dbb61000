"""Favorites routes for the authenticated caller."""
from fastapi import APIRouter

from market_dashboard.db.models import UserFavorite
from market_dashboard.deps import CurrentUser, FavoritesServiceDep
from market_dashboard.schemas import FavoriteRequest, MessageResponse

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[UserFavorite])
async def list_favorites(user: CurrentUser, service: FavoritesServiceDep) -> list[UserFavorite]:
    """The caller's favorites, newest first."""
    return await service.list(user.id)


@router.post("", response_model=UserFavorite)
async def add_favorite(
    body: FavoriteRequest,
    user: CurrentUser,
    service: FavoritesServiceDep,
) -> UserFavorite:
    """Add a favorite. Adding the same item twice creates two rows."""
    return await service.add(user.id, body.item_type, body.item_id)


@router.delete("/{item_type}/{item_id:path}", response_model=MessageResponse)
async def remove_favorite(
    item_type: str,
    item_id: str,
    user: CurrentUser,
    service: FavoritesServiceDep,
) -> MessageResponse:
    """Remove every matching favorite; succeeds even when nothing matched."""
    await service.remove(user.id, item_type, item_id)
    return MessageResponse(message="Favorite removed successfully")

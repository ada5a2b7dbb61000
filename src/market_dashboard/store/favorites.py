"""Per-user favorites: (item_type, item_id) references owned by a user."""
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import col, select

from market_dashboard.db.models import UserFavorite
from market_dashboard.db.sessions import get_session
from market_dashboard.utils import utcnow


class FavoritesLedger:
    """Many-to-many association between users and market items.

    add() never de-duplicates; remove() deletes every row matching the triple.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def list(self, user_id: str) -> list[UserFavorite]:
        """The user's favorites, most recently added first."""
        async with get_session(self._engine) as session:
            result = await session.exec(
                select(UserFavorite)
                .where(UserFavorite.user_id == user_id)
                .order_by(col(UserFavorite.created_at).desc(), col(UserFavorite.id).desc())
            )
            return list(result.all())

    async def add(self, user_id: str, item_type: str, item_id: str) -> UserFavorite:
        favorite = UserFavorite(
            user_id=user_id,
            item_type=item_type,
            item_id=item_id,
            created_at=utcnow(),
        )
        async with get_session(self._engine) as session:
            session.add(favorite)
            await session.flush()
            await session.refresh(favorite)
            return favorite

    async def remove(self, user_id: str, item_type: str, item_id: str) -> int:
        """Delete all rows for the triple. Returns how many were removed (may be 0)."""
        stmt = delete(UserFavorite).where(
            col(UserFavorite.user_id) == user_id,
            col(UserFavorite.item_type) == item_type,
            col(UserFavorite.item_id) == item_id,
        )
        async with get_session(self._engine) as session:
            result = await session.execute(stmt)
            return result.rowcount

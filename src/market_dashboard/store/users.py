"""User rows, created or refreshed on every successful external login."""
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import col, select

from market_dashboard.db.models import Role, User, UserUpsert
from market_dashboard.db.sessions import get_session
from market_dashboard.store.upsert import build_upsert
from market_dashboard.utils import utcnow


class UserStore:
    """Users are never deleted here; role is only changed when explicitly supplied."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def get(self, user_id: str) -> User | None:
        async with get_session(self._engine) as session:
            return await session.get(User, user_id)

    async def list_users(self) -> list[User]:
        async with get_session(self._engine) as session:
            result = await session.exec(select(User).order_by(col(User.created_at)))
            return list(result.all())

    async def upsert(self, user: UserUpsert) -> User:
        """Insert-or-update keyed on id, refreshing updated_at."""
        values = user.model_dump(exclude={"role"})
        update_keys = list(values)
        if user.role is None:
            values["role"] = Role.USER.value
        else:
            values["role"] = user.role.value
            update_keys.append("role")
        values["created_at"] = utcnow()
        stmt = build_upsert(
            self._engine.dialect.name,
            User,
            values,
            conflict_column="id",
            update_keys=update_keys,
        )
        async with get_session(self._engine) as session:
            result = await session.scalars(
                stmt, execution_options={"populate_existing": True}
            )
            return result.one()

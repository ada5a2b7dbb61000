"""Users service: login upserts, caller resolution and role checks."""
from market_dashboard.db.models import Role, User, UserUpsert
from market_dashboard.exceptions import (AuthenticationError,
                                         AuthorizationError, DashboardError)
from market_dashboard.schemas import LoginClaims
from market_dashboard.services.error_mapper import ServiceErrorMapper
from market_dashboard.store import UserStore


class UsersService:
    """Resolves the identity handed over by the external identity provider."""

    def __init__(self, store: UserStore) -> None:
        self._store = store
        self._errors = ServiceErrorMapper("User", "users")

    async def login(self, claims: LoginClaims) -> User:
        """Create or refresh the user for a successful external login."""
        try:
            return await self._store.upsert(
                UserUpsert(
                    id=claims.sub,
                    email=claims.email,
                    first_name=claims.first_name,
                    last_name=claims.last_name,
                    profile_image_url=claims.profile_image_url,
                )
            )
        except DashboardError as e:
            self._errors.raise_http(e, key=claims.sub)

    async def resolve_caller(self, user_id: str | None) -> User:
        """Stored user for the subject. 401 when missing or unknown."""
        try:
            if not user_id:
                raise AuthenticationError()
            user = await self._store.get(user_id)
            if user is None:
                raise AuthenticationError(user_id)
            return user
        except DashboardError as e:
            self._errors.raise_http(e)

    def require_admin(self, user: User) -> User:
        if user.role != Role.ADMIN.value:
            self._errors.raise_http(AuthorizationError("Admin access required"))
        return user

    async def list_users(self) -> list[User]:
        try:
            return await self._store.list_users()
        except DashboardError as e:
            self._errors.raise_http(e)

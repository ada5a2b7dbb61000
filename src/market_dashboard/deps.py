"""FastAPI dependency injection: app.state.container holds singletons; Depends() resolves them.

The caller's identity is resolved by an external identity provider; the
verified subject arrives in a trusted header (Settings.identity_header).
"""
from typing import Annotated

from fastapi import Depends, Request, WebSocket

from market_dashboard.container import Container
from market_dashboard.db.models import User
from market_dashboard.realtime import Broadcaster
from market_dashboard.services import (FavoritesService, MarketDataService,
                                       UsersService)


def _container(request: Request) -> Container:
    return request.app.state.container


def get_market_data_service(request: Request) -> MarketDataService:
    """Resolve MarketDataService from the container (created at startup)."""
    return _container(request).market_data_service()


def get_favorites_service(request: Request) -> FavoritesService:
    return _container(request).favorites_service()


def get_users_service(request: Request) -> UsersService:
    return _container(request).users_service()


def get_broadcaster_ws(websocket: WebSocket) -> Broadcaster:
    """Resolve the Broadcaster for a WebSocket route."""
    return websocket.scope["app"].state.container.broadcaster()


async def get_current_user(
    request: Request,
    users: Annotated[UsersService, Depends(get_users_service)],
) -> User:
    """Stored user for the identity header. 401 when absent or unknown."""
    header = _container(request).settings().identity_header
    return await users.resolve_caller(request.headers.get(header))


async def get_admin_user(
    user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UsersService, Depends(get_users_service)],
) -> User:
    """Current user, required to have role=admin (403 otherwise)."""
    return users.require_admin(user)


# Type aliases for route injection
MarketDataServiceDep = Annotated[MarketDataService, Depends(get_market_data_service)]
FavoritesServiceDep = Annotated[FavoritesService, Depends(get_favorites_service)]
UsersServiceDep = Annotated[UsersService, Depends(get_users_service)]
BroadcasterWs = Annotated[Broadcaster, Depends(get_broadcaster_ws)]
CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(get_admin_user)]

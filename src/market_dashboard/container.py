"""DI container: the composition root. main.create_app() attaches it to app.state."""
from dependency_injector import containers, providers

from market_dashboard.config import Settings
from market_dashboard.db.sessions import create_engine
from market_dashboard.realtime import Broadcaster
from market_dashboard.services import (FavoritesService, MarketDataService,
                                       SnapshotAssembler, UsersService)
from market_dashboard.store import FavoritesLedger, MarketStore, UserStore


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings.from_env)

    engine = providers.Singleton(
        create_engine,
        settings.provided.database_url,
        echo=settings.provided.sql_echo,
    )

    # Stores (sole mutators of persisted state)
    market_store = providers.Singleton(MarketStore, engine)
    user_store = providers.Singleton(UserStore, engine)
    favorites_ledger = providers.Singleton(FavoritesLedger, engine)

    # Services
    market_data_service = providers.Singleton(MarketDataService, market_store)
    favorites_service = providers.Singleton(FavoritesService, favorites_ledger)
    users_service = providers.Singleton(UsersService, user_store)

    snapshot_assembler = providers.Singleton(
        SnapshotAssembler,
        market_store,
        news_limit=settings.provided.snapshot_news_limit,
    )
    broadcaster = providers.Singleton(
        Broadcaster,
        snapshot_assembler,
        interval_seconds=settings.provided.broadcast_interval_seconds,
    )


def init_container(settings: Settings | None = None) -> Container:
    """Create a container, optionally pinned to explicit settings (tests, CLI)."""
    container = Container()
    if settings is not None:
        container.settings.override(providers.Object(settings))
    return container

"""Main module for the market dashboard service."""
import logging
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from market_dashboard.container import Container, init_container
from market_dashboard.db.seed import seed_sample_data
from market_dashboard.db.sessions import init_db
from market_dashboard.exceptions import StorageUnavailableError
from market_dashboard.routers import (admin_router, auth_router,
                                      currencies_router, favorites_router,
                                      market_router, news_router,
                                      stocks_router, stream_router)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Basic process-wide logging; uvicorn keeps its own handlers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create tables and seed at startup; stop push timers, then dispose the engine."""
    container: Container = fastapi_app.state.container
    settings = container.settings()
    engine = container.engine()

    try:
        await init_db(engine)
    except StorageUnavailableError as exc:
        logger.error("Database unavailable at startup: %s", exc)
    else:
        if settings.seed_sample_data:
            await seed_sample_data(container.market_store())

    yield

    # Timers first: nothing may fire into a torn-down engine or server.
    await container.broadcaster().shutdown()
    try:
        await engine.dispose()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error disposing engine: %s", exc)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed input is a 400, matching the service-level validation errors."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def _storage_error_handler(request: Request, exc: StorageUnavailableError) -> JSONResponse:
    logger.error("Storage unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI app around a DI container (a fresh one from the environment by default)."""
    fastapi_app = FastAPI(
        title="Market Dashboard",
        description="Stocks, currency pairs, market indices and news with real-time updates",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.container = container or init_container()

    fastapi_app.add_exception_handler(RequestValidationError, _validation_error_handler)
    fastapi_app.add_exception_handler(StorageUnavailableError, _storage_error_handler)

    fastapi_app.include_router(market_router)
    fastapi_app.include_router(stocks_router)
    fastapi_app.include_router(currencies_router)
    fastapi_app.include_router(news_router)
    fastapi_app.include_router(favorites_router)
    fastapi_app.include_router(auth_router)
    fastapi_app.include_router(admin_router)
    fastapi_app.include_router(stream_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn)."""
    settings = app.state.container.settings()
    configure_logging(settings.log_level)
    uvicorn.run("market_dashboard.main:app", host="127.0.0.1", port=8001)


def run_dev():
    """Run the development server with Postgres running via Docker."""
    project_root = Path(__file__).resolve().parent.parent.parent
    try:
        subprocess.run(
            ["docker", "compose", "up", "-d", "postgres"],
            cwd=project_root,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        print("Failed to start Postgres:", e.stderr or e.stdout, file=sys.stderr)
        sys.exit(1)
    configure_logging("DEBUG")
    uvicorn.run("market_dashboard.main:app", host="0.0.0.0", port=8000, reload=True)

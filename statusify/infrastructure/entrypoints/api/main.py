from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from statusify import __version__
from statusify.infrastructure.adapters.database.session import create_tables
from statusify.infrastructure.config.loggers import configure_loggers
from statusify.infrastructure.config.settings.app import app_settings
from statusify.infrastructure.config.settings.database import database_settings
from statusify.infrastructure.entrypoints.api.endpoints.slack import router as slack_router
from statusify.infrastructure.entrypoints.api.endpoints.spotify import router as spotify_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    # Only load configuration loggers at bootstrap, not at import (testing conflicts).
    configure_loggers(level=app_settings.LOG_LEVEL_API, handlers=app_settings.LOG_HANDLERS_API)

    if database_settings.CREATE_TABLES:
        await create_tables()

    yield


app = FastAPI(
    title="Statusify API",
    version=__version__,
    lifespan=lifespan,
    debug=app_settings.DEBUG,
)

# Paths must match the redirect URIs registered on both OAuth apps.
app.include_router(slack_router, prefix="/slack", tags=["slack"])
app.include_router(spotify_router, prefix="/spotify", tags=["spotify"])


@app.get("/health", name="health_check", tags=["health"], response_class=PlainTextResponse)
async def health_check() -> str:
    """Liveness check."""
    return "OK"

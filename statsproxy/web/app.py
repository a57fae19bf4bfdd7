"""FastAPI application factory for the stats proxy."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from statsproxy.config import Settings, load_settings
from statsproxy.errors import register_error_handlers
from statsproxy.services.cache import TTLCache
from statsproxy.services.stats_service import StatsService
from statsproxy.web.routes.games import router as games_router
from statsproxy.web.routes.health import router as health_router
from statsproxy.web.routes.players import router as players_router
from statsproxy.web.routes.sports import router as sports_router
from statsproxy.web.routes.standings import router as standings_router
from statsproxy.web.routes.teams import router as teams_router

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cache = TTLCache()
        cache.start()
        app.state.stats_service = StatsService(settings, cache=cache)
        log.info(
            "Stats proxy started, upstreams %s and %s",
            settings.nhl_api_base,
            settings.espn_api_base,
        )
        yield
        await app.state.stats_service.close()
        log.info("Stats proxy shut down")

    app = FastAPI(title="Sports Stats API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    for router in (
        health_router,
        games_router,
        standings_router,
        teams_router,
        players_router,
        sports_router,
    ):
        app.include_router(router, prefix="/api")

    return app

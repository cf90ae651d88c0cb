from __future__ import annotations

from pathlib import Path

import structlog
from starlette.applications import Starlette
from starlette.routing import Route

from scores.server.settings import ScoreServerSettings
from scores.views import get_league, get_player_score, health, record_win
from shared.league import FilePlayerStore, PlayerStore
from shared.logging import setup_logging

logger = structlog.get_logger()


def create_app(
    settings: ScoreServerSettings | None = None,
    player_store: PlayerStore | None = None,
) -> Starlette:
    """Build the score server.

    The player store is injected by tests; otherwise a FilePlayerStore is
    opened on ``settings.league_file``, failing fast on a damaged file.
    """
    if settings is None:  # pragma: no cover
        settings = ScoreServerSettings()
    if player_store is None:
        player_store = FilePlayerStore(Path(settings.league_file))

    routes = [
        Route("/players/{name}", get_player_score, methods=["GET"], name="get_player_score"),
        Route("/players/{name}", record_win, methods=["POST"], name="record_win"),
        Route("/league", get_league, methods=["GET"], name="get_league"),
        Route("/health", health, methods=["GET"], name="health"),
    ]

    app = Starlette(routes=routes)
    app.state.player_store = player_store

    logger.info("score server ready", store=type(player_store).__name__)
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory scores.server.app:get_app."""
    settings = ScoreServerSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)

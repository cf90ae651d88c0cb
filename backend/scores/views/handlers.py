"""HTTP handlers for player scores and the league table."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog
from starlette.responses import JSONResponse, PlainTextResponse, Response

from shared.build_info import APP_VERSION

if TYPE_CHECKING:
    from starlette.requests import Request

    from shared.league import PlayerStore

logger = structlog.get_logger()


def _store(request: Request) -> PlayerStore:
    return request.app.state.player_store


def get_player_score(request: Request) -> Response:
    name = request.path_params["name"]
    player = _store(request).find_player(name)
    if player is None:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    return PlainTextResponse(str(player.wins))


def record_win(request: Request) -> Response:
    name = request.path_params["name"]
    try:
        _store(request).record_win(name)
    except OSError:
        logger.exception("failed to record win", player=name)
        return PlainTextResponse("Failed to record win", status_code=HTTPStatus.INTERNAL_SERVER_ERROR)
    return Response(status_code=HTTPStatus.ACCEPTED)


def get_league(request: Request) -> JSONResponse:
    league = _store(request).get_league()
    return JSONResponse(league.to_records())


def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": APP_VERSION})

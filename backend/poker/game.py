"""The Game capability driven by the interactive play loop."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

if TYPE_CHECKING:
    from typing import TextIO

    from shared.league import PlayerStore

logger = structlog.get_logger()


class Game(Protocol):
    """What the play loop needs from a game: start it, then name the winner."""

    def start(self, number_of_players: int, alerts_destination: TextIO) -> None: ...

    def finish(self, winner: str) -> None: ...


class PokerGame:
    """Poker game that records the winner in the league.

    Blind alerts are not scheduled; ``alerts_destination`` is accepted so the
    play loop can hand over its output stream.
    """

    def __init__(self, player_store: PlayerStore) -> None:
        self._player_store = player_store

    def start(self, number_of_players: int, alerts_destination: TextIO) -> None:  # noqa: ARG002
        logger.info("game started", number_of_players=number_of_players)

    def finish(self, winner: str) -> None:
        self._player_store.record_win(winner)
        logger.info("game finished", winner=winner)

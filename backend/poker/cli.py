"""Line-based play loop: ask for the player count, then for the winner."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from typing import TextIO

    from poker.game import Game

logger = structlog.get_logger()

PLAYER_PROMPT = "Please enter the number of players: "
BAD_PLAYER_INPUT_ERR_MSG = "Bad value received for number of players, please try again with a number"

_WINNER_SUFFIX = " wins"
_PLAYER_COUNT_RE = re.compile(r"[+-]?[0-9]+")


def extract_winner(user_input: str) -> str:
    """Strip one trailing " wins" from a line like "Chris wins".

    Lines that do not end with it are returned unchanged.
    """
    return user_input.removesuffix(_WINNER_SUFFIX)


def _parse_player_count(line: str) -> int | None:
    stripped = line.strip()
    if not _PLAYER_COUNT_RE.fullmatch(stripped):
        return None
    return int(stripped)


class PokerCLI:
    def __init__(self, stdin: TextIO, stdout: TextIO, game: Game) -> None:
        self._in = stdin
        self._out = stdout
        self._game = game

    def play_poker(self) -> None:
        self._out.write(PLAYER_PROMPT)
        self._out.flush()

        line = self._read_line()
        number_of_players = _parse_player_count(line)
        if number_of_players is None:
            logger.info("rejected player count", value=line)
            self._out.write(BAD_PLAYER_INPUT_ERR_MSG)
            self._out.flush()
            return

        self._game.start(number_of_players, self._out)

        winner = extract_winner(self._read_line())
        self._game.finish(winner)

    def _read_line(self) -> str:
        """Read one line without its line ending; "" at end of input."""
        return self._in.readline().rstrip("\r\n")

"""In-memory player store for tests of the HTTP and CLI layers."""

from __future__ import annotations

from shared.league.models import League, Player
from shared.league.store import PlayerStore


class StubPlayerStore(PlayerStore):
    """PlayerStore backed by a dict, recording every win it is asked to store.

    ``league`` fixes what get_league returns; by default it is derived from
    ``scores``.
    """

    def __init__(
        self,
        scores: dict[str, int] | None = None,
        league: list[Player] | None = None,
    ) -> None:
        self.scores: dict[str, int] = dict(scores or {})
        self.win_calls: list[str] = []
        self._league = league

    def get_league(self) -> League:
        if self._league is not None:
            return League(self._league)
        return League(Player(name=name, wins=wins) for name, wins in self.scores.items()).sorted()

    def get_player_score(self, name: str) -> int:
        return self.scores.get(name, 0)

    def find_player(self, name: str) -> Player | None:
        if name not in self.scores:
            return None
        return Player(name=name, wins=self.scores[name])

    def record_win(self, name: str) -> None:
        self.win_calls.append(name)
        self.scores[name] = self.scores.get(name, 0) + 1

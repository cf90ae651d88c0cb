"""Abstract interface for win-count persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.league.models import League, Player


class PlayerStore(ABC):
    """Reads and records player wins.

    The HTTP server and the poker game only talk to this interface, so tests
    can swap in an in-memory store.
    """

    @abstractmethod
    def get_league(self) -> League:
        """Return the league ranked by wins, most first."""

    @abstractmethod
    def get_player_score(self, name: str) -> int:
        """Return the wins for ``name``, 0 for players never seen."""

    @abstractmethod
    def record_win(self, name: str) -> None: ...

    def find_player(self, name: str) -> Player | None:
        """Return the named player, or None when they have no recorded wins."""
        return self.get_league().find(name)

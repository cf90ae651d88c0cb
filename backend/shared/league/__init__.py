"""Player standings and their persistence, shared by the score server and the poker CLI."""

from shared.league.exceptions import LeagueFileError
from shared.league.file_store import FilePlayerStore
from shared.league.models import League, Player
from shared.league.store import PlayerStore

__all__ = [
    "FilePlayerStore",
    "League",
    "LeagueFileError",
    "Player",
    "PlayerStore",
]

"""Play one game of poker in the terminal and record the winner.

Usage: uv run python bin/play-poker.py

The league file is taken from POKER_LEAGUE_FILE (default backend/data/league.json).
"""

import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from poker.cli import PokerCLI
from poker.game import PokerGame
from poker.settings import PokerSettings
from shared.league import FilePlayerStore, LeagueFileError
from shared.logging import setup_logging


def main() -> None:
    settings = PokerSettings()
    setup_logging(log_dir=settings.log_dir, stream=sys.stderr)

    try:
        store = FilePlayerStore(settings.league_file)
    except LeagueFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("Let's play poker")
    print("Type {Name} wins to record a win")

    cli = PokerCLI(sys.stdin, sys.stdout, PokerGame(store))
    cli.play_poker()


if __name__ == "__main__":
    main()

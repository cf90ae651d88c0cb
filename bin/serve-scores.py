"""Run the score server.

Usage: uv run python bin/serve-scores.py

Host, port and league file come from SCORES_HOST, SCORES_PORT and
SCORES_LEAGUE_FILE.
"""

import sys
from pathlib import Path

import uvicorn

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from scores.server.settings import ScoreServerSettings


def main() -> None:
    settings = ScoreServerSettings()
    uvicorn.run(
        "scores.server.app:get_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

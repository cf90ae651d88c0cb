"""League stored as a JSON array in a single file."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
import threading
from pathlib import Path

import structlog

from shared.league.exceptions import LeagueFileError
from shared.league.models import League
from shared.league.store import PlayerStore

logger = structlog.get_logger()


class FilePlayerStore(PlayerStore):
    """File-backed player store.

    The file holds a JSON array of ``{"Name": ..., "Wins": ...}`` objects.
    Every read parses the whole file and every win rewrites the whole file
    through a temp-file-then-rename, so the file on disk is always a complete
    league. A threading.Lock makes read-modify-write atomic within a process
    (the server runs sync handlers in a threadpool).

    Limitation: only one store per file. Separate processes writing the same
    file can lose wins.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)
        self._lock = threading.Lock()
        with self._lock:
            league = self._load_from_file()
            if not self._file_path.exists():
                self._save_to_file(league)
        logger.info("league loaded", path=str(self._file_path), players=len(league))

    def _load_from_file(self) -> League:
        """Parse the league file.

        A missing or blank file is an empty league. Anything else that does
        not parse raises LeagueFileError and leaves the file alone.
        """
        if not self._file_path.exists():
            return League()

        try:
            raw = self._file_path.read_bytes()
        except OSError as exc:
            msg = f"Failed to read league from {self._file_path}"
            raise LeagueFileError(msg) from exc

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"League file {self._file_path} is not valid UTF-8"
            raise LeagueFileError(msg) from exc

        if not content.strip():
            return League()

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            msg = f"Failed to parse league from {self._file_path}"
            raise LeagueFileError(msg) from exc

        if not isinstance(data, list):
            msg = f"Expected JSON array at root in {self._file_path}"
            raise LeagueFileError(msg)

        try:
            return League.from_records(data)
        except (TypeError, ValueError) as exc:
            msg = f"Invalid player records in {self._file_path}"
            raise LeagueFileError(msg) from exc

    def _save_to_file(self, league: League) -> None:
        """Atomically replace the league file with ``league``.

        Writes to a temporary file in the same directory, then renames into
        place so readers never see a partial file. On failure the temp file is
        removed and the previous league file is left as it was.
        """
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(league.to_records(), indent=2).encode("utf-8")

        fd, tmp_path = tempfile.mkstemp(dir=self._file_path.parent, prefix=".league_", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            Path(tmp_path).replace(self._file_path)
        except BaseException:
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise

    def get_league(self) -> League:
        with self._lock:
            league = self._load_from_file()
        return league.sorted()

    def get_player_score(self, name: str) -> int:
        return self.get_league().wins_of(name)

    def record_win(self, name: str) -> None:
        """Add one win for ``name`` and rewrite the league file.

        Errors writing the file propagate unchanged; nothing is retried.
        """
        with self._lock:
            league = self._load_from_file().with_win(name)
            self._save_to_file(league)
        logger.info("recorded win", player=name, wins=league.wins_of(name))

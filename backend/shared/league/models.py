"""Player standings and the league table built from them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """One row of the league: a player name and their win count.

    Serialized with the external field names ``Name`` and ``Wins``, which is
    the shape used both in the league file and in HTTP responses.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name", min_length=1)
    wins: int = Field(alias="Wins", ge=0, strict=True)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class League(Sequence[Player]):
    """Immutable ordered collection of players with unique names.

    The order is whatever the league was built with (storage order for a
    league read from disk). Use ``sorted()`` for the ranked view.
    """

    __slots__ = ("_players",)

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: tuple[Player, ...] = tuple(players)
        seen: set[str] = set()
        for player in self._players:
            if player.name in seen:
                raise ValueError(f"Duplicate player '{player.name}' in league")
            seen.add(player.name)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> League:
        """Build a league from ``{"Name": ..., "Wins": ...}`` mappings."""
        return cls(Player.model_validate(record) for record in records)

    def to_records(self) -> list[dict[str, Any]]:
        return [player.to_record() for player in self._players]

    def find(self, name: str) -> Player | None:
        """Return the player with exactly this name, or None."""
        return next((p for p in self._players if p.name == name), None)

    def wins_of(self, name: str) -> int:
        """Return the wins for ``name``, 0 when they are not in the league."""
        player = self.find(name)
        return player.wins if player is not None else 0

    def sorted(self) -> League:
        """Ranked view: most wins first, ties kept in their current order."""
        return League(sorted(self._players, key=lambda p: p.wins, reverse=True))

    def with_win(self, name: str) -> League:
        """Return a new league with one more win for ``name``.

        Unknown players are appended with a single win.
        """
        if self.find(name) is None:
            return League([*self._players, Player(name=name, wins=1)])
        return League(
            p.model_copy(update={"wins": p.wins + 1}) if p.name == name else p for p in self._players
        )

    @overload
    def __getitem__(self, index: int) -> Player: ...

    @overload
    def __getitem__(self, index: slice) -> League: ...

    def __getitem__(self, index: int | slice) -> Player | League:
        if isinstance(index, slice):
            return League(self._players[index])
        return self._players[index]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, League):
            return self._players == other._players
        if isinstance(other, (list, tuple)):
            return list(self._players) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._players)

    def __repr__(self) -> str:
        rows = ", ".join(f"{p.name}={p.wins}" for p in self._players)
        return f"League([{rows}])"

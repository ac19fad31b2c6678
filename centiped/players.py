"""Per-player state: score, lives, wave reached and the saved mushroom field."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple, Union

Position = Tuple[float, float]


@dataclass
class Player:
    """What is kept for one player between turns."""

    score: int = 0
    lives: int = 3
    level: int = 0
    field: List[Position] = field(default_factory=list)


class PlayerSlot(IntEnum):
    """Which player is at the controls."""

    AI = 0
    ONE = 1
    TWO = 2


class PlayerManager:
    """Holds the attract-mode player and the two human players, and which one plays."""

    def __init__(self, on_score: Optional[Callable[[int], None]] = None) -> None:
        self._on_score = on_score
        self._players: Dict[PlayerSlot, Player] = {slot: Player() for slot in PlayerSlot}
        self._slot = PlayerSlot.AI

    @property
    def current(self) -> Player:
        return self._players[self._slot]

    @property
    def which(self) -> PlayerSlot:
        return self._slot

    def player(self, slot: Union[PlayerSlot, int]) -> Player:
        return self._players[PlayerSlot(slot)]

    def sub_life(self) -> None:
        self.current.lives -= 1

    @property
    def lives(self) -> int:
        return self.current.lives

    def set_score(self, score: int) -> None:
        self.current.score = score
        self._notify(score)

    def add_score(self, value: int) -> None:
        self.current.score += value
        self._notify(value)

    @property
    def score(self) -> int:
        return self.current.score

    @property
    def one_score(self) -> int:
        return self._players[PlayerSlot.ONE].score

    @property
    def two_score(self) -> int:
        return self._players[PlayerSlot.TWO].score

    def save_wave(self, wave: int) -> None:
        self.current.level = wave

    @property
    def wave(self) -> int:
        return self.current.level

    def select(self, which: Union[PlayerSlot, int]) -> None:
        """Switch players: 0 is the AI, 1 player one, anything else player two."""
        if which == PlayerSlot.AI:
            self._slot = PlayerSlot.AI
        elif which == PlayerSlot.ONE:
            self._slot = PlayerSlot.ONE
        else:
            self._slot = PlayerSlot.TWO

    def add_to_field(self, pos: Position) -> None:
        self.current.field.append(tuple(pos))

    @property
    def field(self) -> List[Position]:
        """A copy of the current player's saved mushroom positions."""
        return list(self.current.field)

    def remove_from_field(self, pos: Position) -> None:
        """Drop every saved mushroom at ``pos``."""
        target = tuple(pos)
        self.current.field[:] = [p for p in self.current.field if p != target]

    def clear_fields(self) -> None:
        for player in self._players.values():
            player.field.clear()

    def reset(self) -> None:
        """Restore every player to the starting values; the active slot stays."""
        self._players = {slot: Player() for slot in PlayerSlot}

    def _notify(self, value: int) -> None:
        if self._on_score is not None:
            self._on_score(value)
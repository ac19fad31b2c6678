"""The mushroom grid: where mushrooms and letters sit and what blocks movement."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from centiped.pool import Pool

Position = Tuple[float, float]

TOP_PLAYER_ROW = 20
BOTTOM_ROW = 30
SHROOM_AMOUNT_MIN = 10
SHROOM_AMOUNT_MAX = 20


class Obstacle(IntEnum):
    CLEAR = 0
    BLOCKED = 1
    POISONED = 2


class Cell(ABC):
    """Anything that occupies a grid cell: a mushroom or a letter."""

    is_mushroom: bool = False
    destroyed: bool = False

    @property
    @abstractmethod
    def pos(self) -> Position:
        """Top-left corner of the cell in window coordinates."""

    def mark_for_destroy(self) -> None:
        self.destroyed = True


class _Mushroom(Protocol):
    pos: Position
    is_mushroom: bool
    poisoned: bool
    damaged: bool

    def initialize(self, pos: Position) -> None: ...

    def heal(self) -> None: ...

    def mark_for_destroy(self) -> None: ...


class _Players(Protocol):
    @property
    def field(self) -> List[Position]: ...

    def add_to_field(self, pos: Position) -> None: ...


class MushroomField:
    """A grid of cells, keyed by (column, row).

    ``make_mushroom`` builds a new mushroom object: a ``Cell`` whose
    ``is_mushroom`` is true and which has ``poisoned``, ``damaged``,
    ``heal()`` and ``initialize(pos)``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        players: _Players,
        make_mushroom: Callable[[], _Mushroom],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self._players = players
        self._pool: Pool[_Mushroom] = Pool(make_mushroom)
        self._rng = rng if rng is not None else random.Random()
        self._grid: Dict[Tuple[int, int], Cell] = {}
        self._count = 0

    @property
    def count(self) -> int:
        """Mushrooms created minus positions removed."""
        return self._count

    @property
    def quarter(self) -> int:
        return self.cell_size // 3

    def _index(self, pos: Position) -> Tuple[int, int]:
        return int(pos[0] / self.cell_size), int(pos[1] / self.cell_size)

    def cell_at(self, column: int, row: int) -> Optional[Cell]:
        return self._grid.get((column, row))

    def create_mushroom(self, pos: Position) -> None:
        """Place a mushroom in the cell holding ``pos`` unless the cell is taken."""
        self._count += 1
        x, y = self._index(pos)
        if (x, y) in self._grid:
            return
        mushroom = self._pool.acquire()
        mushroom.initialize((float(x * self.cell_size), float(y * self.cell_size)))
        self._grid[(x, y)] = mushroom  # type: ignore[assignment]

    def recycle(self, mushroom: _Mushroom) -> None:
        self._pool.release(mushroom)

    def remove_position(self, pos: Position) -> None:
        x = int(int(pos[0]) / self.cell_size)
        y = int(int(pos[1]) / self.cell_size)
        self._grid.pop((x, y), None)
        self._count -= 1

    def grid_position(self, pos: Position) -> Position:
        x, y = self._index(pos)
        return float(x), float(y)

    def generate(self) -> None:
        """Rebuild the current player's saved field, or scatter mushrooms at random."""
        saved = self._players.field
        if saved:
            for pos in reversed(saved):
                self.create_mushroom(pos)
            return
        columns = self.width // self.cell_size
        rows = self.height // self.cell_size
        amount = SHROOM_AMOUNT_MIN + self._rng.randrange(SHROOM_AMOUNT_MAX)
        for _ in range(amount):
            x = self._rng.randrange(columns)
            y = self.quarter + self._rng.randrange(rows - self.quarter)
            self.create_mushroom((float(x * self.cell_size), float(y * self.cell_size)))

    def inspect(self, row: int, col: int) -> Obstacle:
        """What lies in cell (row, col): the window edge and mushrooms block."""
        if col == BOTTOM_ROW:
            col -= 1
        limit = self.width // self.cell_size
        if row >= limit or row <= -1 or col >= limit or col <= -1:
            return Obstacle.BLOCKED
        cell = self._grid.get((row, col))
        if cell is None:
            return Obstacle.CLEAR
        if cell.is_mushroom and getattr(cell, "poisoned", False):
            return Obstacle.POISONED
        return Obstacle.BLOCKED

    def add_to_grid(self, cell: Cell) -> None:
        self._grid[self._index(cell.pos)] = cell

    def heal_all(self) -> List[Position]:
        """Heal damaged mushrooms; return the explosion point for each one healed."""
        half = self.cell_size / 2
        explosions = []
        for key in sorted(self._grid):
            cell = self._grid[key]
            if cell.is_mushroom and cell.damaged:  # type: ignore[attr-defined]
                x, y = cell.pos
                explosions.append((x + half, y + half))
                cell.heal()  # type: ignore[attr-defined]
        return explosions

    def save(self) -> None:
        """Move every cell off the top row into the current player's field."""
        for key in sorted(self._grid):
            cell = self._grid.get(key)
            if cell is None or cell.pos[1] == 0:
                continue
            self._players.add_to_field(cell.pos)
            self.remove_position(cell.pos)
            cell.mark_for_destroy()

    def clear(self) -> None:
        self._grid.clear()
        self._count = 0

    def __len__(self) -> int:
        return len(self._grid)
"""The player's blaster: grid-checked movement, one bullet at a time, death on contact."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Tuple

from centiped.field import Obstacle

Position = Tuple[float, float]

SPEED = 7.0


class _Field(Protocol):
    def inspect(self, row: int, col: int) -> Obstacle: ...


class _Strategy(Protocol):
    def execute_input(self, blaster: "Blaster") -> None: ...


class Blaster:
    """The player's ship.

    ``fire_bullet(pos, blaster)`` is called when a shot leaves the ship; the
    bullet calls ``reload()`` when it is gone. ``on_death(pos)`` is called when
    an enemy touches the ship.
    """

    def __init__(
        self,
        field: _Field,
        view_width: float,
        view_height: float,
        cell_size: int,
        blaster_width: int,
        blaster_height: int,
        fire_bullet: Callable[[Position, "Blaster"], None],
        on_death: Callable[[Position], None],
    ) -> None:
        self._field = field
        self.view_width = float(view_width)
        self.view_height = float(view_height)
        self.cell_size = cell_size
        self.half_width = blaster_width // 2
        self.blaster_height = blaster_height
        self._fire_bullet = fire_bullet
        self._on_death = on_death
        self.pattern: Optional[_Strategy] = None
        self.bullet_on = False
        self.destroyed = False
        self.pos: Position = self._start()

    def _start(self) -> Position:
        return (self.view_width / 2, self.view_height - self.blaster_height * 1.5)

    def initialize(self, pattern: _Strategy) -> None:
        """Put the blaster back at its start, driven by ``pattern``."""
        self.pattern = pattern
        self.destroyed = False
        self.pos = self._start()

    def _cell(self) -> Tuple[int, int]:
        x, y = self.pos
        return int(x / self.cell_size), int(y / self.cell_size)

    def _try_move(self, d_col: int, d_row: int, dx: float, dy: float) -> bool:
        col, row = self._cell()
        if self._field.inspect(col + d_col, row + d_row) is not Obstacle.CLEAR:
            return False
        x, y = self.pos
        self.pos = (x + dx, y + dy)
        return True

    def move_left(self) -> bool:
        return self._try_move(-1, 0, -SPEED, 0.0)

    def move_right(self) -> bool:
        return self._try_move(1, 0, SPEED, 0.0)

    def move_up(self) -> bool:
        return self._try_move(0, -1, 0.0, -SPEED)

    def move_down(self) -> bool:
        return self._try_move(0, 1, 0.0, SPEED)

    def fire(self) -> bool:
        """Shoot unless a bullet is already in flight; return whether a shot left."""
        if self.bullet_on:
            return False
        self.bullet_on = True
        self._fire_bullet(self.pos, self)
        return True

    def reload(self) -> None:
        self.bullet_on = False

    def update(self) -> None:
        """Apply the input strategy, then keep the ship inside the player area."""
        if self.pattern is None:
            raise RuntimeError("blaster has no input strategy; call initialize() first")
        self.pattern.execute_input(self)
        x, y = self.pos
        x = min(max(x, float(self.half_width)), self.view_width - self.half_width)
        y = min(
            max(y, self.view_height - self.view_height / 5),
            self.view_height - self.half_width,
        )
        self.pos = (x, y)

    def collide(self) -> None:
        """An enemy touched the ship."""
        self._on_death(self.pos)
        self.destroyed = True
"""The scorpion, the spider and the score pop-up shown when a spider is shot.

Side effects the game has to carry out (sounds, explosions, score commands)
are reported through ``on_event(event, critter)``, with ``event`` one of the
module's event names and ``critter`` the object reporting it.
"""

from __future__ import annotations

import random
from typing import Callable, Optional, Protocol, Tuple

Position = Tuple[float, float]

SPAWN_SOUND = "spawn_sound"
DEATH_SOUND = "death_sound"
STOP_SOUND = "stop_sound"
EXPLODE = "explode"
SCORE = "score"

SCORPION_SPEED = 4

SPIDER_ALARM_MIN = 2
SPIDER_ALARM_SPREAD = 3
SPIDER_ALARM_DIVIDE = 10
SPIDER_EDGE_PENALTY = 5.0

POPUP_LIFETIME = 0.5
_POPUP_FRAMES = {600: 1, 900: 2}

EventHook = Callable[[str, object], None]


class _ScorpionSpawner(Protocol):
    def scorpion_squashed(self) -> None: ...


class _SpiderSpawner(Protocol):
    def spider_squashed(self) -> None: ...


class Scorpion:
    """Crosses the screen in a straight line, poisoning mushrooms on its way."""

    def __init__(self, window_width: int, on_event: EventHook) -> None:
        self.window_width = window_width
        self._on_event = on_event
        self.lr = 1
        self.speed = SCORPION_SPEED
        self.scale = 1
        self.pos: Position = (0.0, 0.0)
        self.spawner: Optional[_ScorpionSpawner] = None
        self.destroyed = False

    def initialize(self, pos: Position, lr: int, speed: int, spawner: _ScorpionSpawner) -> None:
        """Start a run from ``pos``; a scorpion that does not start at x = 0 walks left."""
        self.pos = (float(pos[0]), float(pos[1]))
        self.lr = lr
        self.speed = speed
        self.spawner = spawner
        self.destroyed = False
        self._on_event(SPAWN_SOUND, self)
        if self.pos[0] != 0:
            self.speed = -self.speed
        self.scale = lr

    def update(self) -> None:
        """Step sideways; leaving the window ends the scorpion."""
        x, y = self.pos
        x += self.speed
        self.pos = (x, y)
        if x > self.window_width or x < 0:
            self._destroy()

    def hit(self) -> None:
        """Shot by a bullet."""
        self._on_event(EXPLODE, self)
        self._on_event(DEATH_SOUND, self)
        self._on_event(SCORE, self)
        self._destroy()

    def squashed(self) -> None:
        """Removed by the game (for example when a wave ends)."""
        if self.spawner is not None:
            self.spawner.scorpion_squashed()
        self._destroy()

    def pause(self) -> None:
        self.speed = 0

    def _destroy(self) -> None:
        if not self.destroyed:
            self.destroyed = True
            self._on_event(STOP_SOUND, self)


class Spider:
    """Zig-zags through the player area, choosing a new direction on a timer."""

    def __init__(
        self,
        window_width: int,
        view_height: float,
        sprite_height: int,
        rng: Optional[random.Random],
        on_event: EventHook,
    ) -> None:
        self.window_width = window_width
        self.view_height = float(view_height)
        self.sprite_height = sprite_height
        self._rng = rng if rng is not None else random.Random()
        self._on_event = on_event
        self.lr = 1
        self.dx = 0
        self.dy = 0
        self.pos: Position = (0.0, 0.0)
        self.spawner: Optional[_SpiderSpawner] = None
        self.alarm: Optional[float] = None
        self.destroyed = False

    @property
    def top(self) -> float:
        return self.view_height - self.view_height / 3

    @property
    def bottom(self) -> float:
        return self.view_height - self.sprite_height

    def _alarm_time(self) -> float:
        return (SPIDER_ALARM_MIN + self._rng.randrange(SPIDER_ALARM_SPREAD)) / SPIDER_ALARM_DIVIDE

    def initialize(self, pos: Position, spawner: _SpiderSpawner, lr: int) -> None:
        self.pos = (float(pos[0]), float(pos[1]))
        self.lr = lr
        self.spawner = spawner
        self.destroyed = False
        self._on_event(SPAWN_SOUND, self)
        self.alarm = self._alarm_time()

    def choose_direction(self) -> None:
        """Pick a new step at random and set the timer for the next choice."""
        x = self._rng.randrange(2)
        y = self._rng.randrange(2)
        if x == 1:
            x = self.lr
        if y == 0:
            y = self.lr
        if y == 1:
            y = -self.lr
        self.dx, self.dy = x, y
        self.alarm = self._alarm_time()

    def tick(self, seconds: float) -> None:
        """Run the direction timer down; when it runs out, choose a new direction."""
        if self.alarm is None:
            return
        self.alarm -= seconds
        if self.alarm <= 0:
            self.alarm = None
            self.choose_direction()

    def update(self) -> None:
        """Step, stay inside the player area and wrap around the sides."""
        x, y = self.pos
        x += self.dx
        y += self.dy
        y = min(max(y, self.top), self.bottom)
        if x > self.window_width:
            x = 0.0
        elif x < 0:
            x = float(self.window_width)
        self.pos = (x, y)
        if (y == self.top or y == self.bottom) and self.alarm is not None:
            self.alarm -= SPIDER_EDGE_PENALTY

    def hit(self) -> None:
        """Shot by a bullet."""
        self._on_event(SCORE, self)
        self._on_event(EXPLODE, self)
        self.alarm = None
        if self.spawner is not None:
            self.spawner.spider_squashed()
        self._destroy()

    def squashed(self) -> None:
        self._destroy()

    def pause(self) -> None:
        self.dx = 0
        self.dy = 0
        self.alarm = None

    def _destroy(self) -> None:
        if not self.destroyed:
            self.destroyed = True
            self._on_event(STOP_SOUND, self)


class SpiderScorePopup:
    """The points for a shot spider, shown briefly where it died."""

    def __init__(self) -> None:
        self.pos: Position = (0.0, 0.0)
        self.frame = 0
        self.alarm: Optional[float] = None
        self.destroyed = False

    def initialize(self, pos: Position, score: int) -> None:
        """Show ``score``: 600 and 900 have their own frames, anything else the first."""
        self.pos = (float(pos[0]), float(pos[1]))
        self.frame = _POPUP_FRAMES.get(score, 0)
        self.alarm = POPUP_LIFETIME
        self.destroyed = False

    def expire(self) -> None:
        self.alarm = None
        self.destroyed = True
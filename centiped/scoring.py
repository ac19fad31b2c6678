"""Score commands: events map to commands that are queued and applied once a frame."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Deque, List, Protocol, Union

FLEA_DEATH = 200
SCORPION_DEATH = 1000
HEAD_DEATH = 100
SEGMENT_DEATH = 10
MUSHROOM_DEATH = 1
MUSHROOM_POISON_DEATH = 1

SPIDER_DEATH_FAR = 300
SPIDER_DIST_FAR = 3
SPIDER_DEATH_MEDIUM = 600
SPIDER_DIST_MEDIUM = 4
SPIDER_DEATH_NEAR = 900
SPIDER_DIST_NEAR = 5


class ScoreEvent(IntEnum):
    FLEA_KILLED = 0
    SCORPION_KILLED = 1
    MUSHROOM_KILLED = 2
    MUSHROOM_POISON_KILLED = 3
    SPIDER_KILLED = 4
    HEAD_KILLED = 5
    SEGMENT_KILLED = 6


class _ScoreSink(Protocol):
    def add_score(self, value: int) -> None: ...


class _Command(Protocol):
    def execute(self) -> None: ...


@dataclass
class ScoreValue:
    """A command that awards a fixed number of points."""

    manager: _ScoreSink
    points: int

    def execute(self) -> None:
        self.manager.add_score(self.points)


@dataclass
class SpiderScore:
    """A command whose points depend on how close the spider was when shot."""

    manager: _ScoreSink
    distance: Callable[[], float]
    dist_near: int = SPIDER_DIST_NEAR
    dist_medium: int = SPIDER_DIST_MEDIUM
    dist_far: int = SPIDER_DIST_FAR
    death_near: int = SPIDER_DEATH_NEAR
    death_medium: int = SPIDER_DEATH_MEDIUM
    death_far: int = SPIDER_DEATH_FAR

    def points_for(self, distance: float) -> int:
        """Points for a kill at ``distance``: the closer, the more."""
        closest, middle, _ = sorted((self.dist_near, self.dist_medium, self.dist_far))
        if distance <= closest:
            return self.death_near
        if distance <= middle:
            return self.death_medium
        return self.death_far

    def execute(self) -> None:
        self.manager.add_score(self.points_for(self.distance()))


class ScoreManager:
    """Builds score commands, queues them and applies them to the current player."""

    _FIXED = {
        ScoreEvent.FLEA_KILLED: FLEA_DEATH,
        ScoreEvent.SCORPION_KILLED: SCORPION_DEATH,
        ScoreEvent.MUSHROOM_KILLED: MUSHROOM_DEATH,
        ScoreEvent.MUSHROOM_POISON_KILLED: MUSHROOM_POISON_DEATH,
        ScoreEvent.HEAD_KILLED: HEAD_DEATH,
        ScoreEvent.SEGMENT_KILLED: SEGMENT_DEATH,
    }

    def __init__(self, players: _ScoreSink, spider_distance: Callable[[], float]) -> None:
        self._players = players
        self._spider_distance = spider_distance
        self._queue: Deque[_Command] = deque()
        self.created: List[_Command] = []

    def command(self, event: Union[ScoreEvent, int]) -> Union[ScoreValue, SpiderScore]:
        """Make the command for ``event``; unknown events raise ``ValueError``."""
        event = ScoreEvent(event)
        cmd: Union[ScoreValue, SpiderScore]
        if event is ScoreEvent.SPIDER_KILLED:
            cmd = SpiderScore(self, self._spider_distance)
        else:
            cmd = ScoreValue(self, self._FIXED[event])
        self.created.append(cmd)
        return cmd

    def add_score(self, value: int) -> None:
        self._players.add_score(value)

    def send(self, command: _Command) -> None:
        self._queue.append(command)

    def process(self) -> None:
        """Execute every queued command in the order it was sent."""
        while self._queue:
            self._queue.popleft().execute()

    def __len__(self) -> int:
        return len(self._queue)
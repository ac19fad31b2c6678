"""Sound commands, the manager that queues them and a switchboard that can be muted."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Deque, List, Union

PITCH = 2.0
VOLUME = 10.0


class SoundEvent(IntEnum):
    PLAYER_DIED = 0
    FLEA_SPAWN = 1
    SCORPION_SPAWN = 2
    SPIDER_SPAWN = 3
    FIRE_BULLET = 4
    CRITTER_DIED = 5


# Resource name of each event's sound, and whether it is created as a loop.
_SOUNDS = {
    SoundEvent.PLAYER_DIED: ("Death", False),
    SoundEvent.FLEA_SPAWN: ("Flea", True),
    SoundEvent.SCORPION_SPAWN: ("Scorpion", True),
    SoundEvent.SPIDER_SPAWN: ("Spider", True),
    SoundEvent.FIRE_BULLET: ("Fire", False),
    SoundEvent.CRITTER_DIED: ("Kill", False),
}


@dataclass(eq=False)
class SoundCommand:
    """One playable sound; ``play`` is the backend that actually makes the noise."""

    name: str
    play: Callable[["SoundCommand"], None]
    looped: bool = False
    pitch: float = PITCH
    volume: float = VOLUME
    playing: bool = field(default=False, init=False)

    def execute(self) -> None:
        self.playing = True
        self.play(self)

    def stop(self) -> None:
        self.playing = False


class SoundManager:
    """Creates sound commands and plays the queued ones once a frame."""

    def __init__(self, play: Callable[[SoundCommand], None]) -> None:
        self._play = play
        self._queue: Deque[SoundCommand] = deque()
        self.created: List[SoundCommand] = []

    def command(self, event: Union[SoundEvent, int]) -> SoundCommand:
        """Make the sound for ``event``; unknown events raise ``ValueError``."""
        name, looped = _SOUNDS[SoundEvent(event)]
        sound = SoundCommand(name, self._play, looped=looped)
        self.created.append(sound)
        return sound

    def send(self, sound: SoundCommand) -> None:
        self._queue.append(sound)

    def stop_loop(self, sound: SoundCommand) -> None:
        sound.stop()

    def update(self) -> None:
        """Play every queued sound in the order it was sent."""
        while self._queue:
            self._queue.popleft().execute()

    def __len__(self) -> int:
        return len(self._queue)


class SoundMode(Enum):
    """Whether sounds reach the manager at all."""

    MUTE = "mute"
    ON = "on"

    def dispatch(self, manager: SoundManager, sound: SoundCommand) -> None:
        if self is SoundMode.ON:
            manager.send(sound)


class SoundBoard:
    """The game's access point to sound; it starts muted."""

    def __init__(self, manager: SoundManager) -> None:
        self.manager = manager
        self.mode = SoundMode.MUTE

    def add_sound(self, event: Union[SoundEvent, int]) -> SoundCommand:
        return self.manager.command(event)

    def start(self, sound: SoundCommand) -> None:
        self.mode.dispatch(self.manager, sound)

    def toggle_mute(self) -> None:
        self.mode = SoundMode.ON if self.mode is SoundMode.MUTE else SoundMode.MUTE

    def stop_loop(self, sound: SoundCommand) -> None:
        self.manager.stop_loop(sound)
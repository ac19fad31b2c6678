"""Wave definitions: the wave-control text format and the manager that runs waves."""

from __future__ import annotations

import re
import string
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Deque, Iterator, List, Protocol, Tuple, Union

Position = Tuple[float, float]

FLEA_SPAWN_THRESHOLD = 30
TWO_PLAYER_MODE = 2

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class WaveFormatError(ValueError):
    """The wave-control text is not laid out as the game expects."""


@dataclass
class ScorpionData:
    active: bool = False
    speed: int = 5
    fmin: int = 5
    fmax: int = 60


@dataclass
class FleaData:
    active: bool = False
    speed: int = 5
    threshold: int = 30
    pmin: int = 5
    pmax: int = 60


@dataclass
class SpiderData:
    active: bool = False
    speed: int = 2
    fmin: int = 1
    fmax: int = 10


@dataclass
class SoloHeadData:
    active: bool = False
    speed: int = 4
    count: int = 3
    player_area: bool = False
    player_count: int = 3
    player_speed: int = 4
    fmin: int = 1
    fmax: int = 30


@dataclass
class CentipedeData:
    speed: int = 4
    length: int = 5


@dataclass
class Wave:
    """Everything that spawns during one wave."""

    scorpion: ScorpionData = field(default_factory=ScorpionData)
    flea: FleaData = field(default_factory=FleaData)
    spider: SpiderData = field(default_factory=SpiderData)
    solo_head: SoloHeadData = field(default_factory=SoloHeadData)
    centipede: CentipedeData = field(default_factory=CentipedeData)


# Section header -> (critters seen before it, data lines allowed before it, previous section).
_HEADERS = {
    "Scorpion:": (0, (0, 2), "Centipede"),
    "Flea:": (1, (4,), "Scorpion"),
    "Spider:": (2, (5,), "Flea"),
    "Solo": (3, (4,), "Spider"),
    "Centipede:": (4, (8,), "Solo Head"),
}

_ORDER = "critters must come in order: Scorpion, Flea, Spider, Solo Head, Centipede"


class _Tokens:
    """The whitespace-separated words of one line, with errors that name the line."""

    def __init__(self, line: str, number: int) -> None:
        self._words: Iterator[str] = iter(line.split())
        self.number = number

    def take(self) -> str:
        word = next(self._words, None)
        if word is None:
            raise self.error("line ends too early")
        return word

    def error(self, message: str) -> WaveFormatError:
        return WaveFormatError(f"line {self.number}: {message}")

    def expect(self, word: str, wanted: str, section: str) -> None:
        if word != wanted:
            raise self.error(f"{section} data out of order: expected {wanted!r}, got {word!r}")


def _label_for(critter: int, data: int) -> Tuple[str, str]:
    """The first word expected on a data line, and the section it belongs to."""
    if critter in (1, 3):
        section = "Scorpion" if critter == 1 else "Spider"
        return {1: "Speed:", 2: "Minimum"}.get(data, "Maximum"), section
    if critter == 2:
        return {1: "Speed:", 2: "Mushroom", 3: "Minimum"}.get(data, "Maximum"), "Flea"
    if critter == 4:
        return {1: "Speed:", 2: "Count:", 6: "Minimum"}.get(data, "Maximum"), "Solo Head"
    return ("Speed:" if data == 0 else "Length:"), "Centipede"


def _collect(text: str) -> Tuple[int, List[str]]:
    """Check the layout and return the number of waves and their values in order."""
    values: List[str] = []
    waves = 0
    critter = 0
    data = 0
    for number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        tokens = _Tokens(line, number)
        first = tokens.take()

        if first == "Wave":
            critter = 0
            waves += 1
            label = tokens.take()
            if label != str(waves):
                raise tokens.error(f"waves must be numbered in order: expected {waves}, got {label}")
            continue

        if first == "Active:":
            state = tokens.take()
            if state not in ("Active", "NotActive"):
                raise tokens.error("Active must be followed by Active or NotActive")
            data += 1
            values.append(state)
            continue

        if first in _HEADERS:
            expected, allowed, previous = _HEADERS[first]
            if critter != expected:
                raise tokens.error(_ORDER)
            critter += 1
            if data not in allowed:
                raise tokens.error(f"the {previous} section is missing values")
            data = 0
            continue

        if critter == 4 and data in (3, 4, 5):
            if data == 3:
                tokens.expect(first, "Player", "Solo Head")
                tokens.take()
                area = tokens.take()
                if area not in ("On", "Off"):
                    raise tokens.error("the Solo Head's Player Area must be On or Off")
                values.append(area)
                data += 1
                continue
            if data == 4:
                tokens.expect(tokens.take(), "Area", "Solo Head")
                tokens.take()
            else:
                tokens.take()
                tokens.expect(tokens.take(), "Count:", "Solo Head")
            data += 1
        elif critter in (1, 2, 3, 4, 5):
            wanted, section = _label_for(critter, data)
            tokens.expect(first, wanted, section)
            data += 1

        value = tokens.take()
        if value in ("Frequency:", "Threshold:"):
            value = tokens.take()
        if value[0] not in string.digits:
            raise tokens.error(f"expected a number, got {value!r}")
        values.append(value)
    return waves, values


class _Values:
    def __init__(self, values: List[str]) -> None:
        self._queue: Deque[str] = deque(values)

    def word(self) -> str:
        if not self._queue:
            raise WaveFormatError("the wave data ends before the last wave is complete")
        return self._queue.popleft()

    def flag(self, on: str) -> bool:
        return self.word() == on

    def number(self) -> int:
        word = self.word()
        match = _LEADING_INT.match(word)
        if match is None:
            raise WaveFormatError(f"expected a number, got {word!r}")
        return int(match.group(1))


def parse_waves(text: str) -> List[Wave]:
    """Parse wave-control text into one ``Wave`` per numbered wave."""
    count, values = _collect(text)
    data = _Values(values)
    waves = []
    for _ in range(count):
        scorpion = ScorpionData(data.flag("Active"), data.number(), data.number(), data.number())
        flea = FleaData(
            data.flag("Active"), data.number(), data.number(), data.number(), data.number()
        )
        spider = SpiderData(data.flag("Active"), data.number(), data.number(), data.number())
        solo = SoloHeadData(
            data.flag("Active"),
            data.number(),
            data.number(),
            data.flag("On"),
            data.number(),
            data.number(),
            data.number(),
            data.number(),
        )
        centipede = CentipedeData(data.number(), data.number())
        waves.append(Wave(scorpion, flea, spider, solo, centipede))
    return waves


def load_waves(path: Union[str, Path]) -> List[Wave]:
    """Read and parse a wave-control file."""
    return parse_waves(Path(path).read_text(encoding="utf-8"))


class _Spawner(Protocol):
    def new_wave(self) -> None: ...

    def spawn_scorpion(self, fmin: int, fmax: int, speed: int) -> None: ...

    def spawn_flea(self, pmin: int, pmax: int, threshold: int) -> None: ...

    def spawn_spider(self, fmin: int, fmax: int, speed: int) -> None: ...

    def spawn_centipede(self, length: int, speed: int) -> None: ...

    def pause_critters(self) -> None: ...


class _Players(Protocol):
    which: int
    lives: int
    wave: int
    one_score: int
    two_score: int

    def save_wave(self, wave: int) -> None: ...

    def select(self, which: int) -> None: ...

    def reset(self) -> None: ...


class _Field(Protocol):
    def heal_all(self) -> List[Position]: ...

    def save(self) -> None: ...

    def generate(self) -> None: ...


class _Game(Protocol):
    mode: int
    players: _Players
    field: _Field

    def explode(self, pos: Position) -> None: ...

    def update_life(self) -> None: ...

    def respawn_player(self) -> None: ...

    def player_switch(self) -> None: ...

    def check_scores(self, one: int, two: int) -> None: ...


class WaveManager:
    """Starts each wave's critters and moves between waves and players.

    ``game`` supplies the mode (2 is two-player), the player manager, the
    mushroom field, and the hooks for explosions, the HUD, respawning and
    high scores.
    """

    def __init__(self, waves: List[Wave], spawner: _Spawner, game: _Game) -> None:
        if not waves:
            raise ValueError("at least one wave is needed")
        self.waves = list(waves)
        self._spawner = spawner
        self._game = game
        self.heads_active = False
        self.heads_active_in_area = False
        self.bottom_reached = False
        self.wave_num = 0
        self.run_wave(self.wave_num)

    @property
    def wave_amount(self) -> int:
        return len(self.waves)

    def run_wave(self, wave: int) -> None:
        """Spawn what wave number ``wave`` (counted from 0) calls for."""
        if not 0 <= wave < len(self.waves):
            raise IndexError(f"there is no wave {wave}")
        data = self.waves[wave]
        if data.scorpion.active:
            self._spawner.spawn_scorpion(data.scorpion.fmin, data.scorpion.fmax, data.scorpion.speed)
        if data.flea.active:
            self._spawner.spawn_flea(data.flea.pmin, data.flea.pmax, FLEA_SPAWN_THRESHOLD)
        if data.spider.active:
            self._spawner.spawn_spider(data.spider.fmin, data.spider.fmax, data.spider.speed)
        self._spawner.spawn_centipede(data.centipede.length, data.centipede.speed)

    def _clear_wave(self) -> None:
        self.heads_active = False
        self.heads_active_in_area = False
        self.bottom_reached = False

    def _heal_field(self) -> None:
        for pos in self._game.field.heal_all():
            self._game.explode(pos)

    def player_died(self) -> None:
        """Clear the critters, heal the field, then respawn or end the game."""
        game = self._game
        players = game.players
        self._spawner.new_wave()
        self._clear_wave()
        self._heal_field()

        two_players = game.mode == TWO_PLAYER_MODE
        if two_players:
            players.save_wave(self.wave_num)
            game.field.save()
            players.select(2 if players.which == 1 else 1)

        if players.lives > 0:
            game.update_life()
            game.respawn_player()
            if two_players:
                game.field.generate()
                game.player_switch()
                self.wave_num = players.wave
            self.run_wave(self.wave_num)
        else:
            game.check_scores(players.one_score, players.two_score)
            players.reset()

    def centipede_died(self) -> None:
        """The whole centipede is gone: heal the field and start the next wave."""
        self._heal_field()
        self._clear_wave()
        self._spawner.new_wave()
        if self.wave_num < self.wave_amount:
            self.wave_num += 1
        self.run_wave(self.wave_num)

    def centipede_hit_bottom(self) -> None:
        """Note that the centipede reached the bottom row; no solo heads are sent."""
        self.bottom_reached = True

    def pause_critters(self) -> None:
        self._spawner.pause_critters()
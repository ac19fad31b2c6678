# centiped

This package holds the game logic of a Centipede-style arcade shooter as plain
Python objects. It does no rendering, plays no audio and has no dependencies.
Each piece reports what it needs through callbacks or small protocols, so any
front end or test harness can drive it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `centiped.pool`: `Pool` keeps released objects on a stack. `acquire()` hands one of them out again before it builds a new one with the `create` callable. `on_reuse` is called for every object it hands out again, and `current` is the object handed out most recently.
- `centiped.players`: `PlayerManager` holds one `Player` for each `PlayerSlot`: `AI`, `ONE` and `TWO`. A `Player` has a score, lives (3 at the start), a level and a saved mushroom field. `select(which)` switches the active slot. `add_score`, `set_score`, `sub_life`, `save_wave`, `add_to_field`, `remove_from_field`, `clear_fields` and `reset` act on the players. The `on_score` callback receives every score change.
- `centiped.scoring`: `ScoreManager.command(event)` turns a `ScoreEvent` into a command:
  - Every event except a spider kill gives a `ScoreValue` with fixed points. A flea is worth 200, a scorpion 1000, a head 100, a segment 10 and a mushroom 1.
  - A spider kill gives a `SpiderScore`. It pays 900, 600 or 300 points, depending on the distance that the `spider_distance` callable reports.

  `send()` queues a command and `process()` executes the queue in order.
- `centiped.sound`: `SoundManager.command(event)` builds a `SoundCommand` for a `SoundEvent`, and `update()` plays the queued commands through the `play` callable. `SoundBoard` starts in `SoundMode.MUTE`. In that mode `start()` drops sounds, and `toggle_mute()` switches between the two modes.
- `centiped.field`: `MushroomField` is a grid of `Cell`s, keyed by grid position. It provides:
  - `create_mushroom`, `add_to_grid`, `remove_position` and `grid_position` to place and look up cells.
  - `generate()`, which rebuilds the current player's saved field or scatters 10 to 29 mushrooms at random.
  - `heal_all()`, which returns the explosion points of the mushrooms it healed.
  - `save()` and `clear()`.
  - `inspect(row, col)`, which returns an `Obstacle`: `CLEAR`, `BLOCKED` or `POISONED`. The window edge counts as blocked.
- `centiped.movement`: `TurnDownSwitchToLeft`, `TurnDownSwitchToRight`, `TurnUpSwitchToLeft`, `TurnUpSwitchToRight`, `PoisonedTurnSwitchLeft` and `PoisonedTurnSwitchRight` are the turning states of a centipede head. `next_state(head, field, bottom_hit)` returns the `StateName` of the state that follows.
- `centiped.player`: `Blaster` is the player's ship:
  - `move_left`, `move_right`, `move_up` and `move_down` move it only into clear cells.
  - `fire()` allows one bullet at a time, and `reload()` allows the next.
  - `update()` applies the input strategy and keeps the ship inside the player area.
  - `collide()` reports the ship's death.
- `centiped.waves`: `parse_waves(text)` and `load_waves(path)` read the wave-control format into `Wave` records. They raise `WaveFormatError` when the layout is wrong. `WaveManager` runs the waves through a spawner and moves between waves and players with `player_died()` and `centipede_died()`.
- `centiped.text`: `SpriteSheet` cuts a texture into equal cells, and `cell_rect(index)` returns the rectangle of one cell. `SpriteString` lays text out glyph by glyph and places a letter cell on the field for every non-blank character.
- `centiped.critters`: the `Scorpion`, the `Spider` (it changes direction on a timer) and the `SpiderScorePopup`. Their sounds, explosions and score events go out through an `on_event(event, critter)` callback.

## Example

```python
from centiped.players import PlayerManager
from centiped.scoring import ScoreEvent, ScoreManager

players = PlayerManager(on_score=lambda value: None)
scores = ScoreManager(players, spider_distance=lambda: 4)
scores.send(scores.command(ScoreEvent.FLEA_KILLED))
scores.process()
assert players.score == 200
```

## What the package does not do

The package is logic only. It leaves these parts to the code that uses it:

- There is no window, drawing, audio output, keyboard input or game loop, and no command to start a game.
- The centipede head and segments, the forward-moving states that the turning states lead to, bullets, the flea, the HUD and the high-score table are not included.
- `WaveManager` and the critters only call the spawner, game and event hooks that you supply.
from dataclasses import dataclass, field as dc_field

import pytest

from centiped.field import BOTTOM_ROW, TOP_PLAYER_ROW, Obstacle
from centiped.movement import (
    PoisonedTurnSwitchLeft,
    PoisonedTurnSwitchRight,
    StateName,
    TurnDownSwitchToLeft,
    TurnDownSwitchToRight,
    TurnUpSwitchToLeft,
    TurnUpSwitchToRight,
)


@dataclass
class Head:
    row: int = 10
    col: int = 5
    direction: int = 0
    in_player_area: bool = False
    flips: int = 0

    def change_sprite_direction(self):
        self.flips += 1


@dataclass
class Field:
    cells: dict = dc_field(default_factory=dict)
    calls: list = dc_field(default_factory=list)

    def inspect(self, row, col):
        self.calls.append((row, col))
        return self.cells.get((row, col), Obstacle.CLEAR)


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.mark.parametrize(
    "state, name",
    [
        (TurnDownSwitchToLeft(), StateName.TURN_DOWN_SWITCH_TO_LEFT),
        (TurnDownSwitchToRight(), StateName.TURN_DOWN_SWITCH_TO_RIGHT),
        (TurnUpSwitchToLeft(), StateName.TURN_UP_SWITCH_TO_LEFT),
        (TurnUpSwitchToRight(), StateName.TURN_UP_SWITCH_TO_RIGHT),
        (PoisonedTurnSwitchLeft(), StateName.POISONED_TURN_SWITCH_LEFT),
        (PoisonedTurnSwitchRight(), StateName.POISONED_TURN_SWITCH_RIGHT),
    ],
)
def test_state_names(state, name):
    assert state.name is name
    assert str(state) == name.value


@pytest.mark.parametrize(
    "state, expected",
    [
        (TurnDownSwitchToLeft(), StateName.MOVE_LEFT_AND_DOWNWARDS),
        (TurnDownSwitchToRight(), StateName.MOVE_RIGHT_AND_DOWNWARDS),
        (TurnUpSwitchToLeft(), StateName.MOVE_LEFT_AND_UPWARDS),
        (TurnUpSwitchToRight(), StateName.MOVE_RIGHT_AND_UPWARDS),
    ],
)
def test_turn_on_clear_field_keeps_moving(state, expected):
    head = Head()
    grid = Field()
    assert state.next_state(head, grid, None) is expected
    assert head.flips == 1
    assert len(grid.calls) == 2


def test_turn_down_left_blocked_turns_right():
    head = Head(row=10, col=5)
    grid = Field({(8, 5): Obstacle.BLOCKED})
    hits = Counter()
    assert TurnDownSwitchToLeft().next_state(head, grid, hits) is StateName.TURN_DOWN_SWITCH_TO_RIGHT
    assert hits.count == 0
    assert grid.calls == [(8, 5)]


def test_turn_down_left_second_cell_checked():
    head = Head(row=10, col=5)
    grid = Field({(9, 5): Obstacle.POISONED})
    assert TurnDownSwitchToLeft().next_state(head, grid) is StateName.POISONED_TURN_SWITCH_RIGHT
    assert head.flips == 1


def test_turn_down_left_at_bottom_signals_and_goes_up():
    head = Head(row=10, col=BOTTOM_ROW)
    grid = Field({(8, BOTTOM_ROW): Obstacle.BLOCKED})
    hits = Counter()
    assert TurnDownSwitchToLeft().next_state(head, grid, hits) is StateName.TURN_UP_SWITCH_TO_RIGHT
    assert hits.count == 1


def test_turn_down_left_bottom_without_callback():
    head = Head(row=10, col=BOTTOM_ROW)
    grid = Field({(8, BOTTOM_ROW): Obstacle.BLOCKED})
    assert TurnDownSwitchToLeft().next_state(head, grid) is StateName.TURN_UP_SWITCH_TO_RIGHT


def test_turn_down_right_cases():
    state = TurnDownSwitchToRight()
    hits = Counter()
    assert (
        state.next_state(Head(row=10, col=5), Field({(11, 5): Obstacle.BLOCKED}), hits)
        is StateName.TURN_DOWN_SWITCH_TO_LEFT
    )
    assert (
        state.next_state(Head(row=10, col=5), Field({(10, 5): Obstacle.POISONED}), hits)
        is StateName.POISONED_TURN_SWITCH_LEFT
    )
    assert hits.count == 0
    assert (
        state.next_state(
            Head(row=10, col=BOTTOM_ROW), Field({(10, BOTTOM_ROW): Obstacle.BLOCKED}), hits
        )
        is StateName.TURN_UP_SWITCH_TO_LEFT
    )
    assert hits.count == 1


def test_first_obstacle_wins():
    head = Head(row=10, col=5)
    grid = Field({(11, 5): Obstacle.POISONED, (10, 5): Obstacle.BLOCKED})
    assert TurnDownSwitchToRight().next_state(head, grid) is StateName.POISONED_TURN_SWITCH_LEFT
    assert grid.calls == [(11, 5)]


@pytest.mark.parametrize(
    "zone, col, expected",
    [
        (False, TOP_PLAYER_ROW, StateName.TURN_UP_SWITCH_TO_RIGHT),
        (False, 5, StateName.TURN_DOWN_SWITCH_TO_RIGHT),
        (True, 1, StateName.TURN_UP_SWITCH_TO_RIGHT),
        (True, TOP_PLAYER_ROW, StateName.TURN_DOWN_SWITCH_TO_RIGHT),
    ],
)
def test_turn_up_left_blocked(zone, col, expected):
    head = Head(row=10, col=col, in_player_area=zone)
    grid = Field({(8, col): Obstacle.BLOCKED})
    assert TurnUpSwitchToLeft().next_state(head, grid) is expected
    assert head.flips == 1


@pytest.mark.parametrize(
    "zone, col, expected",
    [
        (False, TOP_PLAYER_ROW, StateName.TURN_UP_SWITCH_TO_LEFT),
        (False, 5, StateName.TURN_DOWN_SWITCH_TO_LEFT),
        (True, 1, StateName.TURN_UP_SWITCH_TO_LEFT),
        (True, 5, StateName.TURN_DOWN_SWITCH_TO_LEFT),
    ],
)
def test_turn_up_right_blocked(zone, col, expected):
    head = Head(row=10, col=col, in_player_area=zone)
    grid = Field({(11, col): Obstacle.BLOCKED})
    assert TurnUpSwitchToRight().next_state(head, grid) is expected


def test_turn_up_poison():
    assert (
        TurnUpSwitchToLeft().next_state(Head(row=10, col=5), Field({(8, 5): Obstacle.POISONED}))
        is StateName.POISONED_TURN_SWITCH_RIGHT
    )
    assert (
        TurnUpSwitchToRight().next_state(Head(row=10, col=5), Field({(11, 5): Obstacle.POISONED}))
        is StateName.POISONED_TURN_SWITCH_LEFT
    )


def test_poisoned_left_clear_keeps_falling():
    head = Head(row=10, col=5)
    grid = Field()
    assert PoisonedTurnSwitchLeft().next_state(head, grid) is StateName.POISONED_TURN_SWITCH_RIGHT
    assert head.flips == 1
    assert grid.calls == [(10, 4)]


def test_poisoned_left_blocked_and_poisoned():
    head = Head(row=10, col=5)
    assert (
        PoisonedTurnSwitchLeft().next_state(head, Field({(10, 4): Obstacle.BLOCKED}))
        is StateName.TURN_DOWN_SWITCH_TO_RIGHT
    )
    assert (
        PoisonedTurnSwitchLeft().next_state(head, Field({(10, 4): Obstacle.POISONED}))
        is StateName.POISONED_TURN_SWITCH_RIGHT
    )
    assert head.flips == 0


@pytest.mark.parametrize("direction, flips", [(2, 0), (-2, 1), (0, 1)])
def test_poisoned_left_at_bottom(direction, flips):
    head = Head(row=10, col=BOTTOM_ROW + 1, direction=direction)
    assert PoisonedTurnSwitchLeft().next_state(head, Field()) is StateName.MOVE_LEFT_AND_UPWARDS
    assert head.flips == flips


@pytest.mark.parametrize("direction, flips", [(-2, 0), (2, 1), (0, 1)])
def test_poisoned_right_at_bottom(direction, flips):
    head = Head(row=10, col=BOTTOM_ROW + 1, direction=direction)
    assert PoisonedTurnSwitchRight().next_state(head, Field()) is StateName.MOVE_RIGHT_AND_UPWARDS
    assert head.flips == flips


def test_poisoned_right_cases():
    state = PoisonedTurnSwitchRight()
    head = Head(row=10, col=5)
    assert state.next_state(head, Field()) is StateName.POISONED_TURN_SWITCH_LEFT
    assert head.flips == 1
    assert (
        state.next_state(head, Field({(10, 4): Obstacle.BLOCKED}))
        is StateName.TURN_DOWN_SWITCH_TO_LEFT
    )
    assert (
        state.next_state(head, Field({(10, 4): Obstacle.POISONED}))
        is StateName.POISONED_TURN_SWITCH_LEFT
    )
    assert head.flips == 1
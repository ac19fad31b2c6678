"""Turn states of the centipede head: where it looks next and which state follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, Optional, Protocol

from centiped.field import BOTTOM_ROW, TOP_PLAYER_ROW, Obstacle


class StateName(Enum):
    """Every movement state a centipede head can be in."""

    MOVE_LEFT_AND_DOWNWARDS = "MoveLeftAndDownwards"
    MOVE_RIGHT_AND_DOWNWARDS = "MoveRightAndDownwards"
    MOVE_LEFT_AND_UPWARDS = "MoveLeftAndUpwards"
    MOVE_RIGHT_AND_UPWARDS = "MoveRightAndUpwards"
    TURN_DOWN_SWITCH_TO_LEFT = "TurnDownSwitchToLeft"
    TURN_DOWN_SWITCH_TO_RIGHT = "TurnDownSwitchToRight"
    TURN_UP_SWITCH_TO_LEFT = "TurnUpSwitchToLeft"
    TURN_UP_SWITCH_TO_RIGHT = "TurnUpSwitchToRight"
    POISONED_TURN_SWITCH_LEFT = "Poisoned_TurnSwitchLeft"
    POISONED_TURN_SWITCH_RIGHT = "Poisoned_TurnSwitchRight"


class _Head(Protocol):
    row: int
    col: int
    direction: int
    in_player_area: bool

    def change_sprite_direction(self) -> None: ...


class _Field(Protocol):
    def inspect(self, row: int, col: int) -> Obstacle: ...


BottomHit = Optional[Callable[[], None]]


class MoveState(ABC):
    """A state that decides, from the grid around the head, which state comes next."""

    name: ClassVar[StateName]

    @abstractmethod
    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        """Return the state that follows this one for ``head``."""

    def __str__(self) -> str:
        return self.name.value


def _look(field: _Field, row: int, col: int, second_row: int) -> Obstacle:
    """Inspect one cell and, only if it is clear, a second one in the same column."""
    obstacle = field.inspect(row, col)
    if obstacle is Obstacle.CLEAR:
        obstacle = field.inspect(second_row, col)
    return obstacle


def _signal(bottom_hit: BottomHit) -> None:
    if bottom_hit is not None:
        bottom_hit()


class TurnDownSwitchToLeft(MoveState):
    name = StateName.TURN_DOWN_SWITCH_TO_LEFT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row - 2, head.col
        obstacle = _look(field, row, col, row + 1)
        if obstacle is Obstacle.CLEAR:
            result = StateName.MOVE_LEFT_AND_DOWNWARDS
        elif obstacle is Obstacle.BLOCKED:
            if col != BOTTOM_ROW:
                result = StateName.TURN_DOWN_SWITCH_TO_RIGHT
            else:
                _signal(bottom_hit)
                result = StateName.TURN_UP_SWITCH_TO_RIGHT
        else:
            result = StateName.POISONED_TURN_SWITCH_RIGHT
        head.change_sprite_direction()
        return result


class TurnDownSwitchToRight(MoveState):
    name = StateName.TURN_DOWN_SWITCH_TO_RIGHT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row + 1, head.col
        obstacle = _look(field, row, col, row - 1)
        if obstacle is Obstacle.CLEAR:
            result = StateName.MOVE_RIGHT_AND_DOWNWARDS
        elif obstacle is Obstacle.BLOCKED:
            if col != BOTTOM_ROW:
                result = StateName.TURN_DOWN_SWITCH_TO_LEFT
            else:
                _signal(bottom_hit)
                result = StateName.TURN_UP_SWITCH_TO_LEFT
        else:
            result = StateName.POISONED_TURN_SWITCH_LEFT
        head.change_sprite_direction()
        return result


def _upward_blocked(head: _Head, col: int, up: StateName, down: StateName) -> StateName:
    """Turning upwards into something: keep going up only at the top of the zone."""
    top = 1 if head.in_player_area else TOP_PLAYER_ROW
    return up if col == top else down


class TurnUpSwitchToLeft(MoveState):
    name = StateName.TURN_UP_SWITCH_TO_LEFT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row - 2, head.col
        obstacle = _look(field, row, col, row + 1)
        if obstacle is Obstacle.CLEAR:
            result = StateName.MOVE_LEFT_AND_UPWARDS
        elif obstacle is Obstacle.BLOCKED:
            result = _upward_blocked(
                head, col, StateName.TURN_UP_SWITCH_TO_RIGHT, StateName.TURN_DOWN_SWITCH_TO_RIGHT
            )
        else:
            result = StateName.POISONED_TURN_SWITCH_RIGHT
        head.change_sprite_direction()
        return result


class TurnUpSwitchToRight(MoveState):
    name = StateName.TURN_UP_SWITCH_TO_RIGHT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row + 1, head.col
        obstacle = _look(field, row, col, row - 1)
        if obstacle is Obstacle.CLEAR:
            result = StateName.MOVE_RIGHT_AND_UPWARDS
        elif obstacle is Obstacle.BLOCKED:
            result = _upward_blocked(
                head, col, StateName.TURN_UP_SWITCH_TO_LEFT, StateName.TURN_DOWN_SWITCH_TO_LEFT
            )
        else:
            result = StateName.POISONED_TURN_SWITCH_LEFT
        head.change_sprite_direction()
        return result


class PoisonedTurnSwitchLeft(MoveState):
    name = StateName.POISONED_TURN_SWITCH_LEFT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row, head.col - 1
        obstacle = field.inspect(row, col)
        if obstacle is Obstacle.CLEAR:
            if col == BOTTOM_ROW:
                if head.direction != 2:
                    head.change_sprite_direction()
                return StateName.MOVE_LEFT_AND_UPWARDS
            head.change_sprite_direction()
            return StateName.POISONED_TURN_SWITCH_RIGHT
        if obstacle is Obstacle.BLOCKED:
            return StateName.TURN_DOWN_SWITCH_TO_RIGHT
        return StateName.POISONED_TURN_SWITCH_RIGHT


class PoisonedTurnSwitchRight(MoveState):
    name = StateName.POISONED_TURN_SWITCH_RIGHT

    def next_state(self, head: _Head, field: _Field, bottom_hit: BottomHit = None) -> StateName:
        row, col = head.row, head.col - 1
        obstacle = field.inspect(row, col)
        if obstacle is Obstacle.CLEAR:
            if col == BOTTOM_ROW:
                if head.direction != -2:
                    head.change_sprite_direction()
                return StateName.MOVE_RIGHT_AND_UPWARDS
            head.change_sprite_direction()
            return StateName.POISONED_TURN_SWITCH_LEFT
        if obstacle is Obstacle.BLOCKED:
            return StateName.TURN_DOWN_SWITCH_TO_LEFT
        return StateName.POISONED_TURN_SWITCH_LEFT
"""Cursor movement over a terrain grid."""
from __future__ import annotations

from enum import Enum

from tick_overworld.types import Grid, terrain_of


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_KEY_DIRECTIONS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "up": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Map an input name ("ArrowUp", "left", "w", ...) to a Direction, or None."""
    return _KEY_DIRECTIONS.get(key.lower())


def _target(grid: Grid, columns: int, cursor: int, direction: Direction) -> int | None:
    """Index the cursor would step to, or None if that leaves the grid."""
    if direction is Direction.UP:
        target = cursor - columns
        return target if target >= 0 else None
    if direction is Direction.DOWN:
        target = cursor + columns
        return target if target < len(grid) else None
    if direction is Direction.LEFT:
        return cursor - 1 if cursor % columns > 0 else None
    if direction is Direction.RIGHT:
        return cursor + 1 if cursor % columns < columns - 1 else None
    return None


def can_enter(grid: Grid, index: int) -> bool:
    return terrain_of(grid[index]).passable


def next_position(grid: Grid, columns: int, cursor: int, direction: Direction) -> int:
    """Cursor after one step in ``direction``.

    Steps off the grid or onto impassable terrain are rejected silently and
    return ``cursor`` unchanged.
    """
    target = _target(grid, columns, cursor, direction)
    if target is None or not can_enter(grid, target):
        return cursor
    return target

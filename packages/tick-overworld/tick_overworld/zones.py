"""Randomized flood fill that grows one contiguous terrain zone."""
from __future__ import annotations

import random

from tick_overworld.types import Grid


def neighbors(index: int, rows: int, columns: int) -> list[int]:
    """Orthogonal neighbours of a flat index, in up/down/left/right order.

    Left and right never cross a row boundary.
    """
    size = rows * columns
    column = index % columns
    result: list[int] = []
    up = index - columns
    if up >= 0:
        result.append(up)
    down = index + columns
    if down < size:
        result.append(down)
    if column > 0:
        result.append(index - 1)
    if column < columns - 1:
        result.append(index + 1)
    return result


def fill_zone(
    grid: Grid,
    rows: int,
    columns: int,
    terrain: int,
    target: int,
    rng: random.Random,
) -> int:
    """Paint up to ``target`` connected cells with ``terrain``, starting at a random cell.

    Depth-first: the most recently discovered neighbour is expanded next, which
    gives the zones their meandering shape. Returns the number of cells set,
    which is less than ``target`` when the reachable region is smaller.
    """
    size = rows * columns
    if target <= 0 or size <= 0:
        return 0

    start = rng.randrange(size)
    visited: set[int] = set()
    stack = [start]
    filled = 0

    while stack and filled < target:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        grid[current] = terrain
        filled += 1

        for n in neighbors(current, rows, columns):
            if n not in visited:
                stack.append(n)

    return filled

# src/levelgen/mapgen/connect.py
# Orthogonal road between waypoints: a drop from the first waypoint to the
# floor, then for each pair a run to the right followed by a run up or down.

from typing import Sequence

from ..errors import EmptyWaypointError
from ..grid import Grid, Position

UP, DOWN, RIGHT = (0, 1), (0, -1), (1, 0)

def _walk(grid: Grid, start: Position, step: Position, count: int, tile: int) -> Position:
    # Writes `count` cells past `start` (start itself untouched); returns the last cell.
    x, y = start
    dx, dy = step
    for _ in range(count):
        x, y = x + dx, y + dy
        grid.set((x, y), tile)
    return (x, y)

def drop_to_floor(grid: Grid, start: Position, tile: int) -> Position:
    floor_y = grid.origin[1]
    return _walk(grid, start, DOWN, abs(floor_y - start[1]), tile)

def run_right(grid: Grid, current: Position, target: Position, tile: int) -> Position:
    return _walk(grid, current, RIGHT, target[0] - current[0], tile)

def run_vertical(grid: Grid, current: Position, target: Position, tile: int) -> Position:
    step = UP if target[1] - current[1] > 0 else DOWN
    return _walk(grid, current, step, abs(target[1] - current[1]), tile)

def connect_waypoints(grid: Grid, waypoints: Sequence[Position], tile: int) -> None:
    """
    Draw the connective road for `waypoints` (column order).
    Only writes; running it twice leaves the same set of cells.
    """
    if not waypoints:
        raise EmptyWaypointError("cannot connect an empty waypoint list")

    drop_to_floor(grid, waypoints[0], tile)

    for a, b in zip(waypoints, waypoints[1:]):
        pos = run_right(grid, a, b, tile)
        run_vertical(grid, pos, b, tile)

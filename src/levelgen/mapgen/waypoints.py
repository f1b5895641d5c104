# src/levelgen/mapgen/waypoints.py
# Column-by-column waypoint placement for the road.
# Columns run left to right from origin.x; rows are drawn from
# [origin.y, origin.y + 2 * (height // 2)] inclusive, so the default origin
# gives [-(height // 2), height // 2].

import logging
from typing import List

from ..config import LevelConfig
from ..errors import ConfigurationError
from ..grid import Grid, Position

logger = logging.getLogger(__name__)

MAX_ROW_ATTEMPTS = 64

def is_candidate(column: int, width: int) -> bool:
    # Every other column, plus the last one so the road reaches the right edge.
    return column % 2 == 0 or column == width - 1

def pick_row(rng, lo: int, hi: int, previous: int, min_separation: int) -> int:
    """
    Draw a row in [lo, hi] at least `min_separation` away from `previous`.
    Redraws up to MAX_ROW_ATTEMPTS times, then picks among the rows that fit.
    """
    row = rng.randint(lo, hi)
    attempts = 1
    while abs(row - previous) < min_separation:
        if attempts >= MAX_ROW_ATTEMPTS:
            fits = [r for r in range(lo, hi + 1) if abs(r - previous) >= min_separation]
            if not fits:
                raise ConfigurationError(
                    f"no row in [{lo}, {hi}] is {min_separation} away from {previous}"
                )
            logger.debug("row draw exhausted after %s attempts, picking from %s", attempts, fits)
            return fits[rng.randrange(0, len(fits))]
        row = rng.randint(lo, hi)
        attempts += 1
    return row

def place_waypoints(grid: Grid, config: LevelConfig, rng) -> List[Position]:
    """
    Walk the columns, keep a random subset, and pick a row for each kept column.
    Writes a road tile at every waypoint and marks the last one as road end.
    """
    width = config.width
    x0, _ = config.columns()
    lo, hi = config.rows()
    tiles = config.tiles

    placed: List[Position] = []
    last_row = config.seed_row()

    for column in range(width):
        if not is_candidate(column, width):
            continue

        if column != 0 and column != width - 1:
            if rng.randrange(0, config.skip_odds) == 0:
                logger.debug("skipped column %s", x0 + column)
                continue

        row = pick_row(rng, lo, hi, last_row, config.min_separation)
        last_row = row

        pos = (x0 + column, row)
        grid.set(pos, tiles.road)
        placed.append(pos)

    if placed:
        grid.set(placed[-1], tiles.road_end)

    logger.debug("placed %s waypoints: %s", len(placed), placed)
    return placed

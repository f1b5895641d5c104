# src/levelgen/mapgen/generator.py
# Level generator: waypoints -> road -> background -> border.

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import LevelConfig
from ..grid import Grid, Position
from ..tiles import tile_name
from .border import place_border
from .connect import connect_waypoints
from .fill import fill_background
from .waypoints import place_waypoints

logger = logging.getLogger(__name__)

@dataclass
class Level:
    grid: Grid
    waypoints: List[Position] = field(default_factory=list)
    border: List[Position] = field(default_factory=list)

    @property
    def start(self) -> Optional[Position]:
        return self.waypoints[0] if self.waypoints else None

    @property
    def end(self) -> Optional[Position]:
        return self.waypoints[-1] if self.waypoints else None

def build(config: LevelConfig, rng) -> Level:
    """Run every pass on a fresh grid anchored at config.origin."""
    tiles = config.tiles
    grid = Grid(origin=config.origin)

    waypoints = place_waypoints(grid, config, rng)
    if len(waypoints) > 1:
        connect_waypoints(grid, waypoints, tiles.road)
        # The last run lands on the final waypoint; restore the end marker.
        grid.set(waypoints[-1], tiles.road_end)
    if waypoints:
        logger.debug("%s at %s", tile_name(tiles.road_end), waypoints[-1])

    filled = fill_background(grid, tiles.background)
    border = place_border(grid, tiles.border)
    logger.debug(
        "built level: %s waypoints, %s background cells, %s border cells, size %s",
        len(waypoints), filled, len(border), grid.size(),
    )
    return Level(grid=grid, waypoints=waypoints, border=border)

def generate_level(config: LevelConfig, rng, grid: Optional[Grid] = None) -> Level:
    """
    Generate a level into `grid` (a new one when omitted).

    The config is validated and the level built on a scratch grid first;
    the target grid is only cleared and written once everything succeeded,
    so a failing run leaves it as it was.
    """
    config.validate()
    level = build(config, rng)
    if grid is None:
        return level

    grid.clear()
    grid.origin = level.grid.origin
    grid.update(level.grid)
    level.grid = grid
    return level

def regenerate(grid: Grid, config: LevelConfig, rng) -> Level:
    return generate_level(config, rng, grid=grid)

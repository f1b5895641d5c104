# Canonical tile IDs (default catalog for the generator)
from dataclasses import dataclass

ROAD = 10        # basic road
ROAD_END = 11    # end stone
BACKGROUND = 20  # grass
BORDER = 30      # brick

NAMES = {
    ROAD: "road",
    ROAD_END: "road_end",
    BACKGROUND: "background",
    BORDER: "border",
}

@dataclass(frozen=True)
class TileRoles:
    road: int = ROAD
    road_end: int = ROAD_END
    background: int = BACKGROUND
    border: int = BORDER

def tile_name(tile: int) -> str:
    return NAMES.get(tile, str(tile))

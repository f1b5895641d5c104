# src/levelgen/render/text.py
from typing import Dict, Optional

from ..grid import Grid
from ..tiles import TileRoles

def glyphs_for(tiles: TileRoles) -> Dict[int, str]:
    return {
        tiles.road: "=",
        tiles.road_end: "E",
        tiles.background: ".",
        tiles.border: "#",
    }

def render_text(grid: Grid, tiles: Optional[TileRoles] = None) -> str:
    """One character per cell, top row first; empty cells are spaces, unknown tiles '?'."""
    glyphs = glyphs_for(tiles or TileRoles())
    lines = []
    for row in grid.as_matrix(empty=-1):
        lines.append("".join(" " if t == -1 else glyphs.get(t, "?") for t in row))
    return "\n".join(lines)

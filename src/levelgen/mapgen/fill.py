# src/levelgen/mapgen/fill.py
from ..grid import Grid

def fill_background(grid: Grid, tile: int) -> int:
    """
    Fill every empty cell of the occupied box (size taken from the bounds,
    anchored at grid.origin) with `tile`. Returns how many cells were written;
    occupied cells are never touched, so a second pass writes nothing.
    """
    w, h = grid.size()
    ox, oy = grid.origin
    written = 0
    for i in range(w):
        for j in range(h):
            pos = (ox + i, oy + j)
            if grid.get(pos) is None:
                grid.set(pos, tile)
                written += 1
    return written

# src/levelgen/mapgen/border.py
# Rectangle contour tracing and the border wall around a filled level.

from typing import List

from ..grid import Grid, Position

def trace_contour(top_left: Position, bottom_right: Position) -> List[Position]:
    """
    Perimeter of the rectangle spanned by the two corners, in a normalized
    frame: i runs along the longer side, j along the shorter one. Cells are
    emitted row by row along i with no duplicates. A zero-length side gives [].
    """
    height = abs(top_left[1] - bottom_right[1])
    width = abs(top_left[0] - bottom_right[0])
    long_axis = max(height, width)
    short_axis = min(height, width)

    out = []
    for i in range(long_axis):
        for j in range(short_axis):
            if i == 0 or i == long_axis - 1:
                out.append((i, j))
            elif j == 0 or j == short_axis - 1:
                out.append((i, j))
    return out

def place_border(grid: Grid, tile: int) -> List[Position]:
    """
    Wall in the occupied box, one cell outside it on every side.
    Returns the absolute border cells written (empty when the grid is empty).
    """
    b = grid.bounds()
    if b is None:
        return []
    (x0, y0), (x1, y1) = b
    top_left = (x0 - 1, y0 - 1)
    bottom_right = (x1 + 1, y1 + 1)

    # Offsets are from the expanded min corner, which is origin - (1, 1) since
    # waypoints, floor and fill all start at the origin.
    # trace_contour puts the longer side on i; swap back for tall boxes.
    tall = (y1 - y0) > (x1 - x0)
    cells = []
    for i, j in trace_contour(top_left, bottom_right):
        dx, dy = (j, i) if tall else (i, j)
        pos = (top_left[0] + dx, top_left[1] + dy)
        grid.set(pos, tile)
        cells.append(pos)
    return cells

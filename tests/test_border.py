from levelgen.grid import Grid
from levelgen.mapgen.border import place_border, trace_contour

BRICK = 30

def test_contour_5x3_is_perimeter_only():
    cells = trace_contour((0, 0), (5, 3))
    assert len(cells) == 12
    assert len(set(cells)) == 12
    interior = {(1, 1), (2, 1), (3, 1)}
    assert not interior & set(cells)
    assert all(0 <= i < 5 and 0 <= j < 3 for i, j in cells)

def test_contour_puts_long_side_on_i():
    assert sorted(trace_contour((0, 0), (3, 5))) == sorted(trace_contour((0, 0), (5, 3)))
    assert sorted(trace_contour((5, 3), (0, 0))) == sorted(trace_contour((0, 0), (5, 3)))

def test_contour_degenerate_sizes():
    assert trace_contour((0, 0), (0, 0)) == []
    assert trace_contour((0, 0), (0, 5)) == []
    assert trace_contour((0, 0), (4, 1)) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert trace_contour((0, 0), (1, 1)) == [(0, 0)]

def _is_ring(cells, x0, y0, x1, y1):
    # x1/y1 inclusive
    expect = {(x, y) for x in range(x0, x1 + 1) for y in range(y0, y1 + 1)
              if x in (x0, x1) or y in (y0, y1)}
    return set(cells) == expect and len(cells) == len(expect)

def test_border_wraps_wide_box():
    g = Grid()
    for x in range(4):
        for y in range(2):
            g.set((x, y), 1)
    cells = place_border(g, BRICK)
    assert _is_ring(cells, -1, -1, 4, 2)
    assert all(g.get(p) == BRICK for p in cells)
    assert g.get((1, 1)) == 1

def test_border_wraps_tall_box():
    g = Grid()
    for x in range(2):
        for y in range(4):
            g.set((x, y), 1)
    cells = place_border(g, BRICK)
    assert len(cells) == 16
    assert _is_ring(cells, -1, -1, 2, 4)

def test_border_on_empty_grid():
    assert place_border(Grid(), BRICK) == []

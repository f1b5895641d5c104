# tests/test_waypoints.py
import random

import pytest

from levelgen.config import LevelConfig
from levelgen.errors import ConfigurationError
from levelgen.grid import Grid
from levelgen.mapgen.waypoints import pick_row, place_waypoints
from levelgen.rng import PMRandom
from levelgen.tiles import ROAD, ROAD_END

class ScriptedRng:
    """randrange always returns `skip`; randint walks through `rows`."""
    def __init__(self, rows, skip=1):
        self.rows = iter(rows)
        self.skip = skip
    def randrange(self, lo, hi):
        return self.skip
    def randint(self, lo, hi):
        return next(self.rows)

def run(seed, **kw):
    cfg = LevelConfig(**kw)
    g = Grid(origin=cfg.origin)
    return g, place_waypoints(g, cfg, PMRandom.from_seed(seed))

def test_spans_first_and_last_column():
    for width in (2, 3, 12, 13, 40):
        for seed in range(1, 30):
            _, wps = run(seed, width=width)
            assert wps, f"no waypoints for width {width} seed {seed}"
            assert wps[0][0] == -(width // 2)
            assert wps[-1][0] == -(width // 2) + width - 1

def test_rows_keep_min_separation():
    for seed in range(1, 60):
        _, wps = run(seed)
        prev = 0
        for x, y in wps:
            assert -4 <= y <= 4
            assert abs(y - prev) >= 3, f"seed {seed}: {wps}"
            prev = y

def test_columns_strictly_increase():
    for seed in range(1, 30):
        _, wps = run(seed, width=25)
        xs = [x for x, _ in wps]
        assert all(b - a >= 1 for a, b in zip(xs, xs[1:]))

def test_tiles_written_with_end_marker():
    g, wps = run(5)
    assert g.get(wps[-1]) == ROAD_END
    for p in wps[:-1]:
        assert g.get(p) == ROAD
    assert set(g) == set(wps)

def test_interior_candidates_skipped_on_zero_draw():
    cfg = LevelConfig()
    g = Grid(origin=cfg.origin)
    wps = place_waypoints(g, cfg, ScriptedRng([4, -4], skip=0))
    assert wps == [(-6, 4), (5, -4)]

def test_every_other_column_plus_last():
    cfg = LevelConfig()
    g = Grid(origin=cfg.origin)
    wps = place_waypoints(g, cfg, ScriptedRng([3, -3] * 4, skip=1))
    assert [x for x, _ in wps] == [-6, -4, -2, 0, 2, 4, 5]

def test_zero_width_places_nothing():
    cfg = LevelConfig(width=0)
    g = Grid()
    assert place_waypoints(g, cfg, PMRandom.from_seed(1)) == []
    assert len(g) == 0

def test_single_column_is_road_end():
    g, wps = run(3, width=1)
    assert len(wps) == 1
    assert wps[0][0] == 0
    assert g.get(wps[0]) == ROAD_END

def test_stdlib_random_is_accepted():
    cfg = LevelConfig()
    wps = place_waypoints(Grid(origin=cfg.origin), cfg, random.Random(7))
    assert wps[0][0] == -6 and wps[-1][0] == 5

def test_pick_row_falls_back_when_draws_never_fit():
    # Draws keep landing on the previous row; the fallback takes fits[0].
    rng = ScriptedRng([0] * 100, skip=0)
    assert pick_row(rng, -4, 4, 0, 3) == -4

def test_pick_row_unsatisfiable_raises():
    rng = ScriptedRng([0] * 100)
    with pytest.raises(ConfigurationError):
        pick_row(rng, 0, 0, 0, 3)

def test_rows_follow_origin():
    cfg = LevelConfig(origin=(10, 20))
    assert cfg.rows() == (20, 28)
    for seed in range(1, 30):
        _, wps = run(seed, origin=(10, 20))
        assert wps[0][0] == 10 and wps[-1][0] == 21
        prev = cfg.seed_row()
        for _, y in wps:
            assert 20 <= y <= 28
            assert abs(y - prev) >= 3
            prev = y

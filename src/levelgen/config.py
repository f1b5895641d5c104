from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .errors import ConfigurationError
from .tiles import TileRoles


def row_range(height: int) -> Tuple[int, int]:
    """Inclusive row bounds waypoints are drawn from."""
    return -(height // 2), height // 2


def column_start(width: int) -> int:
    return -(width // 2)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class LevelConfig:
    # Defaults mirror the original 12x8 map with origin (-6, -4).
    width: int = 12
    height: int = 8
    origin: Optional[Tuple[int, int]] = None
    min_separation: int = 3
    skip_odds: int = 9
    tiles: TileRoles = field(default_factory=TileRoles)

    def __post_init__(self):
        if self.origin is None:
            object.__setattr__(self, "origin", (column_start(self.width), row_range(self.height)[0]))
        else:
            object.__setattr__(self, "origin", tuple(self.origin))

    def columns(self) -> Tuple[int, int]:
        """First and last column x, counted from origin.x."""
        return self.origin[0], self.origin[0] + self.width - 1

    def rows(self) -> Tuple[int, int]:
        """Inclusive waypoint row bounds; the floor row is origin.y."""
        lo = self.origin[1]
        return lo, lo + 2 * (self.height // 2)

    def seed_row(self) -> int:
        # Row the first waypoint is kept away from (0 for the default origin).
        return self.origin[1] + self.height // 2

    def validate(self) -> "LevelConfig":
        """Raise ConfigurationError for settings generation cannot honour."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.min_separation < 0:
            raise ConfigurationError("min_separation must be >= 0")
        if self.skip_odds < 1:
            raise ConfigurationError("skip_odds must be >= 1")
        lo, hi = self.rows()
        # Any row in [lo, hi] (seed row included) can be the previous one.
        for prev in range(lo, hi + 1):
            if max(prev - lo, hi - prev) < self.min_separation:
                raise ConfigurationError(
                    f"min_separation {self.min_separation} cannot be met with height {self.height}"
                )
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LevelConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown config keys: {sorted(unknown)}")
        for key in ("width", "height", "min_separation", "skip_odds"):
            if key in data and not _is_int(data[key]):
                raise ConfigurationError(f"'{key}' must be an integer, got {data[key]!r}")
        kwargs = dict(data)
        if "tiles" in kwargs:
            tiles = kwargs["tiles"]
            if not isinstance(tiles, dict):
                raise ConfigurationError("'tiles' must be a mapping of role -> tile id")
            bad = {k: v for k, v in tiles.items() if not _is_int(v)}
            if bad:
                raise ConfigurationError(f"tile ids must be integers: {bad}")
            try:
                kwargs["tiles"] = TileRoles(**tiles)
            except TypeError as e:
                raise ConfigurationError(f"bad tile roles: {e}") from e
        if kwargs.get("origin") is not None:
            origin = kwargs["origin"]
            if not isinstance(origin, (list, tuple)) or len(origin) != 2 or not all(map(_is_int, origin)):
                raise ConfigurationError("'origin' must be [x, y]")
            kwargs["origin"] = (int(origin[0]), int(origin[1]))
        return cls(**kwargs)

    def with_overrides(self, **changes: Any) -> "LevelConfig":
        """Copy with some fields replaced; origin is re-derived unless given."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if ("width" in changes or "height" in changes) and "origin" not in changes:
            changes["origin"] = None
        return replace(self, **changes)


def load_config(path: Path) -> LevelConfig:
    """Load a JSON level config.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed LevelConfig (not yet validated).

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the JSON is malformed, badly typed or has unknown keys.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path}: invalid JSON at line {e.lineno}, col {e.colno}: {e.msg}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be an object")
    return LevelConfig.from_dict(data)

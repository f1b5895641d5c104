from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

Position = Tuple[int, int]

@dataclass
class Grid:
    """
    Sparse tile store over integer (x, y) cells, y growing upward.

    `origin` is the grid origin offset; the generator treats origin.y as
    the floor row and fills the background starting from origin.
    """
    origin: Position = (0, 0)
    cells: Dict[Position, int] = field(default_factory=dict)

    def get(self, pos: Position) -> Optional[int]:
        return self.cells.get(pos)

    def set(self, pos: Position, tile: int) -> None:
        self.cells[pos] = tile

    def clear(self) -> None:
        self.cells.clear()

    def update(self, other: "Grid") -> None:
        self.cells.update(other.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.cells)

    def bounds(self) -> Optional[Tuple[Position, Position]]:
        """
        Bounding box of occupied cells as (min, max): min is inclusive,
        max exclusive (one past the last occupied cell on each axis).
        None when the grid is empty.
        """
        if not self.cells:
            return None
        xs = [x for x, _ in self.cells]
        ys = [y for _, y in self.cells]
        return (min(xs), min(ys)), (max(xs) + 1, max(ys) + 1)

    def size(self) -> Tuple[int, int]:
        b = self.bounds()
        if b is None:
            return (0, 0)
        (x0, y0), (x1, y1) = b
        return (x1 - x0, y1 - y0)

    def as_matrix(self, empty: int = 0) -> List[List[int]]:
        """Rows top to bottom over the bounding box; `empty` marks holes."""
        b = self.bounds()
        if b is None:
            return []
        (x0, y0), (x1, y1) = b
        out = []
        for y in range(y1 - 1, y0 - 1, -1):
            out.append([self.cells.get((x, y), empty) for x in range(x0, x1)])
        return out

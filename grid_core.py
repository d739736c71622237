# grid_core.py
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

# Import from other project modules
import constants as const


@dataclass(frozen=True)
class MapConfig:
    """Grid dimensions and the seed that drives generation."""

    width: int = const.DEFAULT_MAP_WIDTH
    height: int = const.DEFAULT_MAP_HEIGHT
    seed: int = const.DEFAULT_MAP_SEED

    def __post_init__(self):
        for name in ("width", "height", "seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Map {name} must be an int, got {value!r}.")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Map width and height must be positive (got {self.width}x{self.height})."
            )
        if self.width * self.height < const.MIN_CELL_COUNT:
            raise ValueError(
                f"Map needs at least {const.MIN_CELL_COUNT} cells, "
                f"{self.width}x{self.height} has {self.width * self.height}."
            )
        if not (0 <= self.seed <= const.MAX_SEED):
            raise ValueError(f"Seed must be a 64-bit unsigned integer, got {self.seed}.")

    def size(self) -> int:
        """Returns the total number of cells."""
        return self.width * self.height

    @property
    def dimensions(self) -> Tuple[float, float]:
        return (float(self.width), float(self.height))


class Connection:
    """A passage between two adjacent cells, stored as an unordered pair."""

    __slots__ = ("a", "b")

    def __init__(self, from_cell: int, to_cell: int):
        self.a = min(from_cell, to_cell)
        self.b = max(from_cell, to_cell)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.a, self.b)

    def __repr__(self) -> str:
        return f"Connection({self.a}, {self.b})"

    def __hash__(self):
        return hash((self.a, self.b))

    def __eq__(self, other):
        return isinstance(other, Connection) and self.as_tuple() == other.as_tuple()


class GridIndex:
    """
    Row-major addressing for a width x height grid of cells.
    index = row * width + column. index_of is the only bounds check.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Grid width and height must be positive.")
        self.width = width
        self.height = height

    @classmethod
    def from_config(cls, config: MapConfig) -> "GridIndex":
        return cls(config.width, config.height)

    def coords_of(self, index: int) -> Tuple[int, int]:
        """Returns (column, row) for a linear index. No bounds check."""
        return (index % self.width, index // self.width)

    def index_of(self, column: int, row: int) -> Optional[int]:
        """Returns the linear index, or None if (column, row) is off the grid."""
        if 0 <= column < self.width and 0 <= row < self.height:
            return row * self.width + column
        return None

    def neighbors(self, index: int) -> List[int]:
        """In-bounds right/left/down/up neighbours, in that fixed order."""
        column, row = self.coords_of(index)
        neighbours = []
        for d_col, d_row in const.NEIGHBOUR_OFFSETS:
            neighbour = self.index_of(column + d_col, row + d_row)
            if neighbour is not None:
                neighbours.append(neighbour)
        return neighbours

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.width * self.height

    def cells(self) -> Iterator[int]:
        """Returns an iterator over all cell indices in row-major order."""
        yield from range(self.size())

    def __repr__(self) -> str:
        return f"GridIndex({self.width}x{self.height})"

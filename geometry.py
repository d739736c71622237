# geometry.py
import numpy as np
from typing import Iterable, List, Set

# Import from other project modules
from grid_core import Connection, GridIndex
import constants as const
from utils import Segment, as_point, normalize, perpendicular


def wall_between(grid: GridIndex, cell: int, neighbour: int) -> Segment:
    """
    Returns the unit-length wall on the shared boundary of two adjacent cells.
    The wall is centred on the midpoint between the cell centres and runs
    perpendicular to the line joining them.
    """
    v1 = np.array(grid.coords_of(cell), dtype=float)
    v2 = np.array(grid.coords_of(neighbour), dtype=float)

    half_wall = normalize(perpendicular(v2 - v1)) * const.WALL_HALF_LENGTH
    middle_point = (v1 + v2) / 2.0

    return (as_point(middle_point + half_wall), as_point(middle_point - half_wall))


def boundary_walls(width: int, height: int) -> List[Segment]:
    """Outer rectangle, half a cell beyond the outermost cell centres."""
    offset = const.BOUNDARY_OFFSET
    max_x = float(width - 1) + offset
    max_y = float(height - 1) + offset
    min_x = min_y = -offset

    left_bottom = (min_x, min_y)
    right_bottom = (max_x, min_y)
    right_top = (max_x, max_y)
    left_top = (min_x, max_y)

    return [
        (left_bottom, right_bottom),
        (right_bottom, right_top),
        (right_top, left_top),
        (left_top, left_bottom),
    ]


def extract_walls(grid: GridIndex, connections: Iterable[Connection]) -> List[Segment]:
    """
    Extracts every wall segment for a carved grid.

    Each cell is checked against each of its neighbours; any adjacency that
    is not a carved connection gets a wall. Adjacencies are visited from both
    sides, so every interior wall appears twice. The four boundary walls are
    appended last.
    """
    print("--- Extracting Wall Segments ---")
    carved: Set[Connection] = set(connections)
    walls: List[Segment] = []

    for cell in grid.cells():
        for neighbour in grid.neighbors(cell):
            if Connection(cell, neighbour) in carved:
                continue
            walls.append(wall_between(grid, cell, neighbour))

    interior_count = len(walls)
    walls.extend(boundary_walls(grid.width, grid.height))
    print(f"  Found {interior_count} interior segments + 4 boundary segments.")
    return walls

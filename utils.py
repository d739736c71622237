# utils.py
import numpy as np
from typing import List, Sequence, Tuple

import constants as const
from constants import GEOMETRY_TOLERANCE

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def normalize(vector: np.ndarray) -> np.ndarray:
    """Normalizes a numpy vector."""
    norm = np.linalg.norm(vector)
    if norm < GEOMETRY_TOLERANCE:
        # Degenerate direction, nothing sensible to scale
        return np.zeros_like(vector)
    return vector / norm


def perpendicular(vector: np.ndarray) -> np.ndarray:
    """Rotates a 2D vector by +90 degrees: (x, y) -> (-y, x)."""
    return np.array([-vector[1], vector[0]], dtype=float)


def as_point(vector: np.ndarray) -> Point:
    """Converts a 2D numpy vector to a plain (x, y) float tuple."""
    return (float(vector[0]), float(vector[1]))


def to_world_space(
    segments: Sequence[Segment],
    cell_size: float = const.RENDER_CELL_SIZE,
    offset: Tuple[float, float] = const.RENDER_OFFSET,
) -> List[Segment]:
    """
    Maps wall segments from cell coordinates into world coordinates.
    Each point becomes (point - offset) * cell_size, which is how the game
    renderer places the walls on screen.
    """
    if cell_size <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size}.")
    offset_vec = np.asarray(offset, dtype=float)
    world_segments: List[Segment] = []
    for p1, p2 in segments:
        a = (np.asarray(p1, dtype=float) - offset_vec) * cell_size
        b = (np.asarray(p2, dtype=float) - offset_vec) * cell_size
        world_segments.append((as_point(a), as_point(b)))
    return world_segments

# maze_gen.py
import numpy as np
from typing import Iterator, List, Set, Tuple

# Import from other project modules
from grid_core import Connection, GridIndex, MapConfig
from geometry import extract_walls
from utils import Segment


class Maze:
    """
    A rectangular grid carved into a spanning tree of corridors.

    The maze owns its random generator, seeded once from the config, so the
    same config always produces the same corridors and walls. Call generate()
    once, then query walls().
    """

    def __init__(self, config: MapConfig):
        self.config = config
        self.grid = GridIndex.from_config(config)
        self.rng = np.random.default_rng(config.seed)
        self._path: List[Connection] = []
        self._generated = False

    @property
    def is_generated(self) -> bool:
        return self._generated

    @property
    def connections(self) -> Tuple[Connection, ...]:
        """Carved connections in the order they were added."""
        return tuple(self._path)

    def generate(self):
        """
        Carves passages using the Recursive Backtracking algorithm.
        Can only be run once per Maze.
        """
        if self._generated:
            raise RuntimeError("Maze already generated; build a new Maze to regenerate.")

        size = self.grid.size()
        print(f"--- Starting Map Generation ({self.grid.width}x{self.grid.height}, seed={self.config.seed}) ---")

        start_cell = int(self.rng.integers(0, size))
        print(f"  Starting maze generation at cell: {start_cell}")

        visited_count = self._recursive_backtracking(start_cell)
        self._generated = True

        print(f"--- Map Generation Complete: Linked {visited_count}/{size} cells with {len(self._path)} passages. ---")

        # Sanity check: a rectangular grid is always fully reachable
        if visited_count < size:
            print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")
            print(f"ERROR: MAP GENERATION FAILED TO VISIT ALL CELLS! Visited {visited_count}/{size}.")
            print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")

    def _shuffled_neighbors(self, cell: int) -> Iterator[int]:
        neighbours = self.grid.neighbors(cell)
        self.rng.shuffle(neighbours)
        return iter(neighbours)

    def _recursive_backtracking(self, start_cell: int) -> int:
        # Explicit stack of (cell, remaining shuffled neighbours). Neighbours are
        # shuffled when a cell is entered, matching the recursive visiting order.
        visited: Set[int] = {start_cell}
        stack = [(start_cell, self._shuffled_neighbors(start_cell))]

        while stack:
            current_cell, pending = stack[-1]
            neighbour = next(pending, None)

            if neighbour is None:
                # Exhausted, backtrack
                stack.pop()
                continue
            if neighbour in visited:
                continue

            self._path.append(Connection(current_cell, neighbour))
            shuffled = self._shuffled_neighbors(neighbour)
            visited.add(neighbour)
            stack.append((neighbour, shuffled))

        return len(visited)

    def walls(self) -> List[Segment]:
        """Wall segments for every uncarved adjacency plus the outer boundary."""
        if not self._generated:
            raise RuntimeError("Maze has not been generated yet; call generate() first.")
        return extract_walls(self.grid, self._path)

    def __repr__(self) -> str:
        state = "generated" if self._generated else "empty"
        return f"Maze({self.grid.width}x{self.grid.height}, seed={self.config.seed}, {state})"

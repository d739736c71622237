# visualization.py
import matplotlib.pyplot as plt
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

# Import from other project modules
from maze_gen import Maze
import constants as const


# --- Pathfinding (Often used with visualization) ---
def find_path(maze: Maze, start: int, end: int) -> Optional[List[int]]:
    """Finds the path between two cells using Breadth-First Search on carved connections."""
    print(f"--- Finding path from {start} to {end} ---")
    size = maze.grid.size()
    if not (0 <= start < size and 0 <= end < size):
        print("ERROR: Invalid start or end cell provided.")
        return None

    # Adjacency from the spanning tree
    links: Dict[int, List[int]] = {cell: [] for cell in maze.grid.cells()}
    for connection in maze.connections:
        links[connection.a].append(connection.b)
        links[connection.b].append(connection.a)

    queue = deque([start])
    predecessor: Dict[int, Optional[int]] = {start: None}
    path_found = False

    while queue:
        current = queue.popleft()
        if current == end:
            path_found = True
            break
        for neighbour in links[current]:
            if neighbour not in predecessor:
                predecessor[neighbour] = current
                queue.append(neighbour)

    if not path_found:
        print("  Path not found!")
        return None

    # Reconstruct path
    path: List[int] = []
    curr: Optional[int] = end
    while curr is not None:
        path.append(curr)
        curr = predecessor[curr]
    path.reverse()

    print(f"  Path length: {len(path)} cells.")
    return path


# --- Visualization Helpers ---
def _setup_plot(maze: Maze) -> Tuple[plt.Figure, plt.Axes]:
    """Creates an equal-aspect axis sized to the grid."""
    width, height = maze.config.dimensions
    fig_w = max(const.VIS_MIN_FIGSIZE, width * const.VIS_FIGSIZE_PER_CELL)
    fig_h = max(const.VIS_MIN_FIGSIZE, height * const.VIS_FIGSIZE_PER_CELL)
    fig, ax = plt.subplots(figsize=(fig_w, fig_h))
    margin = const.BOUNDARY_OFFSET + 0.25
    ax.set_xlim(-margin, width - 1 + margin)
    ax.set_ylim(-margin, height - 1 + margin)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    return fig, ax


def _draw_walls(ax: plt.Axes, walls: Sequence):
    """Draws wall segments; the last four are the boundary."""
    interior, boundary = walls[:-4], walls[-4:]
    for (x1, y1), (x2, y2) in interior:
        ax.plot([x1, x2], [y1, y2],
                const.VIS_WALL_LINE_STYLE,
                lw=const.VIS_WALL_LINE_LW,
                alpha=const.VIS_WALL_LINE_ALPHA)
    for (x1, y1), (x2, y2) in boundary:
        ax.plot([x1, x2], [y1, y2],
                const.VIS_WALL_LINE_STYLE,
                lw=const.VIS_BOUNDARY_LINE_LW)


def _draw_links(ax: plt.Axes, maze: Maze) -> int:
    """Draws lines connecting linked cell centres."""
    for connection in maze.connections:
        x1, y1 = maze.grid.coords_of(connection.a)
        x2, y2 = maze.grid.coords_of(connection.b)
        ax.plot([x1, x2], [y1, y2],
                const.VIS_LINK_LINE_STYLE,
                lw=const.VIS_LINK_LINE_LW,
                alpha=const.VIS_LINK_LINE_ALPHA)
    xs, ys = zip(*(maze.grid.coords_of(cell) for cell in maze.grid.cells()))
    ax.plot(xs, ys, const.VIS_CELL_MARKER, color=const.VIS_CELL_MARKER_COLOR,
            markersize=const.VIS_CELL_MARKER_SIZE, linestyle="none")
    return len(maze.connections)


def _draw_path(ax: plt.Axes, maze: Maze, path: List[int]):
    coords = [maze.grid.coords_of(cell) for cell in path]
    xs, ys = zip(*coords)
    ax.plot(xs, ys,
            const.VIS_SOLUTION_LINE_STYLE,
            lw=const.VIS_SOLUTION_LINE_LW,
            alpha=const.VIS_SOLUTION_LINE_ALPHA)
    ax.plot(*coords[0], const.VIS_ENTRY_MARKER,
            markersize=const.VIS_ENTRY_EXIT_MARKER_SIZE, label="Start")
    ax.plot(*coords[-1], const.VIS_EXIT_MARKER,
            markersize=const.VIS_ENTRY_EXIT_MARKER_SIZE, label="End")


# --- Main Visualization Functions ---

def visualize_map_walls(maze: Maze, filename="map_walls.png"):
    """Visualizes the map walls, boundary included."""
    print(f"--- Generating Map Walls Visualization: {filename} ---")
    try:
        walls = maze.walls()
        fig, ax = _setup_plot(maze)
        _draw_walls(ax, walls)
        ax.set_title(f"Map Walls ({len(walls)} Segments)")
        plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
        plt.close(fig)
        print(f"  Walls visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")


def visualize_map_links(maze: Maze, filename="map_links.png", path: Optional[List[int]] = None):
    """Visualizes the carved corridors, optionally highlighting a path."""
    print(f"--- Generating Map Links Visualization: {filename} ---")
    try:
        fig, ax = _setup_plot(maze)
        link_count = _draw_links(ax, maze)
        if path:
            _draw_path(ax, maze, path)
            ax.legend(loc="upper right")
        ax.set_title(f"Map Links ({link_count} Passages)")
        plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
        plt.close(fig)
        print(f"  Links visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")

# main.py
import os
import time
import traceback

# Import project modules
import constants as const
from map_layout import map_config_for_players
from maze_gen import Maze
from utils import to_world_space
from visualization import find_path, visualize_map_links, visualize_map_walls


def run_map_generation(
    player_count: int = const.DEFAULT_PLAYER_COUNT,
    player_space: int = const.DEFAULT_PLAYER_SPACE,
    seed: int = const.DEFAULT_MAP_SEED,
    output_dir: str = "output",
):
    start_time = time.time()
    os.makedirs(output_dir, exist_ok=True)

    print("\n--- Configuration ---")
    print(f"  Players: {player_count}, Space/Player: {player_space}, Seed: {seed}")

    maze = None
    try:
        config = map_config_for_players(player_count, player_space, seed)
        maze = Maze(config)
        maze.generate()

        walls = maze.walls()
        world_walls = to_world_space(walls)
        print(f"  Cells: {config.size()}, Passages: {len(maze.connections)}, Wall segments: {len(walls)}")
        (x1, y1), (x2, y2) = world_walls[-4]
        print(f"  World-space boundary bottom edge: ({x1:.1f}, {y1:.1f}) -> ({x2:.1f}, {y2:.1f})")
    except Exception as e:
        print(f"ERROR during map generation: {e}")
        traceback.print_exc()
        return None

    # --- Visualizations ---
    print("\n--- Generating Visualizations ---")
    corner_path = find_path(maze, 0, maze.grid.size() - 1)
    visualize_map_walls(maze, filename=os.path.join(output_dir, "map_walls.png"))
    visualize_map_links(maze, filename=os.path.join(output_dir, "map_links.png"), path=corner_path)

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return maze


if __name__ == "__main__":
    import matplotlib

    matplotlib.use("Agg")  # Files only, no display
    run_map_generation()

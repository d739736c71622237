from main import run_map_generation


def test_run_map_generation_writes_plots(tmp_path) -> None:
    maze = run_map_generation(player_count=3, player_space=2, seed=4, output_dir=str(tmp_path))
    assert maze is not None
    assert (maze.grid.width, maze.grid.height) == (4, 4)
    assert len(maze.connections) == 4 * 4 - 1
    assert (tmp_path / "map_walls.png").exists()
    assert (tmp_path / "map_links.png").exists()


def test_run_map_generation_reports_bad_input(tmp_path) -> None:
    assert run_map_generation(player_count=0, output_dir=str(tmp_path)) is None

import pytest

from grid_core import Connection, GridIndex, MapConfig


def test_coords_round_trip() -> None:
    grid = GridIndex(4, 3)
    for row in range(3):
        for column in range(4):
            index = grid.index_of(column, row)
            assert index == row * 4 + column
            assert grid.coords_of(index) == (column, row)


def test_index_of_out_of_bounds() -> None:
    grid = GridIndex(4, 3)
    assert grid.index_of(-1, 0) is None
    assert grid.index_of(4, 0) is None
    assert grid.index_of(0, -1) is None
    assert grid.index_of(0, 3) is None


def test_neighbors_fixed_order() -> None:
    grid = GridIndex(3, 3)
    # Centre cell: right, left, down, up
    assert grid.neighbors(4) == [5, 3, 7, 1]
    assert grid.neighbors(0) == [1, 3]
    assert grid.neighbors(8) == [7, 5]


def test_neighbors_single_row() -> None:
    grid = GridIndex(2, 1)
    assert grid.neighbors(0) == [1]
    assert grid.neighbors(1) == [0]


def test_connection_is_canonical() -> None:
    assert Connection(3, 1) == Connection(1, 3)
    assert Connection(3, 1).as_tuple() == (1, 3)
    assert len({Connection(0, 1), Connection(1, 0)}) == 1
    assert Connection(0, 1) != Connection(0, 2)


def test_map_config_defaults() -> None:
    config = MapConfig()
    assert (config.width, config.height, config.seed) == (3, 3, 0)
    assert config.size() == 9
    assert config.dimensions == (3.0, 3.0)


@pytest.mark.parametrize(
    "width, height, seed",
    [(0, 3, 0), (3, -1, 0), (1, 1, 0), (2, 2, -1), (2, 2, 2**64)],
)
def test_map_config_rejects_invalid(width: int, height: int, seed: int) -> None:
    with pytest.raises(ValueError):
        MapConfig(width=width, height=height, seed=seed)


def test_map_config_is_frozen() -> None:
    config = MapConfig()
    with pytest.raises(AttributeError):
        config.width = 5


@pytest.mark.parametrize(
    "width, height, seed",
    [(2.5, 2, 0), (2, 2.0, 0), (True, 3, 0), (3, 3, 1.5), (3, 3, False), ("3", 3, 0)],
)
def test_map_config_rejects_non_integers(width, height, seed) -> None:
    with pytest.raises(TypeError):
        MapConfig(width=width, height=height, seed=seed)

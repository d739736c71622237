import pytest

from map_layout import calculate_map_size, map_config_for_players


@pytest.mark.parametrize(
    "players, space, expected",
    [
        (5, 3, (9, 6)),
        (6, 3, (9, 6)),
        (4, 2, (4, 4)),
        (1, 3, (6, 3)),
        (8, 1, (4, 2)),
    ],
)
def test_calculate_map_size(players: int, space: int, expected: tuple) -> None:
    assert calculate_map_size(players, space) == expected


def test_calculate_map_size_rejects_invalid() -> None:
    with pytest.raises(ValueError):
        calculate_map_size(0, 3)
    with pytest.raises(ValueError):
        calculate_map_size(2, 0)


def test_map_config_for_players() -> None:
    config = map_config_for_players(5, 3, seed=7)
    assert (config.width, config.height, config.seed) == (9, 6, 7)

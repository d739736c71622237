# map_layout.py
import math
from typing import Tuple

# Import from other project modules
import constants as const
from grid_core import MapConfig


def calculate_map_size(player_count: int, player_space: int) -> Tuple[int, int]:
    """
    Picks grid dimensions that give every player a player_space x player_space
    block of cells, arranged as close to square as the player count allows.
    Odd player counts are rounded up to the next even number.
    """
    if player_count < 1:
        raise ValueError(f"Player count must be at least 1, got {player_count}.")
    if player_space < 1:
        raise ValueError(f"Player space must be at least 1, got {player_space}.")

    if player_count % 2 == 1:
        player_count += 1

    # Largest divisor not above sqrt(player_count); always at least 1
    divisor = max(
        i for i in range(1, math.isqrt(player_count) + 1) if player_count % i == 0
    )

    width = player_count // divisor * player_space
    height = divisor * player_space
    return (width, height)


def map_config_for_players(
    player_count: int = const.DEFAULT_PLAYER_COUNT,
    player_space: int = const.DEFAULT_PLAYER_SPACE,
    seed: int = const.DEFAULT_MAP_SEED,
) -> MapConfig:
    """Builds a MapConfig sized for the given number of players."""
    width, height = calculate_map_size(player_count, player_space)
    print(f"  Map size for {player_count} players ({player_space}x{player_space} each): {width}x{height}")
    return MapConfig(width=width, height=height, seed=seed)

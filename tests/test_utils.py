import numpy as np
import pytest

from utils import normalize, perpendicular, to_world_space


def test_normalize_unit_length() -> None:
    assert np.allclose(normalize(np.array([3.0, 4.0])), [0.6, 0.8])


def test_normalize_zero_vector() -> None:
    assert np.allclose(normalize(np.zeros(2)), [0.0, 0.0])


def test_perpendicular_rotates_left() -> None:
    assert np.allclose(perpendicular(np.array([1.0, 0.0])), [0.0, 1.0])
    assert np.allclose(perpendicular(np.array([0.0, 1.0])), [-1.0, 0.0])


def test_to_world_space_default_transform() -> None:
    segments = [((2.0, 2.0), (2.5, 3.0))]
    assert to_world_space(segments) == [((0.0, 0.0), (50.0, 100.0))]


def test_to_world_space_rejects_bad_cell_size() -> None:
    with pytest.raises(ValueError):
        to_world_space([], cell_size=0)

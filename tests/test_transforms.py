"""Tests for model/transforms.py — wall-plane frames."""
import math
import numpy as np
import pytest
from shared.geometry import GeometryError
from model.transforms import (
    compute_transforms, apply_transform, to_world3,
    translation_matrix, rotation_y_matrix,
)
from model.constants import ROUND_TRIP_TOL


def _close3(p, q, tol=1e-9):
    return all(abs(a - b) < tol for a, b in zip(p, q))


def test_translation_matrix():
    assert _close3(apply_transform(translation_matrix(1, 2, 3), (0, 0, 0)), (1, 2, 3))


def test_rotation_y_quarter_turn():
    # +z rotates onto +x
    assert _close3(apply_transform(rotation_y_matrix(math.pi / 2), (0, 0, 1)), (1, 0, 0))


def test_axis_aligned_segment_is_identity():
    t, inv = compute_transforms((0, 0), (10, 0))
    assert np.allclose(t, np.identity(4))
    assert np.allclose(inv, np.identity(4))


def test_segment_maps_onto_local_x_axis():
    t, _ = compute_transforms((1, 2), (1, 12))
    assert _close3(apply_transform(t, to_world3((1, 2))), (0, 0, 0))
    assert _close3(apply_transform(t, to_world3((1, 12))), (10, 0, 0))


def test_height_is_preserved():
    t, _ = compute_transforms((3, 4), (6, 8))
    assert _close3(apply_transform(t, to_world3((6, 8), 250)), (5, 250, 0))


@pytest.mark.parametrize("start,end", [
    ((0, 0), (1, 0)), ((5, 5), (-3, 2)), ((100, -40), (100, 60)), ((-7, 3), (-20, -11)),
])
def test_round_trip(start, end):
    t, inv = compute_transforms(start, end)
    p = to_world3(start, 17.5)
    back = apply_transform(inv, apply_transform(t, p))
    assert _close3(back, p, ROUND_TRIP_TOL)


def test_zero_length_raises():
    with pytest.raises(GeometryError, match="Zero-length"):
        compute_transforms((2, 2), (2, 2))

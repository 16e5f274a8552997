"""World-to-wall-plane coordinate frames.

Plan points (x, y) live in 3D at (x, 0, y); height runs along +Y. A wall
frame maps a plan segment onto the local +X axis with its start at the
origin, so the wall face lies in the local z=0 plane.
"""
import math
import numpy as np

from shared.types import Point, Point3
from shared.geometry import GeometryError, angle
from model.constants import PLANE_AXIS


def translation_matrix(tx: float, ty: float, tz: float) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = (tx, ty, tz)
    return m


def rotation_y_matrix(theta: float) -> np.ndarray:
    """Right-handed rotation by theta about +Y."""
    c = math.cos(theta); s = math.sin(theta)
    return np.array([
        [c,   0.0, s,   0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s,  0.0, c,   0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def to_world3(p: Point, height: float = 0.0) -> Point3:
    """Lift a plan point into 3D world space at the given height."""
    return (p[0], height, p[1])


def apply_transform(m: np.ndarray, p: Point3) -> Point3:
    """Apply a 4x4 affine matrix to a 3D point."""
    x, y, z, w = m @ np.array([p[0], p[1], p[2], 1.0])
    return (x/w, y/w, z/w)


def compute_transforms(start: Point, end: Point) -> tuple[np.ndarray, np.ndarray]:
    """Forward and inverse frames for the plan segment start → end.

    Raises GeometryError for a zero-length segment, which has no direction.
    """
    dx = end[0]-start[0]; dy = end[1]-start[1]
    if dx == 0 and dy == 0:
        raise GeometryError(f"Zero-length segment at ({start[0]}, {start[1]})")
    theta = angle(PLANE_AXIS[0], PLANE_AXIS[1], dx, dy)
    tt = translation_matrix(-start[0], 0.0, -start[1])
    tr = rotation_y_matrix(-theta)
    transform = tr @ tt
    return transform, np.linalg.inv(transform)

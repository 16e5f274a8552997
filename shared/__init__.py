"""Shared types and geometry utilities."""

from .types import Point, Point3, Face, Surface, BBox
from .geometry import (
    GeometryError, DegenerateMiterError, InvalidWallError,
    angle, angle2pi, angle_unsigned, distance,
    closest_point_on_line, point_distance_from_line,
    poly_area,
)

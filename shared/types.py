"""Shared type definitions for wall boundary geometry."""
from typing import NamedTuple

Point = tuple[float, float]
Point3 = tuple[float, float, float]
Face = tuple[int, int, int]

class Surface(NamedTuple):
    """Material assigned to one side of a wall."""
    url: str; stretch: bool; scale: float

class BBox(NamedTuple):
    min: Point3; max: Point3

"""Pure geometry functions: angles, distances and polygon utilities."""
import math
from .types import Point

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class DegenerateMiterError(GeometryError):
    """Raised when two walls fold back on each other and the miter is unbounded."""
    def __init__(self, corner: Point, theta: float):
        self.corner = corner
        self.theta = theta
        super().__init__(
            f"Degenerate miter at ({corner[0]:.6f}, {corner[1]:.6f}): theta={theta:.3e}")

class InvalidWallError(GeometryError):
    """Raised when a wall cannot carry a boundary edge."""

# ============================================================
# Angles
# ============================================================
def angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Signed angle from vector (x1, y1) to vector (x2, y2), in (-pi, pi].

    Positive when (x2, y2) lies clockwise of (x1, y1).
    """
    dot = x1*x2+y1*y2; det = x1*y2-y1*x2
    return -math.atan2(det, dot)

def angle2pi(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle from (x1, y1) to (x2, y2) shifted into [0, 2pi)."""
    theta = angle(x1, y1, x2, y2)
    if theta < 0:
        theta += 2*math.pi
    return theta

def angle_unsigned(x1: float, y1: float, x2: float, y2: float) -> float:
    """Unsigned angle between two vectors, in [0, pi]."""
    return abs(angle(x1, y1, x2, y2))

# ============================================================
# Distances
# ============================================================
def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return math.hypot(x2-x1, y2-y1)

def closest_point_on_line(x: float, y: float, x1: float, y1: float,
                          x2: float, y2: float) -> Point:
    """Closest point to (x, y) on the segment (x1, y1)-(x2, y2).

    Clamped to the segment endpoints. A zero-length segment returns its start.
    """
    dx = x2-x1; dy = y2-y1; len_sq = dx*dx+dy*dy
    if len_sq == 0:
        return (x1, y1)
    t = ((x-x1)*dx+(y-y1)*dy)/len_sq
    if t < 0:
        return (x1, y1)
    if t > 1:
        return (x2, y2)
    return (x1+t*dx, y1+t*dy)

def point_distance_from_line(x: float, y: float, x1: float, y1: float,
                             x2: float, y2: float) -> float:
    """Distance from (x, y) to the segment (x1, y1)-(x2, y2)."""
    cx, cy = closest_point_on_line(x, y, x1, y1, x2, y2)
    return distance(x, y, cx, cy)

# ============================================================
# Polygons
# ============================================================
def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

"""Boundary edges: one side of a wall, linked into a room's loop.

A room builds one HalfEdge per visible wall side and links next/prev so
that walking get_start() → get_end() → next.get_start() traces the loop in
one rotational sense. Each edge derives its mitred face corners from its
own wall and its immediate neighbours; nothing is solved globally.

Interior points lie to the left of the walking direction, exterior points
to the right. Derived geometry is recomputed on every call, except the
pick plane and wall-plane transforms built by generate_plane(), which stay
as they are until generate_plane() or invalidate() is called again.
"""
import math
import structlog

from shared.types import Point, Surface
from shared.geometry import (
    GeometryError, DegenerateMiterError, InvalidWallError,
    angle2pi, distance, point_distance_from_line,
)
from model.callbacks import Callbacks
from model.wall import Wall
from model.constants import MITER_EPSILON, FULL_TURN
from model.picking import build_pick_plane
from model.transforms import compute_transforms

logger = structlog.get_logger()


def check_wall(wall: Wall) -> None:
    """Raise InvalidWallError unless the wall can carry a boundary edge."""
    if not wall.thickness > 0:
        raise InvalidWallError(f"Wall thickness must be positive: {wall.thickness}")
    if not wall.height > 0:
        raise InvalidWallError(f"Wall height must be positive: {wall.height}")
    if wall.length() == 0:
        raise InvalidWallError(f"Zero-length wall at {wall.get_start()}")


class HalfEdge:
    """One oriented side of a wall's boundary.

    offset and height are copied from the wall at construction and do not
    follow later changes to the wall.
    """

    def __init__(self, room, wall: Wall, front: bool):
        check_wall(wall)
        self.room = room
        self.wall = wall
        self._front = bool(front)
        self.next: "HalfEdge | None" = None
        self.prev: "HalfEdge | None" = None

        self.offset = wall.thickness / 2.0
        self.height = wall.height

        self.plane = None
        self.interior_transform = None
        self.inv_interior_transform = None
        self.exterior_transform = None
        self.inv_exterior_transform = None

        self.redraw_callbacks = Callbacks()

        if self._front:
            wall.front_edge = self
        else:
            wall.back_edge = self
        logger.debug("half_edge_created", wall=repr(wall), front=self._front,
                     offset=self.offset)

    @property
    def front(self) -> bool:
        return self._front

    # ------------------------------------------------------------
    # Surfaces
    # ------------------------------------------------------------
    def get_surface(self) -> Surface | None:
        return self.wall.front_surface if self._front else self.wall.back_surface

    def set_surface(self, url: str, stretch: bool, scale: float) -> None:
        """Assign this side's surface and notify every redraw subscriber."""
        surface = Surface(url, stretch, scale)
        if self._front:
            self.wall.front_surface = surface
        else:
            self.wall.back_surface = surface
        self.redraw_callbacks.fire()

    # ------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------
    def get_start(self) -> Point:
        return self.wall.get_start() if self._front else self.wall.get_end()

    def get_end(self) -> Point:
        return self.wall.get_end() if self._front else self.wall.get_start()

    def get_opposite_edge(self) -> "HalfEdge | None":
        return self.wall.back_edge if self._front else self.wall.front_edge

    # ------------------------------------------------------------
    # Mitre offsets
    # ------------------------------------------------------------
    def half_angle_vector(self, v1: "HalfEdge | None", v2: "HalfEdge | None") -> Point:
        """Offset from the corner shared by v1 → v2 to the interior face corner.

        The result lies on the bisector of the corner, at distance offset from
        both centrelines. A missing v1 or v2 is replaced by a straight
        continuation of the other edge. Raises DegenerateMiterError when the
        two walls fold back onto each other.
        """
        if v1 is None and v2 is None:
            raise GeometryError("Mitre needs at least one incident edge")

        if v1 is None:
            s2 = v2.get_start(); e2 = v2.get_end()
            v1_start = (s2[0]-(e2[0]-s2[0]), s2[1]-(e2[1]-s2[1]))
            v1_end = s2
        else:
            v1_start = v1.get_start(); v1_end = v1.get_end()

        if v2 is None:
            v2_start = v1_end
            v2_end = (v1_end[0]+(v1_end[0]-v1_start[0]), v1_end[1]+(v1_end[1]-v1_start[1]))
        else:
            v2_start = v2.get_start(); v2_end = v2.get_end()

        # angle from the reversed incoming edge to the outgoing edge
        theta = angle2pi(
            v1_start[0]-v1_end[0], v1_start[1]-v1_end[1],
            v2_end[0]-v1_end[0], v2_end[1]-v1_end[1])
        if theta < MITER_EPSILON or theta > FULL_TURN-MITER_EPSILON:
            logger.warning("degenerate_miter", corner=v1_end, theta=theta,
                           wall=repr(self.wall), front=self._front)
            raise DegenerateMiterError(v1_end, theta)

        cs = math.cos(theta/2.0); sn = math.sin(theta/2.0)

        # rotate the outgoing direction onto the bisector
        dx = v2_end[0]-v2_start[0]; dy = v2_end[1]-v2_start[1]
        vx = dx*cs-dy*sn; vy = dx*sn+dy*cs

        mag = distance(0, 0, vx, vy)
        if mag == 0:
            raise GeometryError(f"Zero-length edge at ({v2_start[0]}, {v2_start[1]})")
        scalar = (self.offset/sn)/mag
        return (vx*scalar, vy*scalar)

    def interior_start(self) -> Point:
        vec = self.half_angle_vector(self.prev, self)
        s = self.get_start()
        return (s[0]+vec[0], s[1]+vec[1])

    def interior_end(self) -> Point:
        vec = self.half_angle_vector(self, self.next)
        e = self.get_end()
        return (e[0]+vec[0], e[1]+vec[1])

    def exterior_start(self) -> Point:
        vec = self.half_angle_vector(self.prev, self)
        s = self.get_start()
        return (s[0]-vec[0], s[1]-vec[1])

    def exterior_end(self) -> Point:
        vec = self.half_angle_vector(self, self.next)
        e = self.get_end()
        return (e[0]-vec[0], e[1]-vec[1])

    def interior_center(self) -> Point:
        s = self.interior_start(); e = self.interior_end()
        return ((s[0]+e[0])/2.0, (s[1]+e[1])/2.0)

    def corners(self) -> list[Point]:
        """Face footprint: interior start, interior end, exterior end, exterior start."""
        return [self.interior_start(), self.interior_end(),
                self.exterior_end(), self.exterior_start()]

    def interior_distance(self) -> float:
        """Visible length of this side after mitring."""
        s = self.interior_start(); e = self.interior_end()
        return distance(s[0], s[1], e[0], e[1])

    def distance_to(self, x: float, y: float) -> float:
        """Distance from a plan point to the interior face line."""
        s = self.interior_start(); e = self.interior_end()
        return point_distance_from_line(x, y, s[0], s[1], e[0], e[1])

    # ------------------------------------------------------------
    # Pick plane and wall-plane frames
    # ------------------------------------------------------------
    def generate_plane(self):
        """(Re)build the pick plane and both interior and exterior frames."""
        i_start = self.interior_start(); i_end = self.interior_end()
        e_start = self.exterior_start(); e_end = self.exterior_end()
        self.plane = build_pick_plane(i_start, i_end, self.wall.height)
        self.interior_transform, self.inv_interior_transform = compute_transforms(i_start, i_end)
        self.exterior_transform, self.inv_exterior_transform = compute_transforms(e_start, e_end)
        logger.debug("plane_generated", plane_id=self.plane.plane_id,
                     wall=repr(self.wall), front=self._front)
        return self.plane

    def invalidate(self) -> None:
        """Drop the cached pick plane and frames after a topology or wall change."""
        self.plane = None
        self.interior_transform = None
        self.inv_interior_transform = None
        self.exterior_transform = None
        self.inv_exterior_transform = None

    def __repr__(self) -> str:
        side = "front" if self._front else "back"
        return f"HalfEdge({self.wall!r}, {side})"

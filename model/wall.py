"""Wall centreline record shared by the boundary edges on either side."""
from shared.types import Point, Surface
from shared.geometry import distance
from model.constants import DEFAULT_WALL_THICKNESS, DEFAULT_WALL_HEIGHT, DEFAULT_SURFACE


class Wall:
    """Centreline segment with thickness, height and a surface per side.

    front_edge/back_edge are installed by HalfEdge on construction; the
    front edge walks start → end, the back edge end → start.
    """

    def __init__(self, start: Point, end: Point,
                 thickness: float = DEFAULT_WALL_THICKNESS,
                 height: float = DEFAULT_WALL_HEIGHT):
        self.start: Point = (float(start[0]), float(start[1]))
        self.end: Point = (float(end[0]), float(end[1]))
        self.thickness = thickness
        self.height = height
        self.front_surface: Surface | None = DEFAULT_SURFACE
        self.back_surface: Surface | None = DEFAULT_SURFACE
        self.front_edge = None
        self.back_edge = None

    def get_start(self) -> Point:
        return self.start

    def get_end(self) -> Point:
        return self.end

    def set_start(self, p: Point) -> None:
        """Move the start point. Edges already built keep their derived state."""
        self.start = (float(p[0]), float(p[1]))

    def set_end(self, p: Point) -> None:
        self.end = (float(p[0]), float(p[1]))

    def length(self) -> float:
        return distance(self.start[0], self.start[1], self.end[0], self.end[1])

    def __repr__(self) -> str:
        return (f"Wall(({self.start[0]:g}, {self.start[1]:g}) -> "
                f"({self.end[0]:g}, {self.end[1]:g}), t={self.thickness:g})")

"""Room loops: one boundary edge per wall side, linked next/prev."""
import structlog

from shared.types import Point
from shared.geometry import poly_area
from model.wall import Wall
from model.half_edge import HalfEdge, check_wall

logger = structlog.get_logger()


class Room:
    """Ordered loop of boundary edges around a room.

    sides lists (wall, front) pairs in walking order; each pair's oriented
    end must meet the next pair's oriented start. A closed room links the
    last edge back to the first; an open chain leaves its ends unlinked so
    the end corners are mitred as straight continuations.

    Interior faces lie to the left of the walking direction, so a loop
    walked counter-clockwise (x east, y north) has them facing the room.
    """

    def __init__(self, name: str, sides: list[tuple[Wall, bool]], closed: bool = True):
        sides = list(sides)
        # every wall is checked before any edge installs a back-reference
        for wall, _ in sides:
            check_wall(wall)
        self.name = name
        self.closed = closed
        self.edges: list[HalfEdge] = [HalfEdge(self, wall, front) for wall, front in sides]
        self._link()
        logger.debug("room_loop_built", room=name, edges=len(self.edges), closed=closed)

    def _link(self) -> None:
        n = len(self.edges)
        for i, edge in enumerate(self.edges):
            if self.closed or i+1 < n:
                edge.next = self.edges[(i+1)%n]
            if self.closed or i > 0:
                edge.prev = self.edges[(i-1)%n]

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def interior_polygon(self) -> list[Point]:
        """Interior face corners in loop order; an open chain adds its last end."""
        poly = [e.interior_start() for e in self.edges]
        if not self.closed and self.edges:
            poly.append(self.edges[-1].interior_end())
        return poly

    def interior_area(self) -> float:
        return poly_area(self.interior_polygon())

    def update_planes(self, registry=None) -> None:
        """Rebuild every edge's pick plane and frames, through registry if given."""
        for edge in self.edges:
            if registry is None:
                edge.generate_plane()
            else:
                registry.register(edge)

    def __repr__(self) -> str:
        return f"Room({self.name!r}, {len(self.edges)} edges)"

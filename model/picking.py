"""Invisible pick planes and the side table resolving a hit to its edge."""
import uuid
from typing import NamedTuple, TYPE_CHECKING
import numpy as np

from shared.types import Point, Point3, Face, BBox
from shared.geometry import GeometryError
from model.transforms import to_world3

if TYPE_CHECKING:
    from model.half_edge import HalfEdge


class PickPlane(NamedTuple):
    """Vertical quad over an interior face line, split into two triangles."""
    plane_id: str
    vertices: np.ndarray          # 4x3: start, end at floor; end, start at height
    faces: tuple[Face, Face]
    normals: np.ndarray           # 2x3 unit normal per face
    bbox: BBox
    visible: bool                 # always False; used for hit-testing only


def _face_normal(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    n = np.cross(b - a, c - a)
    Ln = np.linalg.norm(n)
    if Ln == 0:
        raise GeometryError("Degenerate pick face")
    return n / Ln


def ray_triangle_intersect(origin: np.ndarray, direction: np.ndarray,
                           a: np.ndarray, b: np.ndarray, c: np.ndarray,
                           eps: float = 1e-12) -> float | None:
    """Distance t along origin + t*direction to triangle abc, or None.

    Moller-Trumbore; hits behind the origin and parallel rays return None.
    Both faces count as hits.
    """
    e1 = b - a; e2 = c - a
    p = np.cross(direction, e2)
    det = np.dot(e1, p)
    if abs(det) < eps:
        return None
    s = origin - a
    u = np.dot(s, p) / det
    if u < 0 or u > 1:
        return None
    q = np.cross(s, e1)
    v = np.dot(direction, q) / det
    if v < 0 or u + v > 1:
        return None
    t = float(np.dot(e2, q) / det)
    return t if t > eps else None


def build_pick_plane(start: Point, end: Point, height: float) -> PickPlane:
    """Quad from the floor at start/end up to the given height."""
    v1 = np.array(to_world3(start), dtype=float); v2 = np.array(to_world3(end), dtype=float)
    v3 = v2.copy(); v3[1] = height
    v4 = v1.copy(); v4[1] = height
    vertices = np.array([v1, v2, v3, v4])
    faces = ((0, 1, 2), (0, 2, 3))
    normals = np.array([_face_normal(*vertices[list(f)]) for f in faces])
    lo = vertices.min(axis=0); hi = vertices.max(axis=0)
    return PickPlane(
        plane_id=uuid.uuid4().hex,
        vertices=vertices,
        faces=faces,
        normals=normals,
        bbox=BBox(tuple(lo.tolist()), tuple(hi.tolist())),
        visible=False,
    )


class PickRegistry:
    """Side table from pick plane id to the plane and its owning edge."""

    def __init__(self):
        self._entries: dict[str, tuple[PickPlane, "HalfEdge"]] = {}

    def register(self, edge: "HalfEdge") -> PickPlane:
        """(Re)build the edge's plane and frames, replacing any earlier entry."""
        self.unregister(edge)
        plane = edge.generate_plane()
        self._entries[plane.plane_id] = (plane, edge)
        return plane

    def unregister(self, edge: "HalfEdge") -> None:
        for plane_id in [k for k, (_, e) in self._entries.items() if e is edge]:
            del self._entries[plane_id]

    def edge_for(self, plane_id: str) -> "HalfEdge":
        """Owning edge of a plane id; KeyError when unknown."""
        return self._entries[plane_id][1]

    def intersect(self, origin: Point3, direction: Point3) -> "tuple[float, HalfEdge] | None":
        """Nearest (distance, edge) hit along the ray, or None."""
        o = np.asarray(origin, dtype=float); d = np.asarray(direction, dtype=float)
        best = None
        for plane, edge in self._entries.values():
            for f in plane.faces:
                t = ray_triangle_intersect(o, d, *plane.vertices[list(f)])
                if t is not None and (best is None or t < best[0]):
                    best = (t, edge)
        return best

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, plane_id: str) -> bool:
        return plane_id in self._entries

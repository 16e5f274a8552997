"""Wall boundary model: walls, half-edges, room loops and picking."""

from .callbacks import Callbacks
from .wall import Wall
from .transforms import compute_transforms
from .half_edge import HalfEdge
from .picking import PickPlane, PickRegistry, build_pick_plane
from .room import Room

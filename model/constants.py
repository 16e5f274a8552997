"""Named defaults and tolerances for walls and their boundary edges.

Lengths are in plan units (centimetres in the default room).
"""
import math

from shared.types import Surface

# Wall dimensions
DEFAULT_WALL_THICKNESS = 10.0      # centreline to face is half of this
DEFAULT_WALL_HEIGHT = 250.0

# Surfaces
DEFAULT_SURFACE = Surface("rooms/textures/wallmap.png", True, 0.0)

# Tolerances
MITER_EPSILON = 1e-9               # radians; theta this close to 0 or 2pi is a fold-back
ROUND_TRIP_TOL = 1e-9              # forward/inverse transform agreement
FULL_TURN = 2.0 * math.pi

# Reference direction for wall-plane angles
PLANE_AXIS = (1.0, 0.0)

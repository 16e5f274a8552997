"""Shared test fixtures for wall boundary tests."""
import pytest
import structlog
from model.wall import Wall
from model.half_edge import HalfEdge
from model.room import Room


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def rect_room():
    """500 x 400 room, walls 10 thick, walked counter-clockwise."""
    corners = [(0, 0), (500, 0), (500, 400), (0, 400)]
    walls = [Wall(corners[i], corners[(i+1)%4], 10, 250) for i in range(4)]
    return Room("rect", [(w, True) for w in walls])


@pytest.fixture
def right_angle():
    """Open chain of two unit walls, 10 thick, turning left at (1, 0)."""
    a = Wall((0, 0), (1, 0), 10, 250)
    b = Wall((1, 0), (1, 1), 10, 250)
    return Room("corner", [(a, True), (b, True)], closed=False)


@pytest.fixture
def straight_run():
    """Three collinear walls along +x, 10 thick."""
    walls = [Wall((x, 0), (x+100, 0), 10, 250) for x in (0, 100, 200)]
    return Room("run", [(w, True) for w in walls], closed=False)


@pytest.fixture
def lone_edge():
    """Single front edge with no neighbours."""
    return HalfEdge(None, Wall((0, 0), (100, 0), 10, 250), True)

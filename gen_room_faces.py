"""Print mitred wall-face corners for a room built from centreline corners.

With no corner arguments a 500 x 400 rectangular room is used. Corners are
given counter-clockwise as x,y pairs; each consecutive pair becomes a wall
whose front side faces the room.

    python gen_room_faces.py --thickness 20 0,0 600,0 600,300 0,300
"""
import os, sys, json, argparse, logging

import structlog

# Ensure project root is on sys.path for package imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from shared.types import Point
from shared.geometry import GeometryError
from model.constants import DEFAULT_WALL_THICKNESS, DEFAULT_WALL_HEIGHT
from model.wall import Wall
from model.room import Room

logger = structlog.get_logger()

SAMPLE_CORNERS: list[Point] = [(0.0, 0.0), (500.0, 0.0), (500.0, 400.0), (0.0, 400.0)]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stderr,
                        level=logging.DEBUG if verbose else logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def parse_corner(text: str) -> Point:
    try:
        x, y = text.split(",")
        return (float(x), float(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")


def build_room(corners: list[Point], thickness: float, height: float,
               closed: bool = True) -> Room:
    """Room whose walls join consecutive corners (wrapping when closed)."""
    n = len(corners)
    pairs = [(corners[i], corners[(i+1)%n]) for i in range(n if closed else n-1)]
    walls = [Wall(s, e, thickness, height) for s, e in pairs]
    return Room("room", [(w, True) for w in walls], closed=closed)


def room_report(room: Room) -> dict:
    """Per-edge corners and lengths plus the room's interior area."""
    edges = []
    for i, edge in enumerate(room):
        edges.append({
            "index": i,
            "start": list(edge.get_start()),
            "end": list(edge.get_end()),
            "corners": [list(c) for c in edge.corners()],
            "interior_distance": edge.interior_distance(),
        })
    return {"name": room.name, "closed": room.closed, "edges": edges,
            "interior_area": room.interior_area()}


def print_report(report: dict) -> None:
    print(f"Room {report['name']} ({'closed' if report['closed'] else 'open'}, "
          f"{len(report['edges'])} edges)")
    for e in report["edges"]:
        s, t = e["start"], e["end"]
        print(f"  E{e['index']:<3d} ({s[0]:9.3f}, {s[1]:9.3f}) -> ({t[0]:9.3f}, {t[1]:9.3f})"
              f"  interior length {e['interior_distance']:9.3f}")
        for label, c in zip(("is", "ie", "ee", "es"), e["corners"]):
            print(f"        {label}  ({c[0]:9.3f}, {c[1]:9.3f})")
    print(f"Interior area: {report['interior_area']:.3f}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("corners", nargs="*", type=parse_corner, help="x,y centreline corners")
    ap.add_argument("--thickness", type=float, default=DEFAULT_WALL_THICKNESS)
    ap.add_argument("--height", type=float, default=DEFAULT_WALL_HEIGHT)
    ap.add_argument("--open", action="store_true", help="treat corners as an open chain")
    ap.add_argument("--json", action="store_true", help="emit JSON instead of text")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    corners = args.corners or SAMPLE_CORNERS
    if len(corners) < 2:
        ap.error("need at least two corners")
    try:
        room = build_room(corners, args.thickness, args.height, closed=not args.open)
        report = room_report(room)
    except GeometryError as exc:
        logger.error("room_geometry_failed", error=str(exc))
        return 1

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())

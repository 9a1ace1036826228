# main.py
import argparse
import sys

from tunnel_nav.app.build import build
from tunnel_nav.runtime.registries import COMPARATOR_OPTIONS, COMPARE_BY_TIME_OUTSIDE_THEN_TIME


def run(features: str, buildings: str, start: str, end: str, prefer: str, level: str) -> int:
    app = build(
        {
            "features": {"by": "path", "file": features},
            "buildings": {"by": "path", "file": buildings},
            "routing": {"comparator": prefer},
            "log": {"level": level},
        }
    )
    route = app.route(start, end)
    if route is None:
        print(f"No route could be found between {start} and {end}", file=sys.stderr)
        return 1

    for line in route.stats_lines():
        print(line)
    for i, step in enumerate(route.steps, 1):
        metres = round(step.distance - step.parent.distance)
        # stairs, doors and openings cover no ground
        dist = f" ({metres}m)" if metres > 0 else ""
        print(f"{i}. {step.to_directions_string()}{dist}")
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Walking directions through the campus network")
    p.add_argument("start", help='start building floor, e.g. "MC|1"')
    p.add_argument("end", help='end building floor, e.g. "DC|2"')
    p.add_argument("--features", default="paths.json")
    p.add_argument("--buildings", default="buildings.json")
    p.add_argument(
        "--prefer",
        default=COMPARE_BY_TIME_OUTSIDE_THEN_TIME,
        choices=[o.value for o in COMPARATOR_OPTIONS],
    )
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    return run(args.features, args.buildings, args.start, args.end, args.prefer, args.log_level)


if __name__ == "__main__":
    sys.exit(main())

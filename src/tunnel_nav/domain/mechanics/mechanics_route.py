# tunnel_nav/domain/mechanics/mechanics_route.py
import math
from collections.abc import Sequence
from dataclasses import replace

from tunnel_nav.domain.entities.geography import Position, TravelMode
from tunnel_nav.domain.entities.search import GraphLocation


def _join(*paths: Sequence[Position]) -> list[Position]:
    out: list[Position] = []
    for p in paths:
        for pt in p:
            if not out or out[-1] != pt:
                out.append(pt)
    return out


def _same_step(a: GraphLocation, b: GraphLocation) -> bool:
    return (
        a.travel_mode is not None
        and a.travel_mode is b.travel_mode
        and a.location.building_floor == b.location.building_floor
    )


def _absorb(first: GraphLocation, *rest: GraphLocation, mode: TravelMode | None = None):
    """One record standing for `first` followed by `rest`; totals come from the last."""
    last = rest[-1]
    return replace(
        last,
        path=_join(first.path, *(r.path for r in rest)),
        parent=first.parent,
        travel_mode=mode or first.travel_mode,
        floor_change=first.floor_change + sum(r.floor_change for r in rest),
    )


def merge_steps(records: Sequence[GraphLocation]) -> list[GraphLocation]:
    out: list[GraphLocation] = []
    for r in records:
        if out and _same_step(out[-1], r):
            out[-1] = _absorb(out[-1], r)
        else:
            out.append(r)
    return out


def _is_outdoor_crossing(r: Sequence[GraphLocation], i: int) -> bool:
    before, exit_, walk, entry = r[i : i + 4]
    return (
        not before.location.building_floor.is_outside
        and exit_.travel_mode is TravelMode.DOOR
        and exit_.location.building_floor.is_outside
        and walk.travel_mode is TravelMode.WALKWAY
        and entry.travel_mode is TravelMode.DOOR
        and not entry.location.building_floor.is_outside
    )


def collapse_outdoor_crossings(records: Sequence[GraphLocation]) -> list[GraphLocation]:
    """building -> door (OUT) -> walkway -> door (building) becomes one walkway step."""
    out: list[GraphLocation] = []
    i = 0
    while i < len(records):
        if i + 3 < len(records) and _is_outdoor_crossing(records, i):
            exit_, walk, entry = records[i + 1 : i + 4]
            out.append(records[i])
            out.append(_absorb(exit_, walk, entry, mode=TravelMode.WALKWAY))
            i += 4
        else:
            out.append(records[i])
            i += 1
    return out


def _relink(records: list[GraphLocation]) -> list[GraphLocation]:
    for i in range(1, len(records)):
        if records[i].parent is not records[i - 1]:
            records[i] = replace(records[i], parent=records[i - 1])
    return records


def normalize(records: Sequence[GraphLocation]) -> list[GraphLocation]:
    current = list(records)
    while True:
        nxt = collapse_outdoor_crossings(merge_steps(current))
        if len(nxt) == len(current):
            return _relink(nxt)
        current = nxt


class Route:
    """Start-to-end records of a finished search, merged into user-facing steps."""

    def __init__(self, terminal: GraphLocation):
        chain: list[GraphLocation] = []
        node: GraphLocation | None = terminal
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        self.graph_locations: list[GraphLocation] = normalize(chain)

    def __len__(self) -> int:
        return len(self.graph_locations)

    def __iter__(self):
        return iter(self.graph_locations)

    @property
    def start(self) -> GraphLocation:
        return self.graph_locations[0]

    @property
    def end(self) -> GraphLocation:
        return self.graph_locations[-1]

    @property
    def steps(self) -> list[GraphLocation]:
        return self.graph_locations[1:]

    # totals are carried by the last record

    @property
    def distance(self) -> float:
        return self.end.distance

    @property
    def time(self) -> float:
        return self.end.time

    @property
    def time_outside(self) -> float:
        return self.end.time_outside

    @property
    def floors_ascended(self) -> int:
        return self.end.floors_ascended

    @property
    def floors_descended(self) -> int:
        return self.end.floors_descended

    def directions(self) -> list[str]:
        return [gl.to_directions_string() for gl in self.steps]

    def polylines(self) -> list[list[Position]]:
        return [gl.path for gl in self.steps]

    def full_path(self) -> list[Position]:
        return _join(*(gl.path for gl in self.graph_locations))

    def stats_lines(self) -> list[str]:
        minutes = math.floor(self.time / 60 + 0.5)
        metres = math.floor(self.distance + 0.5)
        return [
            f"Time: {'<1' if minutes == 0 else minutes}min, Distance: {metres:,}m",
            f"Up {self.floors_ascended} floors, down {self.floors_descended} floors",
        ]

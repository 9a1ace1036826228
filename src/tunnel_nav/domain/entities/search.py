from __future__ import annotations

from dataclasses import dataclass, field

from tunnel_nav.domain.entities.geography import Edge, Location, Position, TravelMode
from tunnel_nav.domain.mechanics.mechanics_costs import EdgeCost


@dataclass(eq=False)
class GraphLocation:
    """
    One visited node of a search.

    Accumulators (distance, time, time_outside, floors_*) are running totals from
    the start; floor_change is the signed change of the edge(s) that produced this
    record only. `parent` is only walked when a Route is rebuilt.
    """

    location: Location
    path: list[Position] = field(default_factory=list)
    parent: GraphLocation | None = None
    travel_mode: TravelMode | None = None
    distance: float = 0.0
    time: float = 0.0
    time_outside: float = 0.0
    floor_change: int = 0
    floors_ascended: int = 0
    floors_descended: int = 0

    @classmethod
    def root(cls, location: Location) -> GraphLocation:
        return cls(location, [location.coordinate.to_pair()])

    def advance(self, edge: Edge, cost: EdgeCost) -> GraphLocation:
        return GraphLocation(
            location=edge.end,
            path=list(edge.coordinates),
            parent=self,
            travel_mode=edge.type,
            distance=self.distance + cost.distance,
            time=self.time + cost.time,
            time_outside=self.time_outside + cost.time_outside,
            floor_change=edge.floor_change,
            floors_ascended=self.floors_ascended + cost.floors_ascended,
            floors_descended=self.floors_descended + cost.floors_descended,
        )

    def to_directions_string(self) -> str:
        where = self.location.building_floor.to_direction_string()
        mode = self.travel_mode
        if mode is TravelMode.OPEN:
            return f"Continue into {where}"
        if mode is TravelMode.DOOR:
            return f"Go through the door to {where}"
        if mode is TravelMode.HALLWAY:
            return f"Take the hallway on {where}"
        if mode is TravelMode.WALKWAY:
            return f"Go outside and walk to {where}"
        if mode is TravelMode.STAIRS:
            n = abs(self.floor_change)
            if n == 0:
                return f"Go through the stairwell to {where}"
            direction = "up" if self.floor_change > 0 else "down"
            return f"Go {direction} {n} floor{'' if n == 1 else 's'} to {where}"
        # tunnel, bridge, and the root record (no mode)
        label = mode.value if mode is not None else None
        return f"Take the {label} to {where}"

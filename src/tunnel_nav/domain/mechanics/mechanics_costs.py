# tunnel_nav/domain/mechanics/mechanics_costs.py
from dataclasses import dataclass

from tunnel_nav.domain.entities.geography import Edge, TravelMode

WALKING_SPEED = 1.25  # m/s
FLOOR_ASCEND_SPEED = 14.0  # s per floor
FLOOR_DESCEND_SPEED = 14.0  # s per floor


@dataclass(frozen=True)
class EdgeCost:
    distance: float = 0.0
    time: float = 0.0
    time_outside: float = 0.0
    floors_ascended: int = 0
    floors_descended: int = 0


@dataclass(frozen=True)
class SpeedModel:
    walking_mps: float = WALKING_SPEED
    ascend_s_per_floor: float = FLOOR_ASCEND_SPEED
    descend_s_per_floor: float = FLOOR_DESCEND_SPEED

    def cost(self, edge: Edge) -> EdgeCost:
        if edge.type is TravelMode.STAIRS:
            fc = edge.floor_change
            if fc > 0:
                return EdgeCost(time=fc * self.ascend_s_per_floor, floors_ascended=fc)
            return EdgeCost(time=-fc * self.descend_s_per_floor, floors_descended=-fc)

        t = edge.length / max(self.walking_mps, 1e-9)
        # walkways are the only edges spent outdoors
        outside = t if edge.type is TravelMode.WALKWAY else 0.0
        return EdgeCost(distance=edge.length, time=t, time_outside=outside)

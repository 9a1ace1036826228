from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

# Pseudo-building for anything that is not inside a building
OUTSIDE_CODE = "OUT"

Position = tuple[float, float]  # (longitude, latitude)


class TravelMode(Enum):
    HALLWAY = "hallway"
    BRIDGE = "bridge"
    TUNNEL = "tunnel"
    WALKWAY = "walkway"
    DOOR = "door"
    OPEN = "open"
    STAIRS = "stairs"


LINE_MODES = frozenset(
    {TravelMode.HALLWAY, TravelMode.BRIDGE, TravelMode.TUNNEL, TravelMode.WALKWAY}
)


@dataclass(frozen=True)
class Coordinate:
    longitude: float
    latitude: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> Coordinate:
        lon, lat = pair
        return cls(float(lon), float(lat))

    def to_pair(self) -> Position:
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class BuildingFloor:
    building_code: str
    floor: str

    @property
    def is_outside(self) -> bool:
        return self.building_code == OUTSIDE_CODE

    def __str__(self) -> str:
        return f"{self.building_code}|{self.floor}"

    def to_direction_string(self) -> str:
        return f"{self.building_code} floor {self.floor}"


@dataclass(frozen=True)
class Location:
    """Graph node identity: a point on a given building floor."""

    coordinate: Coordinate
    building_floor: BuildingFloor

    @property
    def key(self) -> str:
        c, bf = self.coordinate, self.building_floor
        return f"{c.latitude}|{c.longitude}|{bf.building_code}|{bf.floor}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class Edge:
    start: Location
    end: Location
    length: float  # metres
    floor_change: int  # signed, floors up (+) or down (-)
    type: TravelMode
    coordinates: tuple[Position, ...]

    def reversed(self) -> Edge:
        return Edge(
            start=self.end,
            end=self.start,
            length=self.length,
            floor_change=-self.floor_change,
            type=self.type,
            coordinates=tuple(reversed(self.coordinates)),
        )

# tunnel_nav/app/locations.py
from dataclasses import dataclass

from tunnel_nav.config.models import BuildingCollectionModel
from tunnel_nav.domain.entities.geography import BuildingFloor, Coordinate, Location


@dataclass(frozen=True)
class Option:
    value: str
    label: str


def start_end_locations(buildings: BuildingCollectionModel) -> dict[str, Location]:
    """Graph entry point for every "{code}|{floor}" listed in the building data."""
    out: dict[str, Location] = {}
    for f in buildings.features:
        b = f.properties.building
        coord = Coordinate.from_pair(f.geometry.coordinates)
        for floor in b.floors:
            bf = BuildingFloor(b.building_code, floor)
            out[str(bf)] = Location(coord, bf)
    return out


def building_floor_options(buildings: BuildingCollectionModel) -> dict[str, list[str]]:
    opts: dict[str, list[str]] = {}
    for f in buildings.features:
        b = f.properties.building
        opts[b.building_code] = opts.get(b.building_code, []) + list(b.floors)
    for floors in opts.values():
        floors.sort()
    return opts


def building_options(options: dict[str, list[str]]) -> list[Option]:
    return [Option(code, code) for code in sorted(options)]


def floor_options(options: dict[str, list[str]], building: str | None) -> list[Option]:
    if building is None:
        return []
    return [Option(floor, floor) for floor in options.get(building, [])]

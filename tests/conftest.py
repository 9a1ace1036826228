# tests/conftest.py
from types import SimpleNamespace

import pytest

from tunnel_nav.domain.entities.geography import BuildingFloor, Coordinate, Location

# ---- campus coordinates (lon, lat) ----
A = [-80.5440, 43.4720]  # MC
B = [-80.5430, 43.4725]  # DC, stairwell
C = [-80.5420, 43.4730]  # DC exit door
D = [-80.5410, 43.4735]  # E7 entrance


def bf(code: str, floor: str) -> dict:
    return {"buildingCode": code, "floor": floor}


def line(kind: str, start: dict, end: dict, coords: list) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": coords},
        "properties": {"type": kind, "start": start, "end": end},
    }


def door(kind: str, start: dict, end: dict, pt: list) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": pt},
        "properties": {"type": kind, "start": start, "end": end},
    }


def stairs(pt: list, *levels: tuple[str, str, int]) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": pt},
        "properties": {
            "type": "stairs",
            "connections": [
                {"buildingCode": code, "floor": floor, "level": level}
                for code, floor, level in levels
            ],
        },
    }


def collection(*features: dict) -> dict:
    return {"type": "FeatureCollection", "features": list(features)}


def loc(pt: list, code: str, floor: str) -> Location:
    return Location(Coordinate.from_pair(pt), BuildingFloor(code, floor))


@pytest.fixture
def geo():
    return SimpleNamespace(
        bf=bf,
        line=line,
        door=door,
        stairs=stairs,
        collection=collection,
        loc=loc,
        A=A,
        B=B,
        C=C,
        D=D,
    )


@pytest.fixture
def campus() -> dict:
    """MC -tunnel-> DC (stairs 1..3) -hallway-> exit door -walkway-> E7."""
    return collection(
        line("tunnel", bf("MC", "1"), bf("DC", "1"), [A, [-80.5435, 43.4721], B]),
        stairs(B, ("DC", "1", 1), ("DC", "2", 2), ("DC", "3", 3)),
        line("hallway", bf("DC", "1"), bf("DC", "1"), [B, C]),
        door("door", bf("DC", "1"), bf("OUT", "0"), C),
        line("walkway", bf("OUT", "0"), bf("OUT", "0"), [C, D]),
        door("door", bf("OUT", "0"), bf("E7", "1"), D),
    )


@pytest.fixture
def campus_buildings() -> dict:
    def building(code, floors, pt):
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": pt},
            "properties": {
                "type": "building",
                "building": {"buildingCode": code, "floors": floors},
            },
        }

    return collection(
        building("MC", ["1"], A),
        building("DC", ["2", "1", "3"], B),
        building("E7", ["1"], D),
    )

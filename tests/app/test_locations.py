# tests/app/test_locations.py
from tunnel_nav.app.locations import (
    Option,
    building_floor_options,
    building_options,
    floor_options,
    start_end_locations,
)
from tunnel_nav.config.models import parse_building_collection


def test_start_end_locations(geo, campus_buildings):
    locs = start_end_locations(parse_building_collection(campus_buildings))
    assert locs["MC|1"] == geo.loc(geo.A, "MC", "1")
    assert locs["DC|3"] == geo.loc(geo.B, "DC", "3")
    assert len(locs) == 5


def test_floor_options_merge_and_sort(geo, campus_buildings):
    basement = {"buildingCode": "DC", "floors": ["0"]}
    campus_buildings["features"].append(
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": geo.C},
            "properties": {"type": "building", "building": basement},
        }
    )
    opts = building_floor_options(parse_building_collection(campus_buildings))
    assert opts == {"MC": ["1"], "DC": ["0", "1", "2", "3"], "E7": ["1"]}


def test_building_options_sorted_by_code(campus_buildings):
    opts = building_floor_options(parse_building_collection(campus_buildings))
    assert building_options(opts) == [Option("DC", "DC"), Option("E7", "E7"), Option("MC", "MC")]


def test_floor_options(campus_buildings):
    opts = building_floor_options(parse_building_collection(campus_buildings))
    assert floor_options(opts, "DC") == [Option("1", "1"), Option("2", "2"), Option("3", "3")]
    assert floor_options(opts, None) == []
    assert floor_options(opts, "QNC") == []

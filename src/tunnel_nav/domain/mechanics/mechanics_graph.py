# tunnel_nav/domain/mechanics/mechanics_graph.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from itertools import combinations

import numpy as np
from pydantic import ValidationError

from tunnel_nav.config.models import (
    DoorFeature,
    FeatureCollectionModel,
    LineFeature,
    StairsFeature,
    parse_feature_collection,
)
from tunnel_nav.domain.entities.geography import (
    BuildingFloor,
    Coordinate,
    Edge,
    Location,
    Position,
    TravelMode,
)

log = logging.getLogger(__name__)

EARTH_RADIUS_M = 6_371_008.8


class FeatureError(ValueError):
    """Feature data that cannot be turned into graph edges."""


def path_length_m(coords: Sequence[Position]) -> float:
    """Haversine length of a (lon, lat) polyline in metres."""
    if len(coords) < 2:
        return 0.0
    rad = np.radians(np.asarray(coords, dtype=float))
    lon, lat = rad[:, 0], rad[:, 1]
    dlon, dlat = np.diff(lon), np.diff(lat)
    a = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
    return float(np.sum(2 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))))


def _bf(data) -> BuildingFloor:
    return BuildingFloor(data.building_code, data.floor)


def _line_edges(f: LineFeature) -> Iterator[Edge]:
    coords = tuple(f.geometry.coordinates)
    start = Location(Coordinate.from_pair(coords[0]), _bf(f.properties.start))
    end = Location(Coordinate.from_pair(coords[-1]), _bf(f.properties.end))
    edge = Edge(start, end, path_length_m(coords), 0, TravelMode(f.properties.type), coords)
    yield edge
    yield edge.reversed()


def _door_edges(f: DoorFeature) -> Iterator[Edge]:
    pt = tuple(f.geometry.coordinates)
    c = Coordinate.from_pair(pt)
    start = Location(c, _bf(f.properties.start))
    end = Location(c, _bf(f.properties.end))
    edge = Edge(start, end, 0.0, 0, TravelMode(f.properties.type), (pt, pt))
    yield edge
    yield edge.reversed()


def _stairs_edges(f: StairsFeature) -> Iterator[Edge]:
    pt = tuple(f.geometry.coordinates)
    c = Coordinate.from_pair(pt)
    # every pair of connected floors is one flight
    for a, b in combinations(f.properties.connections, 2):
        edge = Edge(
            Location(c, _bf(a)),
            Location(c, _bf(b)),
            0.0,
            b.level - a.level,
            TravelMode.STAIRS,
            (pt, pt),
        )
        yield edge
        yield edge.reversed()


def edges_from_feature(f) -> Iterator[Edge]:
    if isinstance(f, LineFeature):
        yield from _line_edges(f)
    elif isinstance(f, StairsFeature):
        yield from _stairs_edges(f)
    elif isinstance(f, DoorFeature):
        yield from _door_edges(f)
    else:
        raise TypeError(f)


class AdjacencyList:
    """Outgoing edges per Location key. Read-only once built."""

    def __init__(self, edges: Mapping[str, Iterable[Edge]] | None = None):
        self._adj: dict[str, tuple[Edge, ...]] = {k: tuple(v) for k, v in (edges or {}).items()}

    @classmethod
    def build(
        cls, features: FeatureCollectionModel | Mapping | Iterable[Mapping]
    ) -> AdjacencyList:
        try:
            fc = parse_feature_collection(features)
        except ValidationError as e:
            raise FeatureError(f"invalid feature data: {e}") from e

        adj: dict[str, list[Edge]] = {}
        for f in fc.features:
            for edge in edges_from_feature(f):
                adj.setdefault(edge.start.key, []).append(edge)
        out = cls(adj)
        log.debug(
            "built adjacency: %d features, %d nodes, %d edges",
            len(fc.features),
            len(out),
            out.edge_count,
        )
        return out

    def get(self, location: Location) -> tuple[Edge, ...]:
        return self._adj.get(location.key, ())

    edges_of = get

    def __contains__(self, location: Location) -> bool:
        return location.key in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    @property
    def edge_count(self) -> int:
        return sum(len(v) for v in self._adj.values())

    def locations(self) -> Iterator[Location]:
        for edges in self._adj.values():
            yield edges[0].start

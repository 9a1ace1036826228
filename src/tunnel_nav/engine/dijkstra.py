# engine/dijkstra.py

import heapq
import time
from functools import cmp_to_key

from tunnel_nav.domain.entities.geography import Location
from tunnel_nav.domain.entities.search import GraphLocation
from tunnel_nav.domain.mechanics.mechanics_costs import (
    FLOOR_ASCEND_SPEED,
    FLOOR_DESCEND_SPEED,
    WALKING_SPEED,
    SpeedModel,
)
from tunnel_nav.domain.mechanics.mechanics_graph import AdjacencyList
from tunnel_nav.domain.mechanics.mechanics_route import Route
from tunnel_nav.engine.hooks import NoopHooks, SearchHooks
from tunnel_nav.runtime.registries import (
    COMPARATOR_OPTIONS,
    COMPARATORS,
    Comparator,
    get_comparator,
)


class Dijkstra:
    WALKING_SPEED = WALKING_SPEED
    FLOOR_ASCEND_SPEED = FLOOR_ASCEND_SPEED
    FLOOR_DESCEND_SPEED = FLOOR_DESCEND_SPEED
    COMPARATORS = COMPARATORS
    COMPARATOR_OPTIONS = COMPARATOR_OPTIONS

    def __init__(
        self,
        adj_list: AdjacencyList,
        *,
        speeds: SpeedModel | None = None,
        hooks: SearchHooks | None = None,
        max_expansions: int | None = None,
    ):
        self.adj_list = adj_list
        self.speeds = speeds or SpeedModel()
        self._hooks = hooks or NoopHooks()
        self.max_expansions = max_expansions

    def calculate_route(
        self,
        start: Location,
        end: Location,
        comparator: str | Comparator | None = None,
    ) -> Route | None:
        """Best route from start to end under `comparator`, or None if end is unreachable."""
        cmp = get_comparator(comparator)
        self._hooks.search_start(start=start, end=end, comparator=_name(comparator, cmp))
        t0 = time.perf_counter()

        if start == end:
            self._hooks.search_end(found=True, expanded=0, pushed=0, ms=0.0)
            return Route(GraphLocation.root(start))

        key = cmp_to_key(cmp)
        seq = 0
        root = GraphLocation.root(start)
        q: list[tuple[object, int, GraphLocation]] = [(key(root), seq, root)]
        done: set[str] = set()
        expanded = 0
        found: GraphLocation | None = None

        while q:
            _, _, curr = heapq.heappop(q)
            k = curr.location.key
            if k in done:
                continue  # stale entry
            done.add(k)
            if curr.location == end:
                found = curr
                break

            expanded += 1
            if self.max_expansions and expanded > self.max_expansions:
                self._hooks.error(reason="max_expansions", limit=self.max_expansions)
                break
            self._hooks.expand(curr, expanded=expanded, qsize=len(q))

            for edge in self.adj_list.get(curr.location):
                if edge.end.key in done:
                    continue
                nxt = curr.advance(edge, self.speeds.cost(edge))
                seq += 1
                heapq.heappush(q, (key(nxt), seq, nxt))

        self._hooks.search_end(
            found=found is not None,
            expanded=expanded,
            pushed=seq,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return Route(found) if found is not None else None


def _name(requested, cmp: Comparator) -> str:
    if isinstance(requested, str):
        return requested
    for k, fn in COMPARATORS.items():
        if fn is cmp:
            return k
    return getattr(cmp, "__name__", repr(cmp))

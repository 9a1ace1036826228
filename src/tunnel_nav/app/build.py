# tunnel_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from tunnel_nav.app.locations import building_floor_options, start_end_locations
from tunnel_nav.config.models import NavigatorModel, RoutingModel
from tunnel_nav.domain.entities.geography import Location
from tunnel_nav.domain.mechanics.mechanics_costs import SpeedModel
from tunnel_nav.domain.mechanics.mechanics_graph import AdjacencyList
from tunnel_nav.domain.mechanics.mechanics_route import Route
from tunnel_nav.engine.dijkstra import Dijkstra
from tunnel_nav.engine.hooks import NoopHooks
from tunnel_nav.io.features import load_buildings, load_features
from tunnel_nav.io.search_logging import SearchLogging
from tunnel_nav.runtime.registries import Comparator


@dataclass
class App:
    adj_list: AdjacencyList
    dijkstra: Dijkstra
    routing: RoutingModel
    entry_points: dict[str, Location] = field(default_factory=dict)
    floor_options: dict[str, list[str]] = field(default_factory=dict)

    def entry_point(self, key: str) -> Location:
        try:
            return self.entry_points[key]
        except KeyError:
            raise ValueError(f"Unknown building floor {key!r}") from None

    def route(
        self,
        start: str | Location,
        end: str | Location,
        comparator: str | Comparator | None = None,
    ) -> Route | None:
        """Start/end may be Locations or "{code}|{floor}" keys of the building data."""
        a = start if isinstance(start, Location) else self.entry_point(start)
        b = end if isinstance(end, Location) else self.entry_point(end)
        return self.dijkstra.calculate_route(a, b, comparator or self.routing.comparator)


def build(cfg: NavigatorModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Graph
    adj_list = AdjacencyList.build(load_features(model.features))

    # 2) Search engine (with hooks)
    hooks = (
        SearchLogging(
            run_id=model.name,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    speeds = SpeedModel(
        walking_mps=model.routing.walking_speed_mps,
        ascend_s_per_floor=model.routing.floor_ascend_s,
        descend_s_per_floor=model.routing.floor_descend_s,
    )
    dijkstra = Dijkstra(
        adj_list, speeds=speeds, hooks=hooks, max_expansions=model.routing.max_expansions
    )

    # 3) Building lookup tables
    app = App(adj_list, dijkstra, model.routing)
    if model.buildings is not None:
        buildings = load_buildings(model.buildings)
        app.entry_points = start_end_locations(buildings)
        app.floor_options = building_floor_options(buildings)
    return app

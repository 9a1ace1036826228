# engine/hooks.py
from typing import Protocol

from tunnel_nav.domain.entities.geography import Location
from tunnel_nav.domain.entities.search import GraphLocation


class SearchHooks(Protocol):
    def search_start(self, *, start: Location, end: Location, comparator: str): ...
    def expand(self, record: GraphLocation, *, expanded: int, qsize: int): ...
    def search_end(self, *, found: bool, expanded: int, pushed: int, ms: float): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass

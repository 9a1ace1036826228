# runtime/registries.py
from collections.abc import Callable
from dataclasses import dataclass

from tunnel_nav.domain.entities.search import GraphLocation

Comparator = Callable[[GraphLocation, GraphLocation], int]


@dataclass(frozen=True)
class ComparatorOption:
    value: str
    label: str


COMPARE_BY_TIME = "COMPARE_BY_TIME"
COMPARE_BY_TIME_OUTSIDE_THEN_TIME = "COMPARE_BY_TIME_OUTSIDE_THEN_TIME"
DEFAULT_COMPARATOR = COMPARE_BY_TIME

COMPARATORS: dict[str, Comparator] = {}
# display order for preference pickers
COMPARATOR_OPTIONS: list[ComparatorOption] = []


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


# ------------------- Comparator registry ---------------------------


def register_comparator(key: str, label: str):
    def deco(fn: Comparator):
        if key not in COMPARATORS:
            COMPARATOR_OPTIONS.append(ComparatorOption(key, label))
        COMPARATORS[key] = fn
        return fn

    return deco


def get_comparator(key: str | Comparator | None = None) -> Comparator:
    if key is None:
        key = DEFAULT_COMPARATOR
    if callable(key):
        return key
    try:
        return COMPARATORS[key]
    except KeyError:
        raise ValueError(f"Unknown comparator {key!r}") from None


@register_comparator(COMPARE_BY_TIME_OUTSIDE_THEN_TIME, "Minimize time outside")
def compare_by_time_outside_then_time(a: GraphLocation, b: GraphLocation) -> int:
    if a.time_outside != b.time_outside:
        return _sign(a.time_outside - b.time_outside)
    return _sign(a.time - b.time)


@register_comparator(COMPARE_BY_TIME, "Fastest route")
def compare_by_time(a: GraphLocation, b: GraphLocation) -> int:
    return _sign(a.time - b.time)

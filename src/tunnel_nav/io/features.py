# tunnel_nav/io/features.py
import json
import logging
from functools import lru_cache

from pydantic import ValidationError

from tunnel_nav.config.models import (
    BuildingCollectionModel,
    FeatureCollectionModel,
    FeaturesByPath,
    FeaturesInline,
    FeatureSource,
    parse_building_collection,
    parse_feature_collection,
)
from tunnel_nav.domain.mechanics.mechanics_graph import FeatureError

log = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def load_json(file: str):
    with open(file, encoding="utf-8") as f:
        data = json.load(f)
    log.debug("loaded %s", file)
    return data


def _raw(src: FeatureSource):
    if isinstance(src, FeaturesByPath):
        return load_json(src.file)
    if isinstance(src, FeaturesInline):
        return src.data
    raise TypeError(src)


def load_features(src: FeatureSource) -> FeatureCollectionModel:
    try:
        return parse_feature_collection(_raw(src))
    except ValidationError as e:
        raise FeatureError(f"invalid feature data: {e}") from e


def load_buildings(src: FeatureSource) -> BuildingCollectionModel:
    try:
        return parse_building_collection(_raw(src))
    except ValidationError as e:
        raise FeatureError(f"invalid building data: {e}") from e

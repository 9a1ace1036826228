import os
from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
)

from tunnel_nav.runtime.registries import COMPARE_BY_TIME_OUTSIDE_THEN_TIME, get_comparator

# ----------------- GEOJSON INPUT ---------------------
# GeoJSON editors add keys of their own (names, styling), so features ignore extras.


class GeoModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class BuildingFloorData(GeoModel):
    building_code: str = Field(alias="buildingCode")
    floor: str


class StairsConnection(BuildingFloorData):
    level: int


class PointGeometry(GeoModel):
    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float]


class LineGeometry(GeoModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[tuple[float, float]] = Field(min_length=2)


class LineProperties(GeoModel):
    type: Literal["hallway", "bridge", "tunnel", "walkway"]
    start: BuildingFloorData
    end: BuildingFloorData


class StairsProperties(GeoModel):
    type: Literal["stairs"] = "stairs"
    connections: list[StairsConnection] = Field(default_factory=list)


class DoorProperties(GeoModel):
    type: Literal["door", "open"]
    start: BuildingFloorData
    end: BuildingFloorData


class BuildingData(GeoModel):
    building_code: str = Field(alias="buildingCode")
    floors: list[str]


class BuildingProperties(GeoModel):
    type: Literal["building"] = "building"
    building: BuildingData


class LineFeature(GeoModel):
    type: Literal["Feature"] = "Feature"
    id: str | int | None = None
    properties: LineProperties
    geometry: LineGeometry


class StairsFeature(GeoModel):
    type: Literal["Feature"] = "Feature"
    id: str | int | None = None
    properties: StairsProperties
    geometry: PointGeometry


class DoorFeature(GeoModel):
    type: Literal["Feature"] = "Feature"
    id: str | int | None = None
    properties: DoorProperties
    geometry: PointGeometry


class BuildingFeature(GeoModel):
    type: Literal["Feature"] = "Feature"
    id: str | int | None = None
    properties: BuildingProperties
    geometry: PointGeometry


_FEATURE_TAGS = {
    "hallway": "line",
    "bridge": "line",
    "tunnel": "line",
    "walkway": "line",
    "stairs": "stairs",
    "door": "door",
    "open": "door",
}


def _feature_tag(v: Any) -> str | None:
    if isinstance(v, Mapping):
        props = v.get("properties")
        kind = props.get("type") if isinstance(props, Mapping) else None
    else:
        kind = getattr(getattr(v, "properties", None), "type", None)
    return _FEATURE_TAGS.get(kind) if isinstance(kind, str) else None


FeatureUnion = Annotated[
    Annotated[LineFeature, Tag("line")]
    | Annotated[StairsFeature, Tag("stairs")]
    | Annotated[DoorFeature, Tag("door")],
    Discriminator(_feature_tag),
]


class FeatureCollectionModel(GeoModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[FeatureUnion] = Field(default_factory=list)


class BuildingCollectionModel(GeoModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[BuildingFeature] = Field(default_factory=list)


def parse_feature_collection(obj) -> FeatureCollectionModel:
    if isinstance(obj, FeatureCollectionModel):
        return obj
    if isinstance(obj, Mapping):
        return FeatureCollectionModel.model_validate(obj)
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        return FeatureCollectionModel.model_validate({"features": list(obj)})
    raise TypeError(obj)


def parse_building_collection(obj) -> BuildingCollectionModel:
    if isinstance(obj, BuildingCollectionModel):
        return obj
    if isinstance(obj, Mapping):
        return BuildingCollectionModel.model_validate(obj)
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        return BuildingCollectionModel.model_validate({"features": list(obj)})
    raise TypeError(obj)


# ----------------- APP CONFIG ---------------------


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    walking_speed_mps: float = Field(default=1.25, gt=0)
    floor_ascend_s: float = Field(default=14.0, ge=0)
    floor_descend_s: float = Field(default=14.0, ge=0)
    # routes stay indoors unless asked otherwise
    comparator: str = COMPARE_BY_TIME_OUTSIDE_THEN_TIME
    max_expansions: int | None = Field(default=None, gt=0)

    @field_validator("comparator")
    @classmethod
    def _known_comparator(cls, v: str) -> str:
        get_comparator(v)  # raises ValueError for unknown keys
        return v


class FeaturesByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class FeaturesInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    data: dict[str, Any]


FeatureSource = Annotated[FeaturesByPath | FeaturesInline, Field(discriminator="by")]


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    features: FeatureSource
    buildings: FeatureSource | None = None
    routing: RoutingModel = RoutingModel()
    log: LogModel = LogModel()

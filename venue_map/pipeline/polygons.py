"""Corner grouping, angular ordering, and polygon/label feature assembly.

Corner records whose labels share a base name (the label with its trailing
whitespace-and-digits index removed) within one section describe the
footprint of a single area. Groups of exactly four corners become closed
quadrilateral rings; every other group size is dropped without error.

Vertices are ordered by their angle around the group centroid so that four
points in convex position never produce a bow-tie ring. The centroid is the
mean easting/northing in grid metres and is projected once to give the label
anchor.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from venue_map.common.constants import OSGB36_PROJ, QUAD_CORNER_COUNT, WGS84_PROJ
from venue_map.common.models import LocationRecord
from venue_map.pipeline.projection import project

CORNER_INDEX_SUFFIX = re.compile(r"\s+\d+\Z")

GroupKey = tuple[str, str]


@dataclass(frozen=True)
class PolygonFeature:
    section: str
    name: str
    ring: tuple[tuple[float, float], ...]
    closed: bool = True

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {"section": self.section, "name": self.name},
            "geometry": {
                "type": "Polygon",
                "coordinates": [[list(vertex) for vertex in self.ring]],
            },
        }


@dataclass(frozen=True)
class LabelFeature:
    name: str
    point: tuple[float, float]

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {"name": self.name},
            "geometry": {"type": "Point", "coordinates": list(self.point)},
        }


@dataclass(frozen=True)
class PolygonBuildResult:
    polygons: tuple[PolygonFeature, ...] = field(default_factory=tuple)
    labels: tuple[LabelFeature, ...] = field(default_factory=tuple)

    def to_feature_collections(self) -> dict[str, dict[str, Any]]:
        return {
            "polygons": feature_collection(feature.to_geojson() for feature in self.polygons),
            "labels": feature_collection(feature.to_geojson() for feature in self.labels),
        }


def feature_collection(features: Iterable[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


def base_name(label: str) -> str:
    return CORNER_INDEX_SUFFIX.sub("", label)


def group_corners(records: Iterable[LocationRecord]) -> dict[GroupKey, list[LocationRecord]]:
    """Partition records by ``(section, base_name)`` in a single pass.

    Dict insertion order keeps groups, and members within each group, in the
    order they were first seen.
    """
    groups: dict[GroupKey, list[LocationRecord]] = {}
    for record in records:
        key = (record.section, base_name(record.label))
        groups.setdefault(key, []).append(record)
    return groups


def centroid(members: Sequence[LocationRecord]) -> tuple[float, float]:
    count = len(members)
    easting = sum(member.easting for member in members) / count
    northing = sum(member.northing for member in members) / count
    return easting, northing


def order_by_angle(members: Sequence[LocationRecord], centre: tuple[float, float]) -> list[LocationRecord]:
    # Convex position only; concave footprints are not reordered.
    centre_e, centre_n = centre
    return sorted(
        members,
        key=lambda member: math.atan2(member.northing - centre_n, member.easting - centre_e),
    )


def _build_group(
    members: Sequence[LocationRecord],
    source_def: str,
    target_def: str,
) -> tuple[PolygonFeature, LabelFeature]:
    first = members[0]
    name = base_name(first.label)
    centre = centroid(members)

    ring = [project(source_def, target_def, (member.easting, member.northing)) for member in order_by_angle(members, centre)]
    ring.append(ring[0])

    polygon = PolygonFeature(section=first.section, name=name, ring=tuple(ring))
    label = LabelFeature(name=name, point=project(source_def, target_def, centre))
    return polygon, label


def build_polygons(
    corner_records: Iterable[LocationRecord],
    *,
    source_def: str = OSGB36_PROJ,
    target_def: str = WGS84_PROJ,
) -> PolygonBuildResult:
    polygons: list[PolygonFeature] = []
    labels: list[LabelFeature] = []

    for members in group_corners(corner_records).values():
        if len(members) != QUAD_CORNER_COUNT:
            continue
        polygon, label = _build_group(members, source_def, target_def)
        polygons.append(polygon)
        labels.append(label)

    return PolygonBuildResult(polygons=tuple(polygons), labels=tuple(labels))

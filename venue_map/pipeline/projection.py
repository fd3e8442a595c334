"""British National Grid to WGS84 coordinate projection."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from pyproj import CRS, Transformer

from venue_map.common.constants import OSGB36_PROJ, WGS84_PROJ
from venue_map.common.models import ConvertedLocation, LocationRecord


@lru_cache(maxsize=16)
def _transformer(source_def: str, target_def: str) -> Transformer:
    return Transformer.from_crs(CRS.from_user_input(source_def), CRS.from_user_input(target_def), always_xy=True)


def project(source_def: str, target_def: str, point: Sequence[float]) -> tuple[float, float]:
    """Transform an ``(x, y)`` pair between two coordinate definitions.

    Axis order is always x first, so geographic output is
    ``(longitude, latitude)``. Out-of-domain input yields non-finite output
    instead of an exception.
    """
    x, y = point
    out_x, out_y = _transformer(source_def, target_def).transform(float(x), float(y))
    return float(out_x), float(out_y)


def grid_to_lng_lat(
    easting: float,
    northing: float,
    *,
    source_def: str = OSGB36_PROJ,
    target_def: str = WGS84_PROJ,
) -> tuple[float, float]:
    return project(source_def, target_def, (easting, northing))


def lng_lat_to_grid(
    longitude: float,
    latitude: float,
    *,
    source_def: str = OSGB36_PROJ,
    target_def: str = WGS84_PROJ,
) -> tuple[float, float]:
    return project(target_def, source_def, (longitude, latitude))


def convert_location(
    record: LocationRecord,
    *,
    source_def: str = OSGB36_PROJ,
    target_def: str = WGS84_PROJ,
) -> ConvertedLocation:
    longitude, latitude = project(source_def, target_def, (record.easting, record.northing))
    return ConvertedLocation.from_record(record, longitude=longitude, latitude=latitude)


def convert_locations(
    records: Iterable[LocationRecord],
    *,
    source_def: str = OSGB36_PROJ,
    target_def: str = WGS84_PROJ,
) -> list[ConvertedLocation]:
    return [convert_location(record, source_def=source_def, target_def=target_def) for record in records]

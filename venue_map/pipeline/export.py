"""Location CSV, GeoJSON and map payload export."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from venue_map.common.constants import DEFAULT_FLY_TO_DURATION_MS, DEFAULT_MAP_STYLE, DEFAULT_ZOOM
from venue_map.common.fs import read_json, write_csv, write_json
from venue_map.common.models import ConvertedLocation
from venue_map.pipeline.polygons import PolygonBuildResult

LOCATION_HEADERS = [
    "section",
    "label",
    "easting",
    "northing",
    "longitude",
    "latitude",
]


def out_dir(data_dir: Path) -> Path:
    return data_dir / "out"


def intermediate_dir(data_dir: Path) -> Path:
    return data_dir / "intermediate"


def write_locations_csv(venue_config: dict, data_dir: Path, locations: Iterable[ConvertedLocation]) -> Path:
    out_path = out_dir(data_dir) / venue_config["output"]["locations_filename"]
    write_csv(out_path, LOCATION_HEADERS, (location.to_dict() for location in locations))
    return out_path


def write_locations_json(data_dir: Path, locations: Iterable[ConvertedLocation]) -> Path:
    out_path = intermediate_dir(data_dir) / "locations.json"
    write_json(out_path, {"locations": [location.to_dict() for location in locations]})
    return out_path


def write_feature_collections(venue_config: dict, data_dir: Path, result: PolygonBuildResult) -> dict[str, Path]:
    collections = result.to_feature_collections()
    paths = {
        "polygons": out_dir(data_dir) / venue_config["output"]["polygons_filename"],
        "labels": out_dir(data_dir) / venue_config["output"]["labels_filename"],
    }
    for key, path in paths.items():
        write_json(path, collections[key])
    return paths


def _map_settings(map_config: dict) -> dict[str, Any]:
    return {
        "style": map_config.get("style", DEFAULT_MAP_STYLE),
        "center": list(map_config["default_center"]),
        "zoom": map_config.get("zoom", DEFAULT_ZOOM),
        "fly_to_duration_ms": map_config.get("fly_to_duration_ms", DEFAULT_FLY_TO_DURATION_MS),
    }


def build_map_payload(
    venue_config: dict,
    locations: list[dict],
    polygons: dict,
    labels: dict,
) -> dict[str, Any]:
    """Bundle everything the presentation layer needs into one document.

    Locations are marker dicts as written by the convert stage; polygons and
    labels are GeoJSON FeatureCollections.
    """
    return {
        "venue": {"name": venue_config["venue"]["name"], "slug": venue_config["venue"]["slug"]},
        "map": _map_settings(venue_config["map"]),
        "locations": [
            {
                "section": location["section"],
                "label": location["label"],
                "longitude": location["longitude"],
                "latitude": location["latitude"],
            }
            for location in locations
        ],
        "polygons": polygons,
        "labels": labels,
    }


def write_map_payload(venue_config: dict, data_dir: Path) -> Path:
    locations = read_json(intermediate_dir(data_dir) / "locations.json")["locations"]
    polygons = read_json(out_dir(data_dir) / venue_config["output"]["polygons_filename"])
    labels = read_json(out_dir(data_dir) / venue_config["output"]["labels_filename"])

    out_path = out_dir(data_dir) / venue_config["output"]["payload_filename"]
    write_json(out_path, build_map_payload(venue_config, locations, polygons, labels))
    return out_path

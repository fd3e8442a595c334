"""Convert and polygon build stages."""

from __future__ import annotations

from pathlib import Path

from venue_map.common.config_loader import LocationDataset
from venue_map.pipeline.export import write_feature_collections, write_locations_csv, write_locations_json
from venue_map.pipeline.polygons import build_polygons
from venue_map.pipeline.projection import convert_locations


def _projection_defs(venue_config: dict) -> dict[str, str]:
    return {
        "source_def": venue_config["projection"]["source"],
        "target_def": venue_config["projection"]["target"],
    }


def run_convert(venue_config: dict, dataset: LocationDataset, data_dir: Path) -> dict:
    locations = convert_locations(dataset.points, **_projection_defs(venue_config))
    csv_path = write_locations_csv(venue_config, data_dir, locations)
    json_path = write_locations_json(data_dir, locations)
    return {
        "rows_in": len(dataset.points),
        "rows_out": len(locations),
        "paths": [csv_path, json_path],
    }


def run_polygons(venue_config: dict, dataset: LocationDataset, data_dir: Path) -> dict:
    result = build_polygons(dataset.corners, **_projection_defs(venue_config))
    paths = write_feature_collections(venue_config, data_dir, result)
    return {
        "rows_in": len(dataset.corners),
        "rows_out": len(result.polygons),
        "paths": list(paths.values()),
    }

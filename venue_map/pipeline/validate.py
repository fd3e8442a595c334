"""Validation stage and geometry quality report generation."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from venue_map.common.config_loader import LocationDataset
from venue_map.common.constants import QUAD_CORNER_COUNT
from venue_map.common.errors import ContractError, StageError
from venue_map.common.fs import read_csv, read_json, write_json
from venue_map.common.geometry import is_finite_point, is_simple_ring, signed_ring_area
from venue_map.pipeline.export import LOCATION_HEADERS, intermediate_dir, out_dir
from venue_map.pipeline.polygons import group_corners

RING_POINT_COUNT = QUAD_CORNER_COUNT + 1


def _read_stage_json(path: Path):
    if not path.exists():
        raise StageError(f"Missing stage output: {path}")
    return read_json(path)


def _dropped_groups(dataset: LocationDataset) -> list[dict]:
    dropped = []
    for (section, name), members in group_corners(dataset.corners).items():
        if len(members) != QUAD_CORNER_COUNT:
            dropped.append({"section": section, "name": name, "size": len(members)})
    return dropped


def _ring_diagnostics(feature: dict) -> dict:
    ring = feature["geometry"]["coordinates"][0]
    properties = feature.get("properties", {})
    finite = all(is_finite_point(vertex) for vertex in ring)
    return {
        "section": properties.get("section"),
        "name": properties.get("name"),
        "ring_points": len(ring),
        "closed": len(ring) > 0 and ring[0] == ring[-1],
        "finite": finite,
        "signed_area": signed_ring_area(ring) if finite else None,
        "simple": is_simple_ring(ring) if finite else None,
    }


def run_validate(venue_config: dict, dataset: LocationDataset, data_dir: Path, run_id: str) -> Path:
    output = venue_config["output"]
    locations_csv = out_dir(data_dir) / output["locations_filename"]
    if not locations_csv.exists():
        raise StageError(f"Missing stage output: {locations_csv}")
    locations_header, _rows = read_csv(locations_csv)
    locations = _read_stage_json(intermediate_dir(data_dir) / "locations.json")["locations"]
    polygons = _read_stage_json(out_dir(data_dir) / output["polygons_filename"])
    labels = _read_stage_json(out_dir(data_dir) / output["labels_filename"])

    rings = [_ring_diagnostics(feature) for feature in polygons["features"]]
    dropped = _dropped_groups(dataset)

    non_finite_locations = sum(
        1 for location in locations if not is_finite_point((location["longitude"], location["latitude"]))
    )
    non_finite_labels = sum(
        1 for feature in labels["features"] if not is_finite_point(feature["geometry"]["coordinates"])
    )

    label_names = Counter(feature["properties"]["name"] for feature in labels["features"])
    polygon_names = Counter(ring["name"] for ring in rings)

    warnings: list[str] = []
    errors: list[str] = []

    if locations_header != LOCATION_HEADERS:
        errors.append("LOCATIONS_HEADER_MISMATCH")
    if any(ring["ring_points"] != RING_POINT_COUNT for ring in rings):
        errors.append("RING_POINT_COUNT_MISMATCH")
    if any(not ring["closed"] for ring in rings):
        errors.append("RING_NOT_CLOSED")
    if label_names != polygon_names:
        errors.append("LABEL_POLYGON_MISMATCH")

    if dropped:
        warnings.append("NON_QUAD_GROUPS_DROPPED")
    if non_finite_locations or non_finite_labels or any(not ring["finite"] for ring in rings):
        warnings.append("NON_FINITE_COORDINATES_PRESENT")
    if any(ring["simple"] is False for ring in rings):
        warnings.append("SELF_INTERSECTING_RING")

    if errors:
        raise ContractError(";".join(errors))

    report_payload = {
        "venue": venue_config["venue"]["slug"],
        "run_id": run_id,
        "dataset": dataset.origin,
        "counts": {
            "points": len(dataset.points),
            "converted_locations": len(locations),
            "corners": len(dataset.corners),
            "corner_groups": len(dropped) + len(rings),
            "polygons": len(rings),
            "labels": len(labels["features"]),
            "non_finite_locations": non_finite_locations,
            "non_finite_labels": non_finite_labels,
        },
        "dropped_groups": dropped,
        "rings": rings,
        "warnings": warnings,
        "errors": errors,
    }

    report_path = out_dir(data_dir) / "reports" / "validation_report.json"
    write_json(report_path, report_payload)
    return report_path

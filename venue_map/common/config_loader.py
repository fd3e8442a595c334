"""Configuration and dataset loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from venue_map.common.errors import ConfigError
from venue_map.common.fs import read_yaml
from venue_map.common.models import LocationRecord
from venue_map.common.reference_data import CORNER_LOCATIONS, POINT_LOCATIONS
from venue_map.common.schema import validate_location_dataset, validate_venue_config

VENUE_CONFIG_FILENAME = "venue.yml"


@dataclass(frozen=True)
class LocationDataset:
    points: tuple[LocationRecord, ...]
    corners: tuple[LocationRecord, ...]
    origin: str


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    if not isinstance(overlay, dict):
        raise ConfigError(f"Overlay config must be a mapping: {overlay_path}")
    return _deep_merge(base, overlay)


def load_venue_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> dict:
    path = config_dir / VENUE_CONFIG_FILENAME
    overlay_path = overlay_config_dir / VENUE_CONFIG_FILENAME if overlay_config_dir is not None else None
    cfg = _load_yaml_with_overlay(path, overlay_path)
    return validate_venue_config(cfg, allow_unknown=allow_unknown)


def load_location_dataset(venue_config: dict, config_dir: Path) -> LocationDataset:
    """Resolve the venue's location records.

    A null ``dataset.path`` selects the compiled-in reference data; a relative
    path is resolved against ``config_dir``.
    """
    configured = venue_config["dataset"].get("path")
    if not configured:
        return LocationDataset(points=POINT_LOCATIONS, corners=CORNER_LOCATIONS, origin="builtin")

    path = Path(configured)
    if not path.is_absolute():
        path = config_dir / path
    if not path.exists():
        raise ConfigError(f"Missing location dataset: {path}")

    payload = validate_location_dataset(read_yaml(path))
    return LocationDataset(
        points=tuple(LocationRecord.from_dict(raw) for raw in payload["points"]),
        corners=tuple(LocationRecord.from_dict(raw) for raw in payload["corners"]),
        origin=str(path),
    )

"""Minimal strict schemas for YAML config and dataset validation."""

from __future__ import annotations

import math

from venue_map.common.errors import ConfigError

VENUE_CONFIG_KEYS = {"venue", "projection", "dataset", "map", "position_feed", "output"}
LOCATION_RECORD_KEYS = {"section", "label", "easting", "northing"}


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    _assert_mapping(obj, ctx)
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_lng_lat(value, ctx: str) -> None:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{ctx} must be a [longitude, latitude] pair")
    lon, lat = value
    if not isinstance(lon, (int, float)) or not isinstance(lat, (int, float)):
        raise ConfigError(f"{ctx} must be numeric")
    if not (-180 <= lon <= 180 and -90 <= lat <= 90):
        raise ConfigError(f"{ctx} is outside the WGS84 range")


def validate_venue_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, VENUE_CONFIG_KEYS, "venue config")
    _assert_no_unknown_keys(cfg, VENUE_CONFIG_KEYS, "venue config", allow_unknown)

    _assert_required_keys(cfg["venue"], {"name", "slug"}, "venue")
    _assert_required_keys(cfg["projection"], {"source", "target"}, "projection")
    _assert_required_keys(cfg["dataset"], {"path"}, "dataset")
    _assert_required_keys(cfg["map"], {"style", "default_center", "zoom"}, "map")
    _assert_lng_lat(cfg["map"]["default_center"], "map.default_center")
    _assert_required_keys(
        cfg["position_feed"],
        {"enabled", "endpoint", "poll_interval_seconds", "timeout_seconds"},
        "position_feed",
    )
    if float(cfg["position_feed"]["poll_interval_seconds"]) < 0:
        raise ConfigError("position_feed.poll_interval_seconds must not be negative")
    _assert_required_keys(
        cfg["output"],
        {"locations_filename", "polygons_filename", "labels_filename", "payload_filename"},
        "output",
    )

    return cfg


def _validate_record(raw, ctx: str) -> None:
    _assert_required_keys(raw, LOCATION_RECORD_KEYS, ctx)
    for axis in ("easting", "northing"):
        value = raw[axis]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{ctx}.{axis} must be numeric")
        if not math.isfinite(float(value)):
            raise ConfigError(f"{ctx}.{axis} must be finite")


def validate_location_dataset(payload) -> dict:
    """Check a YAML dataset of ``points`` and ``corners`` record lists.

    Labels and sections are free text; only the record shape is enforced.
    """
    _assert_required_keys(payload, {"points", "corners"}, "location dataset")
    for key in ("points", "corners"):
        records = payload[key]
        if records is None:
            payload[key] = []
            continue
        if not isinstance(records, list):
            raise ConfigError(f"location dataset.{key} must be a list")
        for idx, raw in enumerate(records):
            _validate_record(raw, f"{key}[{idx}]")
    return payload

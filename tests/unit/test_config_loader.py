from pathlib import Path

import pytest

from venue_map.common.config_loader import load_location_dataset, load_venue_config
from venue_map.common.errors import ConfigError
from venue_map.common.reference_data import CORNER_LOCATIONS, POINT_LOCATIONS

VENUE_YAML = """venue:
  name: Test Venue
  slug: test
projection:
  source: "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 +ellps=airy +datum=OSGB36 +units=m +no_defs"
  target: "+proj=longlat +datum=WGS84 +no_defs"
dataset:
  path: null
map:
  style: "mapbox://styles/mapbox/streets-v12"
  default_center: [-74.5, 40.0]
  zoom: 12
position_feed:
  enabled: false
  endpoint: "http://127.0.0.1:1/position"
  poll_interval_seconds: 1.0
  timeout_seconds: 5
output:
  locations_filename: locations.csv
  polygons_filename: polygons.geojson
  labels_filename: labels.geojson
  payload_filename: map_payload.json
"""


def _write_base(tmp_path: Path) -> Path:
    base = tmp_path / "base"
    base.mkdir()
    (base / "venue.yml").write_text(VENUE_YAML, encoding="utf-8")
    return base


def test_load_venue_config_from_repo_config_dir():
    cfg = load_venue_config(Path("config"))
    assert cfg["venue"]["slug"] == "jalsa"
    assert cfg["map"]["default_center"] == [-74.5, 40.0]
    assert cfg["position_feed"]["enabled"] is False


def test_load_venue_config_applies_overlay_values(tmp_path: Path):
    base = _write_base(tmp_path)
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "venue.yml").write_text(
        """position_feed:
  enabled: true
map:
  zoom: 17
""",
        encoding="utf-8",
    )

    cfg = load_venue_config(base, overlay_config_dir=overlay)

    assert cfg["position_feed"]["enabled"] is True
    assert cfg["position_feed"]["endpoint"] == "http://127.0.0.1:1/position"
    assert cfg["map"]["zoom"] == 17
    assert cfg["map"]["style"] == "mapbox://styles/mapbox/streets-v12"


def test_load_venue_config_ignores_empty_overlay_file(tmp_path: Path):
    base = _write_base(tmp_path)
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "venue.yml").write_text("", encoding="utf-8")

    cfg = load_venue_config(base, overlay_config_dir=overlay)
    assert cfg["map"]["zoom"] == 12


def test_load_venue_config_rejects_non_mapping_overlay(tmp_path: Path):
    base = _write_base(tmp_path)
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "venue.yml").write_text("- not\n- a\n- mapping\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_venue_config(base, overlay_config_dir=overlay)


def test_load_venue_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_venue_config(tmp_path)


def test_null_dataset_path_uses_reference_data(tmp_path: Path):
    cfg = load_venue_config(_write_base(tmp_path))

    dataset = load_location_dataset(cfg, tmp_path)

    assert dataset.origin == "builtin"
    assert dataset.points == POINT_LOCATIONS
    assert dataset.corners == CORNER_LOCATIONS


def test_dataset_file_relative_to_config_dir(tmp_path: Path):
    base = _write_base(tmp_path)
    (base / "site.yml").write_text(
        """points:
  - {section: Mens, label: Bazaar, easting: 475964.57, northing: 137455.61}
corners:
  - {section: Mens, label: Tent 1, easting: 476000, northing: 137000}
  - {section: Mens, label: Tent 2, easting: 476010, northing: 137000}
""",
        encoding="utf-8",
    )
    cfg = load_venue_config(base)
    cfg["dataset"]["path"] = "site.yml"

    dataset = load_location_dataset(cfg, base)

    assert [p.label for p in dataset.points] == ["Bazaar"]
    assert [c.label for c in dataset.corners] == ["Tent 1", "Tent 2"]
    assert dataset.corners[0].easting == 476000.0


def test_dataset_file_missing_raises(tmp_path: Path):
    cfg = load_venue_config(_write_base(tmp_path))
    cfg["dataset"]["path"] = "nope.yml"

    with pytest.raises(ConfigError):
        load_location_dataset(cfg, tmp_path)

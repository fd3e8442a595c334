import copy

import pytest

from venue_map.common.errors import ConfigError
from venue_map.common.schema import validate_location_dataset, validate_venue_config

BASE_VENUE = {
    "venue": {"name": "Test", "slug": "test"},
    "projection": {"source": "a", "target": "b"},
    "dataset": {"path": None},
    "map": {"style": "s", "default_center": [-74.5, 40.0], "zoom": 12},
    "position_feed": {"enabled": False, "endpoint": "x", "poll_interval_seconds": 1, "timeout_seconds": 5},
    "output": {
        "locations_filename": "a.csv",
        "polygons_filename": "b.geojson",
        "labels_filename": "c.geojson",
        "payload_filename": "d.json",
    },
}


def test_validate_venue_config_accepts_valid_shape():
    validated = validate_venue_config(copy.deepcopy(BASE_VENUE))
    assert validated["venue"]["slug"] == "test"


def test_validate_venue_config_rejects_unknown_key_by_default():
    bad = copy.deepcopy(BASE_VENUE)
    bad["unexpected"] = True
    with pytest.raises(ConfigError):
        validate_venue_config(bad)


def test_validate_venue_config_allows_unknown_when_enabled():
    okay = copy.deepcopy(BASE_VENUE)
    okay["extra"] = 1
    validate_venue_config(okay, allow_unknown=True)


def test_validate_venue_config_rejects_missing_output_key():
    bad = copy.deepcopy(BASE_VENUE)
    del bad["output"]["labels_filename"]
    with pytest.raises(ConfigError):
        validate_venue_config(bad)


@pytest.mark.parametrize("center", [[-74.5], [200.0, 40.0], ["west", 40.0], None])
def test_validate_venue_config_rejects_bad_default_center(center):
    bad = copy.deepcopy(BASE_VENUE)
    bad["map"]["default_center"] = center
    with pytest.raises(ConfigError):
        validate_venue_config(bad)


def test_validate_venue_config_rejects_non_mapping_section():
    bad = copy.deepcopy(BASE_VENUE)
    bad["map"] = ["style"]
    with pytest.raises(ConfigError):
        validate_venue_config(bad)


def test_validate_location_dataset_accepts_free_text_sections():
    payload = {
        "points": [{"section": "Anything", "label": "Bazaar", "easting": 1, "northing": 2.5}],
        "corners": None,
    }
    validated = validate_location_dataset(payload)
    assert validated["corners"] == []


@pytest.mark.parametrize(
    "record",
    [
        {"section": "Mens", "label": "A 1", "easting": "1"},
        {"section": "Mens", "label": "A 1", "easting": "1", "northing": 2},
        {"section": "Mens", "label": "A 1", "easting": True, "northing": 2},
        {"section": "Mens", "label": "A 1", "easting": float("inf"), "northing": 2},
    ],
)
def test_validate_location_dataset_rejects_bad_records(record):
    with pytest.raises(ConfigError):
        validate_location_dataset({"points": [], "corners": [record]})

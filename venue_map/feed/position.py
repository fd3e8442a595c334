"""Live position polling from an HTTP geolocation endpoint.

The endpoint may answer in the browser Geolocation shape
(``{"coords": {"longitude": ..., "latitude": ..., "accuracy": ...},
"timestamp": <epoch ms>}``) or with a flat object carrying ``longitude`` and
``latitude`` directly. Samples never enter the geometry pipeline; they are
handed straight to the presentation layer.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Callable, Iterator

from venue_map.common.constants import DEFAULT_CENTER
from venue_map.common.errors import StageError
from venue_map.common.http import HttpClient, TimeoutConfig
from venue_map.common.logging import log_event
from venue_map.common.models import PositionSample
from venue_map.common.time_utils import epoch_ms_to_iso, utc_timestamp_iso


class PositionFeedError(StageError):
    error_code = "POSITION_FEED_ERROR"


def _coordinate(raw: dict[str, Any], key: str) -> float:
    value = raw.get(key)
    if value is None or isinstance(value, bool):
        raise PositionFeedError(f"Position payload missing {key}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise PositionFeedError(f"Position payload has non-numeric {key}: {value!r}") from exc
    if not math.isfinite(number):
        raise PositionFeedError(f"Position payload has non-finite {key}")
    return number


def parse_position_payload(payload: Any) -> PositionSample:
    if not isinstance(payload, dict):
        raise PositionFeedError("Position payload must be a JSON object")
    coords = payload.get("coords", payload)
    if not isinstance(coords, dict):
        raise PositionFeedError("Position payload coords must be a JSON object")

    longitude = _coordinate(coords, "longitude")
    latitude = _coordinate(coords, "latitude")
    if not (-180 <= longitude <= 180 and -90 <= latitude <= 90):
        raise PositionFeedError(f"Position out of range: {longitude}, {latitude}")

    accuracy = coords.get("accuracy")
    try:
        timestamp = epoch_ms_to_iso(payload.get("timestamp"))
        accuracy = float(accuracy) if accuracy is not None else None
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise PositionFeedError(f"Position payload has bad timestamp or accuracy: {exc}") from exc
    return PositionSample(
        longitude=longitude,
        latitude=latitude,
        accuracy=accuracy,
        timestamp=timestamp,
    )


def fallback_position(map_config: dict | None = None) -> PositionSample:
    center = (map_config or {}).get("default_center", DEFAULT_CENTER)
    longitude, latitude = center
    return PositionSample(
        longitude=float(longitude),
        latitude=float(latitude),
        accuracy=None,
        timestamp=utc_timestamp_iso(),
        source="fallback",
    )


def fetch_position(client: HttpClient, feed_config: dict) -> PositionSample:
    payload = client.get_json(
        feed_config["endpoint"],
        timeout=TimeoutConfig.from_seconds(feed_config["timeout_seconds"]),
    )
    return parse_position_payload(payload)


def initial_position(
    client: HttpClient,
    feed_config: dict,
    map_config: dict,
    logger: logging.Logger | None = None,
) -> PositionSample:
    """First fix for centring the map; the default centre if the feed fails."""
    if not feed_config.get("enabled", False):
        return fallback_position(map_config)
    try:
        return fetch_position(client, feed_config)
    except StageError as exc:
        if logger is not None:
            log_event(
                logger,
                f"initial position unavailable: {exc}",
                level=logging.WARNING,
                event="POSITION_FALLBACK",
                status="error",
                error_code=exc.error_code,
            )
        return fallback_position(map_config)


def watch_positions(
    client: HttpClient,
    feed_config: dict,
    *,
    logger: logging.Logger | None = None,
    max_samples: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[PositionSample]:
    """Poll the feed, yielding each good sample.

    Failed polls are logged and skipped. ``max_samples`` bounds the number of
    polls (good or failed); ``None`` polls until the caller stops iterating.
    """
    interval = float(feed_config["poll_interval_seconds"])
    attempt = 0
    while max_samples is None or attempt < max_samples:
        attempt += 1
        try:
            yield fetch_position(client, feed_config)
        except StageError as exc:
            if logger is not None:
                log_event(
                    logger,
                    f"position poll failed: {exc}",
                    level=logging.WARNING,
                    event="POSITION_POLL_FAIL",
                    status="error",
                    attempt=attempt,
                    error_code=exc.error_code,
                )
        if max_samples is None or attempt < max_samples:
            sleep(interval)

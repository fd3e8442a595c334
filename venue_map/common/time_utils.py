"""UTC time helpers and run identifiers."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("run-%Y%m%dT%H%M%S%fZ")


def epoch_ms_to_iso(value: float | int | None) -> str:
    """Convert a Geolocation API millisecond timestamp to ISO 8601 UTC.

    A missing timestamp means "now", matching what a device reports for a
    fresh fix.
    """
    if value is None:
        return utc_timestamp_iso()
    moment = datetime.fromtimestamp(float(value) / 1000.0, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds")

"""Data models shared by the geometry pipeline and the position feed."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LocationRecord:
    """One surveyed point in British National Grid metres.

    ``section`` is an opaque category tag. ``label`` may end in a whitespace
    separated corner index, e.g. ``"Main Marquee 3"``.
    """

    section: str
    label: str
    easting: float
    northing: float

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "LocationRecord":
        return cls(
            section=str(raw["section"]),
            label=str(raw["label"]),
            easting=float(raw["easting"]),
            northing=float(raw["northing"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConvertedLocation:
    section: str
    label: str
    easting: float
    northing: float
    longitude: float
    latitude: float

    @classmethod
    def from_record(cls, record: LocationRecord, longitude: float, latitude: float) -> "ConvertedLocation":
        return cls(
            section=record.section,
            label=record.label,
            easting=record.easting,
            northing=record.northing,
            longitude=longitude,
            latitude=latitude,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PositionSample:
    longitude: float
    latitude: float
    accuracy: float | None
    timestamp: str
    source: str = "feed"

    @property
    def lng_lat(self) -> tuple[float, float]:
        return self.longitude, self.latitude

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

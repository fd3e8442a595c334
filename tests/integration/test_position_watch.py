from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from venue_map.cli import parse_args, run_command
from venue_map.common.fs import read_json
from venue_map.common.http import HttpClient, RetryConfig
from venue_map.feed import position as position_module
from venue_map.feed.position import watch_positions

FEED = {"enabled": True, "endpoint": "https://example.com/position", "poll_interval_seconds": 0.25, "timeout_seconds": 1}


class FakeResponse:
    def __init__(self, status_code: int, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload


def _fix(lon: float, lat: float) -> FakeResponse:
    return FakeResponse(200, {"coords": {"longitude": lon, "latitude": lat, "accuracy": 5}, "timestamp": 1780000000000})


@pytest.mark.integration
def test_watch_positions_skips_failed_polls(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    responses = iter([_fix(-0.906, 51.13), FakeResponse(503), FakeResponse(200, {"coords": {}}), _fix(-0.905, 51.131)])
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: next(responses))
    sleeps: list[float] = []

    samples = list(
        watch_positions(client, FEED, logger=logging.getLogger("test.watch"), max_samples=4, sleep=sleeps.append)
    )

    assert [s.lng_lat for s in samples] == [(-0.906, 51.13), (-0.905, 51.131)]
    assert sleeps == [0.25, 0.25, 0.25]


@pytest.mark.integration
def test_cli_watch_writes_latest_sample(monkeypatch, tmp_path: Path):
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "venue.yml").write_text(
        "position_feed:\n  enabled: true\n  poll_interval_seconds: 0\n  max_attempts: 1\n",
        encoding="utf-8",
    )
    responses = iter([_fix(-0.9, 51.1), _fix(-0.91, 51.12), _fix(-0.92, 51.14)])
    monkeypatch.setattr(
        position_module.HttpClient,
        "get_json",
        lambda self, url, **_kwargs: next(responses)._payload,
    )

    data_dir = tmp_path / "data"
    args = parse_args(
        [
            "watch",
            "--config-dir",
            "config",
            "--overlay-config-dir",
            str(overlay),
            "--data-dir",
            str(data_dir),
            "--run-id",
            "run-feed",
            "--max-samples",
            "2",
        ]
    )

    assert run_command(args) == 0

    latest = read_json(data_dir / "out" / "position.json")
    assert latest["source"] == "feed"
    assert [latest["longitude"], latest["latitude"]] == [-0.92, 51.14]

    events = [json.loads(line)["event"] for line in (data_dir / "run_meta" / "run-feed.log.jsonl").read_text().splitlines()]
    assert "POSITION_INITIAL" in events

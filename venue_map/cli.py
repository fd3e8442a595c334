"""CLI entrypoint for the venue map geometry pipeline."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from venue_map.common.config_loader import LocationDataset, load_location_dataset, load_venue_config
from venue_map.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS, STAGES
from venue_map.common.errors import ConfigError, PipelineError
from venue_map.common.fs import write_json
from venue_map.common.http import HttpClient, RetryConfig, TimeoutConfig
from venue_map.common.logging import build_logger, close_logger, log_event
from venue_map.common.time_utils import generate_run_id
from venue_map.feed.position import initial_position, watch_positions
from venue_map.pipeline.export import out_dir, write_map_payload
from venue_map.pipeline.stages import run_convert, run_polygons
from venue_map.pipeline.validate import run_validate


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=[*STAGES, "all", "watch"])
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    parser.add_argument("--max-samples", type=int, default=None)
    return parser.parse_args(argv)


def execute_stage(stage: str, cfg: dict, dataset: LocationDataset, data_dir: Path, run_id: str) -> dict:
    if stage == "convert":
        return run_convert(cfg, dataset, data_dir)
    if stage == "polygons":
        return run_polygons(cfg, dataset, data_dir)
    if stage == "validate":
        report_path = run_validate(cfg, dataset, data_dir, run_id)
        return {"paths": [report_path]}
    raise ValueError(f"Unknown stage: {stage}")


def run_stages(args: argparse.Namespace, cfg: dict, dataset: LocationDataset, logger: logging.Logger, run_id: str) -> int:
    data_dir = Path(args.data_dir)
    venue = cfg["venue"]["slug"]
    stages = STAGES if args.command == "all" else (args.command,)
    had_partial_failure = False

    for stage in stages:
        log_event(logger, "stage start", run_id=run_id, stage=stage, venue=venue, event="STAGE_START", status="ok")
        started = time.monotonic()
        try:
            result = execute_stage(stage, cfg, dataset, data_dir, run_id)
        except PipelineError as exc:
            had_partial_failure = True
            log_event(
                logger,
                f"stage {stage} failed: {exc}",
                level=logging.ERROR,
                run_id=run_id,
                stage=stage,
                venue=venue,
                event="STAGE_FAIL",
                status="error",
                error_code=exc.error_code,
            )
            if exc.error_code == "CONTRACT_ERROR" or args.strict:
                return EXIT_HARD_FAIL
            continue
        except Exception:
            had_partial_failure = True
            logger.exception(
                f"unexpected failure in stage {stage}",
                extra={
                    "run_id": run_id,
                    "stage": stage,
                    "venue": venue,
                    "event": "STAGE_FAIL",
                    "status": "error",
                    "error_code": "UNEXPECTED_ERROR",
                },
            )
            if args.strict:
                return EXIT_HARD_FAIL
            continue
        log_event(
            logger,
            "stage end",
            run_id=run_id,
            stage=stage,
            venue=venue,
            event="STAGE_END",
            status="ok",
            duration_ms=int((time.monotonic() - started) * 1000),
            rows_in=result.get("rows_in"),
            rows_out=result.get("rows_out"),
        )

    if args.command == "all" and not had_partial_failure:
        payload_path = write_map_payload(cfg, data_dir)
        log_event(logger, f"map payload written to {payload_path}", run_id=run_id, venue=venue, event="PAYLOAD_WRITTEN", status="ok")

    if had_partial_failure:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def run_watch(args: argparse.Namespace, cfg: dict, logger: logging.Logger, run_id: str) -> int:
    feed_config = cfg["position_feed"]
    position_path = out_dir(Path(args.data_dir)) / "position.json"
    retry = RetryConfig(max_attempts=int(feed_config.get("max_attempts", 3)))
    timeout = TimeoutConfig.from_seconds(feed_config["timeout_seconds"])

    with HttpClient(timeout=timeout, retry=retry) as client:
        first = initial_position(client, feed_config, cfg["map"], logger=logger)
        write_json(position_path, first.to_dict())
        log_event(logger, "initial position", run_id=run_id, event="POSITION_INITIAL", status="ok" if first.source == "feed" else "fallback")

        if not feed_config.get("enabled", False):
            return EXIT_SUCCESS

        for sample in watch_positions(client, feed_config, logger=logger, max_samples=args.max_samples):
            write_json(position_path, sample.to_dict())
            log_event(logger, f"position {sample.latitude:.4f}, {sample.longitude:.4f}", level=logging.DEBUG, run_id=run_id, event="POSITION_SAMPLE", status="ok")
    return EXIT_SUCCESS


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    config_dir = Path(args.config_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(run_id, data_dir=Path(args.data_dir), level=args.log_level)
    try:
        try:
            cfg = load_venue_config(config_dir, overlay_config_dir=overlay_config_dir)
            dataset = load_location_dataset(cfg, config_dir)
        except ConfigError as exc:
            log_event(logger, str(exc), level=logging.ERROR, run_id=run_id, event="CONFIG_FAIL", status="error", error_code=exc.error_code)
            return EXIT_HARD_FAIL

        if args.command == "watch":
            return run_watch(args, cfg, logger, run_id)
        return run_stages(args, cfg, dataset, logger, run_id)
    finally:
        close_logger(logger)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL
    except KeyboardInterrupt:
        return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())

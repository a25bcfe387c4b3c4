#!/usr/bin/env python3

"""
Entry point for the Powercast predictive analytics engine: reads historical consumption records as JSON and prints the prediction document.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Sequence

import numpy as np
from pydantic import ValidationError

from api.requests import PredictionOptions
from api.responses import PredictionResult
from config import settings
from engine.aggregation import aggregate_daily, fill_missing_days, history_window_days
from engine.exceptions import AnalyticsError
from engine.predictions import generate_predictions
from engine.series import parse_timestamp

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Forecast energy consumption from historical records")
    parser.add_argument("input", nargs="?", default="-", help="JSON array of records ('-' for stdin)")
    parser.add_argument("--days", type=int, default=settings.forecast_days, help="Forecast horizon in days")
    parser.add_argument(
        "--threshold", type=float, default=settings.anomaly_threshold, help="Anomaly z-score threshold"
    )
    parser.add_argument("--now", default=None, help="Reference time (ISO-8601), defaults to the wall clock")
    parser.add_argument(
        "--readings",
        action="store_true",
        help="Treat input as raw sensor readings: aggregate daily and fill sparse history",
    )
    parser.add_argument(
        "--max-anomalies",
        type=int,
        default=settings.anomaly_response_limit,
        help="Anomalies to list in the output (0 for all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for gap-fill estimates")
    parser.add_argument("--strict", action="store_true", help="Fail instead of returning placeholder numbers")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    return parser.parse_args(argv)


def _load_records(source: str) -> List[Any]:
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        with open(source, "r", encoding="utf-8") as fh:
            payload = json.load(fh)
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array of records, got {type(payload).__name__}")
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    args = _parse_args(argv)

    now = datetime.now(timezone.utc)
    if args.now:
        parsed = parse_timestamp(args.now)
        if parsed is None:
            log.error("invalid --now value: %s", args.now)
            return 2
        now = parsed

    try:
        records = _load_records(args.input)
    except (OSError, ValueError) as exc:
        log.error("could not read records from %s: %s", args.input, exc)
        return 2

    try:
        options = PredictionOptions(forecast_days=args.days, anomaly_threshold=args.threshold)
    except ValidationError as exc:
        log.error("invalid options: %s", exc)
        return 2

    if args.readings:
        window = history_window_days(options.forecast_days)
        daily = aggregate_daily(records, since=now - timedelta(days=window))
        records = fill_missing_days(daily, now, window, rng=np.random.default_rng(args.seed))
        log.info("aggregated readings into %d daily total(s) over a %d-day window", len(records), window)

    try:
        result = generate_predictions(records, options, now=now, strict=args.strict)
    except AnalyticsError as exc:
        log.error("prediction failed: %s", exc)
        return 1

    if isinstance(result, PredictionResult):
        result = result.limit_anomalies(args.max_anomalies)

    json.dump(result.to_wire(), sys.stdout, indent=args.indent or None)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

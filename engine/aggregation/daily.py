"""
Daily aggregation of raw sensor readings into per-day consumption totals, sizing of the history window needed for a given forecast horizon, and estimation of missing days when the history is too sparse to fit a weekly model.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from config import settings
from engine.constants import READING_VALUE_FIELDS, TIMESTAMP_FIELDS, WEEKEND_DAYS
from engine.series import Observation, as_utc, day_of_week, normalize_records

log = logging.getLogger(__name__)


def history_window_days(forecast_days: int) -> int:
    return max(settings.history_min_days, forecast_days * settings.history_forecast_multiplier)


def aggregate_daily(readings: Iterable[Any], since: Optional[datetime] = None) -> List[Observation]:
    observations = normalize_records(list(readings), READING_VALUE_FIELDS, TIMESTAMP_FIELDS)
    if since is not None:
        cutoff = as_utc(since)
        observations = [o for o in observations if o.timestamp >= cutoff]

    totals: Dict[date, float] = {}
    first_seen: Dict[date, datetime] = {}
    for obs in observations:
        day = obs.timestamp.date()
        totals[day] = totals.get(day, 0.0) + obs.value
        first_seen.setdefault(day, obs.timestamp)

    daily = [
        Observation(timestamp=first_seen[day], value=totals[day])
        for day in sorted(totals)
        if totals[day] > 0
    ]
    log.debug("aggregate_daily: %d reading(s) -> %d day(s)", len(observations), len(daily))
    return daily


def _estimate(avg: float, day: datetime, rng: np.random.Generator) -> float:
    lo, hi = settings.gap_fill_variation
    weight = settings.gap_fill_weekend_multiplier if day_of_week(day) in WEEKEND_DAYS else 1.0
    return max(settings.forecast_min_value, avg * weight * float(rng.uniform(lo, hi)))


def fill_missing_days(
    observations: Sequence[Observation],
    now: datetime,
    window_days: int,
    rng: Optional[np.random.Generator] = None,
) -> List[Observation]:
    existing = list(observations)
    if len(existing) >= min(settings.gap_fill_min_days, window_days):
        return existing

    if rng is None:
        rng = np.random.default_rng()

    avg = (
        float(np.mean([o.value for o in existing]))
        if existing
        else settings.gap_fill_default_average
    )
    covered = {as_utc(o.timestamp).date() for o in existing}
    now = as_utc(now)

    filled: List[Observation] = []
    for offset in range(window_days - 1, -1, -1):
        day = now - timedelta(days=offset)
        if day.date() in covered:
            continue
        stamp = datetime.combine(day.date(), time(), tzinfo=timezone.utc)
        filled.append(Observation(timestamp=stamp, value=_estimate(avg, stamp, rng)))

    log.debug(
        "fill_missing_days: %d observed, %d estimated over %d day(s)",
        len(existing), len(filled), window_days,
    )
    return sorted(existing + filled, key=lambda o: as_utc(o.timestamp))

"""
Weekly consumption patterns: per-weekday averages bucketed Sunday=0 through Saturday=6, and projection of the next calendar date that falls on the historically heaviest weekday.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List, Sequence

import numpy as np

from engine.series import as_utc, day_of_week


def day_of_week_averages(values: Sequence[float], timestamps: Sequence[datetime]) -> Dict[int, float]:
    buckets: Dict[int, List[float]] = {d: [] for d in range(7)}
    for ts, v in zip(timestamps, values):
        buckets[day_of_week(ts)].append(float(v))
    return {d: float(np.mean(vals)) if vals else 0.0 for d, vals in buckets.items()}


def peak_weekday(averages: Dict[int, float], default: int) -> int:
    best, peak = 0.0, default
    for day in range(7):
        avg = averages.get(day, 0.0)
        if avg > best:
            best, peak = avg, day
    return peak


def next_peak_day(averages: Dict[int, float], now: datetime) -> datetime:
    now = as_utc(now)
    today = day_of_week(now)
    peak = peak_weekday(averages, default=today)
    days_until = (peak - today + 7) % 7 or 7
    return now + timedelta(days=days_until)

"""
Linear trend estimation for consumption series: an ordinary least-squares fit of value against the zero-based sample index, plus a direction label with a relative stability band so periodic series without drift read as stable.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.stats import linregress

from config import settings
from engine.enums import TrendDirection


@dataclass(frozen=True)
class TrendLine:
    slope: float
    intercept: float


def linear_trend(values: Sequence[float]) -> TrendLine:
    n = len(values)
    if n == 0:
        return TrendLine(slope=0.0, intercept=0.0)
    if n == 1:
        return TrendLine(slope=0.0, intercept=float(values[0]))

    y = np.array(values, dtype=float)
    fit = linregress(np.arange(n, dtype=float), y)
    return TrendLine(slope=float(fit.slope), intercept=float(fit.intercept))


def trend_direction(
    slope: float,
    values: Sequence[float] = (),
    stable_ratio: float | None = None,
) -> TrendDirection:
    if stable_ratio is None:
        stable_ratio = settings.trend_stable_ratio
    tolerance = 0.0
    if stable_ratio > 0 and len(values):
        tolerance = stable_ratio * float(np.mean(np.abs(np.array(values, dtype=float))))
    if abs(slope) <= tolerance:
        return TrendDirection.stable
    return TrendDirection.increasing if slope > 0 else TrendDirection.decreasing

"""
Exponential smoothing forecasters for daily energy consumption: Holt-Winters triple smoothing (level, trend, weekly season) when at least two full seasonal cycles are available, falling back to single exponential smoothing otherwise, each producing point forecasts with 95% normal-approximation confidence bounds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from config import settings
from engine.numeric import positive_finite

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    value: float
    upper: float
    lower: float


@dataclass(frozen=True)
class SmoothingResult:
    forecasts: List[ForecastPoint]
    mae: float
    std_dev: float


def default_result(horizon: int) -> SmoothingResult:
    value = settings.forecast_default_value
    band = settings.forecast_default_band
    point = ForecastPoint(value=value, upper=value * (1 + band), lower=value * (1 - band))
    return SmoothingResult(
        forecasts=[point] * horizon,
        mae=0.0,
        std_dev=value * settings.forecast_default_std_ratio,
    )


def _clamp_factor(factor: float) -> float:
    lo, hi = settings.seasonal_factor_bounds
    return max(lo, min(hi, factor))


def _error_stats(errors: List[float], anchor: float) -> tuple[float, float]:
    if errors:
        arr = np.array(errors, dtype=float)
        mae = float(arr.mean())
        std = float(np.sqrt(np.mean((arr - mae) ** 2)))
    else:
        mae = anchor * settings.forecast_mae_fallback_ratio
        std = anchor * settings.forecast_std_fallback_ratio
    return mae, max(anchor * settings.forecast_std_floor_ratio, std)


def _point(value: float, std_dev: float) -> ForecastPoint:
    spread = settings.confidence_z * std_dev
    return ForecastPoint(value=value, upper=value + spread, lower=max(0.0, value - spread))


def simple_smooth(
    values: Sequence[Optional[float]],
    alpha: float | None = None,
    horizon: int | None = None,
) -> SmoothingResult:
    if alpha is None:
        alpha = settings.smoothing_alpha
    if horizon is None:
        horizon = settings.forecast_days

    vals = positive_finite(values)
    if not vals:
        return default_result(horizon)

    smoothed = max(vals[0], settings.forecast_min_level)
    errors: List[float] = []
    for v in vals[1:]:
        errors.append(abs(v - smoothed))
        smoothed = alpha * v + (1 - alpha) * smoothed

    mae, std_dev = _error_stats(errors, smoothed)
    flat = max(settings.forecast_min_value, smoothed)
    return SmoothingResult(
        forecasts=[_point(flat, std_dev) for _ in range(horizon)],
        mae=mae,
        std_dev=std_dev,
    )


def holt_winters(
    values: Sequence[Optional[float]],
    alpha: float | None = None,
    beta: float | None = None,
    gamma: float | None = None,
    period: int | None = None,
    horizon: int | None = None,
) -> SmoothingResult:
    if alpha is None:
        alpha = settings.smoothing_alpha
    if beta is None:
        beta = settings.smoothing_beta
    if gamma is None:
        gamma = settings.smoothing_gamma
    if period is None:
        period = settings.seasonal_period
    if horizon is None:
        horizon = settings.forecast_days

    vals = positive_finite(values)
    if not vals:
        log.debug("holt_winters: no positive values, returning default forecast")
        return default_result(horizon)

    n = len(vals)
    if n < 2 * period:
        log.debug("holt_winters: %d point(s) < 2 seasons of %d, using simple smoothing", n, period)
        return simple_smooth(vals, alpha, horizon)

    level = max(vals[0], settings.forecast_min_level)
    trend = (vals[period] - vals[0]) / period if n > period else 0.0
    seasonals = [1.0] * period
    for i in range(min(period, n)):
        seasonals[i] = _clamp_factor(vals[i] / level)

    for i in range(period, n):
        prev_level = level
        slot = i % period
        factor = seasonals[slot]
        observed = vals[i] / factor if factor > 0 else vals[i]
        level = alpha * observed + (1 - alpha) * (level + trend)
        trend = beta * (level - prev_level) + (1 - beta) * trend
        if level > 0:
            seasonals[slot] = _clamp_factor(gamma * (vals[i] / level) + (1 - gamma) * seasonals[slot])

    errors = [
        abs(vals[i] - (level + trend * (i - n + 1)) * seasonals[i % period])
        for i in range(period, n)
    ]
    mae, std_dev = _error_stats(errors, level)

    forecasts = []
    for k in range(1, horizon + 1):
        value = max(settings.forecast_min_value, (level + trend * k) * seasonals[(n + k - 1) % period])
        forecasts.append(_point(value, std_dev))

    return SmoothingResult(forecasts=forecasts, mae=mae, std_dev=std_dev)

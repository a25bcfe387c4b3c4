"""
Detection logic for flagging outlying days in energy consumption series, using either a whole-series z-score test or Tukey's interquartile-range fences, with a severity label attached to each flagged observation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from config import settings
from engine.enums import AnomalyMethod, Severity
from engine.numeric import round_half_up


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    severity: Severity
    z_score: Optional[float] = None


def _zscore_anomalies(arr: np.ndarray, threshold: float) -> List[Anomaly]:
    mean, std = arr.mean(), arr.std()
    if not np.isfinite(std) or std == 0:
        return []

    z_scores = np.abs(arr - mean) / std
    anomalies: List[Anomaly] = []
    for i, (v, z) in enumerate(zip(arr, z_scores)):
        if not z > threshold:
            continue
        anomalies.append(Anomaly(
            index=i,
            value=float(v),
            z_score=round_half_up(float(z), settings.anomaly_zscore_precision),
            severity=Severity.high if z > settings.anomaly_high_z else Severity.medium,
        ))
    return anomalies


def _iqr_bounds(arr: np.ndarray) -> tuple[float, float]:
    ordered = np.sort(arr)
    n = len(ordered)
    q_lo, q_hi = settings.anomaly_iqr_quantiles
    q1 = float(ordered[math.floor(n * q_lo)])
    q3 = float(ordered[math.floor(n * q_hi)])
    spread = settings.anomaly_iqr_multiplier * (q3 - q1)
    return q1 - spread, q3 + spread


def _iqr_anomalies(arr: np.ndarray) -> List[Anomaly]:
    lower, upper = _iqr_bounds(arr)
    anomalies: List[Anomaly] = []
    for i, v in enumerate(arr):
        if lower <= v <= upper:
            continue
        # severity here records the side of the fence, not the magnitude
        anomalies.append(Anomaly(
            index=i,
            value=float(v),
            severity=Severity.low if v < lower else Severity.high,
        ))
    return anomalies


def detect_anomalies(
    values: Sequence[float],
    method: AnomalyMethod | str = AnomalyMethod.zscore,
    threshold: float | None = None,
) -> List[Anomaly]:
    if threshold is None:
        threshold = settings.anomaly_threshold
    method = AnomalyMethod(method)

    if len(values) < settings.anomaly_min_samples:
        return []

    arr = np.array(values, dtype=float)
    if method is AnomalyMethod.zscore:
        return _zscore_anomalies(arr, threshold)
    return _iqr_anomalies(arr)

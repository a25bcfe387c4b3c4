"""
Response models for the prediction document consumed by the dashboard, serialized with camelCase keys.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from engine.enums import AccuracyLabel, Severity, TrendDirection


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ForecastSeries(NpModel):

    horizon: str
    unit: str
    values: List[float]
    upper_bounds: List[float]
    lower_bounds: List[float]


class TrendSummary(NpModel):
    """Slope is per day. Direction is stable while |slope| stays within trend_stable_ratio of the mean consumption."""

    slope: float
    direction: TrendDirection


class AnomalyRecord(NpModel):

    index: int
    value: float
    z_score: Optional[float] = None
    severity: Severity
    timestamp: str


class ModelMetrics(NpModel):

    mae: float = Field(ge=0.0)
    std_dev: float = Field(ge=0.0)


class AccuracySummary(NpModel):

    mape: float
    accuracy: float = Field(ge=0.0, le=100.0)


class PredictionResult(NpModel):

    tomorrows_forecast_kwh: float
    forecast_change_percent: float
    prediction_accuracy_label: AccuracyLabel
    prediction_accuracy_percent: float
    weekly_anomalies: int
    active_anomalies: int
    next_peak_day: str
    forecast_series: ForecastSeries
    trend: TrendSummary
    anomalies: List[AnomalyRecord] = Field(default_factory=list)
    day_patterns: Dict[int, float] = Field(default_factory=dict)
    model_metrics: ModelMetrics

    def limit_anomalies(self, limit: int) -> "PredictionResult":
        if limit <= 0 or len(self.anomalies) <= limit:
            return self
        return self.model_copy(update={"anomalies": self.anomalies[:limit]})


class PredictionUnavailable(NpModel):

    error: str
    forecasts: List[Any] = Field(default_factory=list)
    anomalies: List[Any] = Field(default_factory=list)
    accuracy: AccuracySummary = Field(default_factory=lambda: AccuracySummary(mape=0.0, accuracy=100.0))

"""
Prediction orchestrator for the energy dashboard: normalizes historical daily consumption, runs the seasonal forecaster, anomaly detector, trend estimator and hold-out accuracy check, derives weekday patterns and the next peak day, and assembles the prediction document.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Mapping, Optional, Union

from api.requests import PredictionOptions
from api.responses import (
    AnomalyRecord,
    ForecastSeries,
    ModelMetrics,
    PredictionResult,
    PredictionUnavailable,
    TrendSummary,
)
from config import settings
from engine.anomaly import count_recent, detect_anomalies
from engine.constants import UNAVAILABLE_MESSAGE
from engine.enums import AccuracyLabel, AnomalyMethod
from engine.exceptions import DegenerateSeriesError, InsufficientDataError
from engine.forecast import holdout_accuracy, holt_winters
from engine.numeric import is_usable, round_half_up
from engine.patterns import day_of_week_averages, next_peak_day
from engine.series import as_utc, iso_date, iso_timestamp, normalize_records, unzip
from engine.trend import linear_trend, trend_direction

log = logging.getLogger(__name__)


def _options(options: Union[PredictionOptions, Mapping[str, Any], None]) -> PredictionOptions:
    if options is None:
        return PredictionOptions()
    if isinstance(options, PredictionOptions):
        return options
    return PredictionOptions.model_validate(dict(options))


def _change_percent(forecast: float, last: float) -> float:
    if last <= 0:
        return 0.0
    return round_half_up((forecast - last) / last * 100, settings.display_precision)


def generate_predictions(
    historical_data: Optional[Iterable[Any]],
    options: Union[PredictionOptions, Mapping[str, Any], None] = None,
    now: Optional[datetime] = None,
    strict: bool = False,
) -> Union[PredictionResult, PredictionUnavailable]:
    opts = _options(options)
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)

    observations = normalize_records(historical_data)
    if not observations:
        if strict:
            raise InsufficientDataError(UNAVAILABLE_MESSAGE)
        return PredictionUnavailable(error=UNAVAILABLE_MESSAGE)

    timestamps, values = unzip(observations)
    if strict and not any(is_usable(v) for v in values):
        raise DegenerateSeriesError("no positive consumption values to fit")

    digits = settings.display_precision
    fit = holt_winters(values, horizon=opts.forecast_days)
    anomalies = detect_anomalies(values, AnomalyMethod.zscore, opts.anomaly_threshold)
    trend = linear_trend(values)
    day_patterns = day_of_week_averages(values, timestamps)
    accuracy = holdout_accuracy(values)
    peak = next_peak_day(day_patterns, now)

    last_value = values[-1]
    tomorrow = fit.forecasts[0].value if fit.forecasts and fit.forecasts[0].value else last_value

    log.debug(
        "generate_predictions: %d observation(s), horizon=%d, %d anomaly(ies), accuracy=%.1f",
        len(values), opts.forecast_days, len(anomalies), accuracy.accuracy,
    )

    return PredictionResult(
        tomorrows_forecast_kwh=round_half_up(tomorrow, digits),
        forecast_change_percent=_change_percent(tomorrow, last_value),
        prediction_accuracy_label=AccuracyLabel.from_accuracy(accuracy.accuracy),
        prediction_accuracy_percent=accuracy.accuracy,
        weekly_anomalies=count_recent(
            anomalies, timestamps, now, timedelta(hours=settings.anomaly_weekly_window_hours)
        ),
        active_anomalies=count_recent(
            anomalies, timestamps, now, timedelta(hours=settings.anomaly_active_window_hours)
        ),
        next_peak_day=iso_date(peak),
        forecast_series=ForecastSeries(
            horizon=f"{opts.forecast_days}d",
            unit=settings.unit,
            values=[round_half_up(f.value, digits) for f in fit.forecasts],
            upper_bounds=[round_half_up(f.upper, digits) for f in fit.forecasts],
            lower_bounds=[round_half_up(f.lower, digits) for f in fit.forecasts],
        ),
        trend=TrendSummary(
            slope=round_half_up(trend.slope, settings.trend_slope_precision),
            direction=trend_direction(trend.slope, values),
        ),
        anomalies=[
            AnomalyRecord(
                index=a.index,
                value=round_half_up(values[a.index], digits),
                z_score=a.z_score,
                severity=a.severity,
                timestamp=iso_timestamp(timestamps[a.index]),
            )
            for a in anomalies
        ],
        day_patterns=day_patterns,
        model_metrics=ModelMetrics(
            mae=round_half_up(fit.mae, digits),
            std_dev=round_half_up(fit.std_dev, digits),
        ),
    )

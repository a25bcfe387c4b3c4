"""
Constants and configuration for Powercast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Tuple

from pydantic_settings import BaseSettings


POWERCAST_FORECAST_DAYS: int = int(os.getenv("POWERCAST_FORECAST_DAYS", "7"))
POWERCAST_ANOMALY_THRESHOLD: float = float(os.getenv("POWERCAST_ANOMALY_THRESHOLD", "2.5"))
POWERCAST_UNIT: str = os.getenv("POWERCAST_UNIT", "kWh")


class Settings(BaseSettings):
    unit: str = POWERCAST_UNIT

    # orchestrator defaults
    forecast_days: int = POWERCAST_FORECAST_DAYS
    anomaly_threshold: float = POWERCAST_ANOMALY_THRESHOLD

    # smoothing constants used by the orchestrator (weekly seasonality on daily data)
    smoothing_alpha: float = 0.3
    smoothing_beta: float = 0.1
    smoothing_gamma: float = 0.1
    seasonal_period: int = 7

    # returned when there is nothing positive to fit
    forecast_default_value: float = 10000.0
    forecast_default_band: float = 0.2
    forecast_default_std_ratio: float = 0.1

    # model floors and clamps
    forecast_min_value: float = 100.0
    forecast_min_level: float = 100.0
    seasonal_factor_bounds: Tuple[float, float] = (0.5, 2.0)
    confidence_z: float = 1.96

    # error statistics fallbacks, as ratios of the final level
    forecast_mae_fallback_ratio: float = 0.1
    forecast_std_fallback_ratio: float = 0.15
    forecast_std_floor_ratio: float = 0.05

    # anomaly detection
    anomaly_min_samples: int = 3
    anomaly_high_z: float = 3.0
    anomaly_iqr_multiplier: float = 1.5
    anomaly_iqr_quantiles: Tuple[float, float] = (0.25, 0.75)
    anomaly_zscore_precision: int = 2
    anomaly_weekly_window_hours: float = 7 * 24.0
    anomaly_active_window_hours: float = 24.0
    # anomalies listed in the CLI document; 0 lists all
    anomaly_response_limit: int = 10

    # hold-out validation
    accuracy_holdout: int = 7
    accuracy_min_samples: int = 14
    accuracy_placeholder: float = 92.0
    accuracy_label_high: float = 90.0
    accuracy_label_medium: float = 75.0

    # |slope| at or below this fraction of mean(|values|) counts as stable; 0 gives the strict sign rule
    trend_stable_ratio: float = 0.001
    trend_slope_precision: int = 3

    display_precision: int = 1

    # history window and gap filling for sparse daily aggregates
    history_min_days: int = 30
    history_forecast_multiplier: int = 2
    gap_fill_min_days: int = 7
    gap_fill_default_average: float = 12000.0
    gap_fill_weekend_multiplier: float = 0.7
    gap_fill_variation: Tuple[float, float] = (0.85, 1.15)

    model_config = {
        "env_prefix": "POWERCAST_",
        "extra": "ignore",
    }


settings = Settings()

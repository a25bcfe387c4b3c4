"""
Forecasting logic for daily energy consumption, including Holt-Winters triple exponential smoothing with a simple smoothing fallback and hold-out accuracy scoring, to project the coming days with confidence bounds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.smoothing import ForecastPoint, SmoothingResult, holt_winters, simple_smooth
from engine.forecast.accuracy import AccuracyScore, holdout_accuracy, score_accuracy

__all__ = [
    "ForecastPoint",
    "SmoothingResult",
    "holt_winters",
    "simple_smooth",
    "AccuracyScore",
    "holdout_accuracy",
    "score_accuracy",
]

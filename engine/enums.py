"""
Enumerations for Severity, Trend Direction, Accuracy Labels and Anomaly Methods

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TrendDirection(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"


class AccuracyLabel(str, Enum):
    high = "High"
    medium = "Medium"
    low = "Low"

    @classmethod
    def from_accuracy(cls, accuracy: float) -> AccuracyLabel:
        # cutoffs are configurable via settings so the dashboard wording can be
        # tuned without touching this logic.
        from config import settings

        if accuracy >= settings.accuracy_label_high:
            return cls.high
        if accuracy >= settings.accuracy_label_medium:
            return cls.medium
        return cls.low


class AnomalyMethod(str, Enum):
    zscore = "zscore"
    iqr = "iqr"

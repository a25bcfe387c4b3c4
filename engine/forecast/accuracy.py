"""
Accuracy scoring for the consumption forecaster: mean absolute percentage error converted to an accuracy percentage, and a hold-out self-validation that refits the model without the most recent week and scores it against what actually happened.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from config import settings
from engine.forecast.smoothing import holt_winters
from engine.numeric import round_half_up

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccuracyScore:
    mape: float
    accuracy: float


def score_accuracy(actual: Sequence[float], predicted: Sequence[float]) -> AccuracyScore:
    if len(actual) == 0 or len(predicted) == 0:
        return AccuracyScore(mape=0.0, accuracy=100.0)

    pairs = list(zip(actual, predicted))
    # zero actuals still count in the denominator
    total = sum(abs((a - p) / a) * 100 for a, p in pairs if a != 0)
    mape = total / len(pairs)
    accuracy = max(0.0, min(100.0, 100.0 - mape))

    digits = settings.display_precision
    return AccuracyScore(mape=round_half_up(mape, digits), accuracy=round_half_up(accuracy, digits))


def holdout_accuracy(
    values: Sequence[float],
    holdout: int | None = None,
    min_samples: int | None = None,
) -> AccuracyScore:
    if holdout is None:
        holdout = settings.accuracy_holdout
    if min_samples is None:
        min_samples = settings.accuracy_min_samples

    if len(values) < max(min_samples, holdout + 1):
        return AccuracyScore(mape=0.0, accuracy=settings.accuracy_placeholder)

    training = list(values[:-holdout])
    actual = list(values[-holdout:])
    validation = holt_winters(training, horizon=holdout)
    score = score_accuracy(actual, [f.value for f in validation.forecasts])
    log.debug(
        "holdout_accuracy: trained on %d, scored %d, mape=%.1f accuracy=%.1f",
        len(training), len(actual), score.mape, score.accuracy,
    )
    return score

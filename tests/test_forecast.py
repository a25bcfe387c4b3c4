"""
Test cases for the exponential smoothing forecasters, including the empty-input default, the simple smoothing fallback for short histories, confidence band invariants, and weekly seasonal tracking.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import numpy as np
import pytest

from config import settings
from conftest import weekly_sine
from engine.forecast.smoothing import SmoothingResult, holt_winters, simple_smooth


@pytest.mark.parametrize("values", [[], [0, -5, None, float("nan")], [0.0] * 20])
def test_default_forecast_when_nothing_positive(values):
    res = holt_winters(values, horizon=5)
    assert isinstance(res, SmoothingResult)
    assert len(res.forecasts) == 5
    for f in res.forecasts:
        assert f.value == pytest.approx(10000)
        assert f.upper == pytest.approx(12000)
        assert f.lower == pytest.approx(8000)
    assert res.mae == 0
    assert res.std_dev == pytest.approx(1000)


def test_simple_smooth_default_policy():
    res = simple_smooth([], horizon=2)
    assert [f.value for f in res.forecasts] == pytest.approx([10000, 10000])
    assert res.std_dev == pytest.approx(1000)


def test_short_history_delegates_to_simple_smoothing():
    vals = [100, 200, 300]
    assert holt_winters(vals, period=7, horizon=3) == simple_smooth(vals, 0.3, 3)


def test_simple_smooth_values():
    # smoothed: 100 -> 130 -> 181, errors measured before each update: 100, 170
    res = simple_smooth([100, 200, 300], alpha=0.3, horizon=3)
    assert res.mae == pytest.approx(135)
    assert res.std_dev == pytest.approx(35)
    for f in res.forecasts:
        assert f.value == pytest.approx(181)
        assert f.upper == pytest.approx(181 + 1.96 * 35)
        assert f.lower == pytest.approx(181 - 1.96 * 35)


def test_simple_smooth_single_value_uses_fallback_ratios():
    res = simple_smooth([5000], horizon=1)
    assert res.mae == pytest.approx(500)
    assert res.std_dev == pytest.approx(750)
    point = res.forecasts[0]
    assert point.value == pytest.approx(5000)
    assert point.upper == pytest.approx(5000 + 1.96 * 750)
    assert point.lower == pytest.approx(5000 - 1.96 * 750)


def test_simple_smooth_floors_level_and_std():
    # level starts at the 100 floor; zero error spread is lifted to 5% of the level
    res = simple_smooth([20, 30], alpha=0.3, horizon=2)
    assert res.mae == pytest.approx(70)
    assert res.std_dev == pytest.approx(79 * 0.05)
    assert res.forecasts[0].value == pytest.approx(100)


def test_constant_series_has_floor_band():
    res = holt_winters([10000.0] * 21, horizon=4)
    assert res.mae == pytest.approx(0, abs=1e-6)
    assert res.std_dev == pytest.approx(500)
    for f in res.forecasts:
        assert f.value == pytest.approx(10000)
        assert f.upper == pytest.approx(10980)
        assert f.lower == pytest.approx(9020)


def test_band_invariants_on_noisy_series():
    rng = np.random.default_rng(7)
    vals = list(rng.uniform(50, 20000, size=40))
    res = holt_winters(vals, horizon=10)
    assert len(res.forecasts) == 10
    for f in res.forecasts:
        assert f.value >= 100
        assert f.lower >= 0
        assert f.lower <= f.value <= f.upper
    assert res.mae >= 0
    assert res.std_dev > 0


def test_tracks_weekly_season():
    vals = weekly_sine(28)
    res = holt_winters(vals, horizon=7)
    expected = [10000 + 500 * math.sin(2 * math.pi * (28 + k) / 7) for k in range(7)]
    assert [f.value for f in res.forecasts] == pytest.approx(expected, abs=1.0)


def test_invalid_points_are_dropped_before_fitting():
    vals = weekly_sine(28)
    noisy = vals[:10] + [None, float("nan"), 0, -3] + vals[10:]
    assert holt_winters(noisy, horizon=3) == holt_winters(vals, horizon=3)


def test_min_value_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_min_value", 250.0)
    res = simple_smooth([120, 110], horizon=1)
    assert res.forecasts[0].value == pytest.approx(250)


def test_horizon_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_days", 3)
    assert len(holt_winters(weekly_sine(21)).forecasts) == 3

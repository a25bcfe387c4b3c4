"""
Trend subpackage for the Powercast engine.

This module re-exports :class:`TrendLine`, :func:`linear_trend` and
:func:`trend_direction` from :mod:`engine.trend.regression`, giving consumers a
clean import path of ``engine.trend``.  The implementation itself lives in
``regression.py``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.regression import TrendLine, linear_trend, trend_direction

__all__ = ["TrendLine", "linear_trend", "trend_direction"]

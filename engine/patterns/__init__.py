"""
Day-of-week pattern subpackage for the Powercast engine.

Re-exports :func:`day_of_week_averages` and :func:`next_peak_day` from
:mod:`engine.patterns.weekday`.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.patterns.weekday import day_of_week_averages, next_peak_day, peak_weekday

__all__ = ["day_of_week_averages", "next_peak_day", "peak_weekday"]

"""
Aggregation subpackage for the Powercast engine: turns raw sensor readings into the daily totals the forecaster consumes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.aggregation.daily import aggregate_daily, fill_missing_days, history_window_days

__all__ = ["aggregate_daily", "fill_missing_days", "history_window_days"]

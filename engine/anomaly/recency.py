"""
Recency counting for detected anomalies, relative to an explicitly supplied reference time.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Sequence

from engine.anomaly.detection import Anomaly
from engine.series import as_utc


def count_recent(
    anomalies: Sequence[Anomaly],
    timestamps: Sequence[datetime],
    now: datetime,
    window: timedelta,
) -> int:
    cutoff = as_utc(now) - window
    return sum(1 for a in anomalies if as_utc(timestamps[a.index]) >= cutoff)

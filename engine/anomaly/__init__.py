"""
Anomaly detection logic for daily energy consumption series, utilizing whole-series z-scores or interquartile-range fences, along with recency counting against a supplied reference time, to surface unusual consumption days on the dashboard.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import Anomaly, detect_anomalies
from engine.anomaly.recency import count_recent

__all__ = ["Anomaly", "detect_anomalies", "count_recent"]

import math
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


# Wednesday, so weekday arithmetic in tests is easy to follow
NOW = datetime(2024, 3, 13, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


def daily_records(values, end=NOW, key="value"):
    """Build one record per day, the last one landing on ``end``'s date at midnight UTC."""
    start = datetime(end.year, end.month, end.day, tzinfo=timezone.utc) - timedelta(days=len(values) - 1)
    return [{"timestamp": start + timedelta(days=i), key: v} for i, v in enumerate(values)]


def weekly_sine(n, base=10000.0, amplitude=500.0):
    return [base + amplitude * math.sin(2 * math.pi * i / 7) for i in range(n)]

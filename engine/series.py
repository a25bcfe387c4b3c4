"""
Series normalization logic for turning heterogeneous dashboard records (daily aggregates, raw sensor rows, pre-built observations) into a canonical ordered sequence of timestamped consumption values, so the forecasting and anomaly code only ever sees one shape.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from engine.constants import TIMESTAMP_FIELDS, VALUE_FIELDS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    timestamp: datetime
    value: float


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(raw: Any) -> Optional[datetime]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, datetime):
        return as_utc(raw)
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day, tzinfo=timezone.utc)
    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            return None
        try:
            return datetime.fromtimestamp(float(raw), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    text = str(raw).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def _first_number(record: Mapping[str, Any], keys: Sequence[str]) -> float:
    for key in keys:
        raw = record.get(key)
        if raw is None or isinstance(raw, bool):
            continue
        try:
            v = float(raw)
        except (TypeError, ValueError):
            continue
        if math.isfinite(v) and v != 0:
            return v
    return 0.0


def _first_timestamp(record: Mapping[str, Any], keys: Sequence[str]) -> Optional[datetime]:
    for key in keys:
        raw = record.get(key)
        if raw is None or raw == "":
            continue
        return parse_timestamp(raw)
    return None


def to_observation(
    record: Any,
    value_fields: Sequence[str] = VALUE_FIELDS,
    timestamp_fields: Sequence[str] = TIMESTAMP_FIELDS,
) -> Optional[Observation]:
    if isinstance(record, Observation):
        value = float(record.value)
        if not math.isfinite(value):
            value = 0.0
        return Observation(timestamp=as_utc(record.timestamp), value=value)
    if not isinstance(record, Mapping):
        log.warning("to_observation expected mapping, got %s", type(record).__name__)
        return None

    ts = _first_timestamp(record, timestamp_fields)
    if ts is None:
        log.warning("to_observation: no usable timestamp in record keys=%s", list(record))
        return None
    return Observation(timestamp=ts, value=_first_number(record, value_fields))


def normalize_records(
    records: Optional[Iterable[Any]],
    value_fields: Sequence[str] = VALUE_FIELDS,
    timestamp_fields: Sequence[str] = TIMESTAMP_FIELDS,
) -> List[Observation]:
    if not records:
        return []
    out: List[Observation] = []
    skipped = 0
    for record in records:
        obs = to_observation(record, value_fields, timestamp_fields)
        if obs is None:
            skipped += 1
            continue
        out.append(obs)
    if skipped:
        log.warning("normalize_records skipped %d of %d record(s)", skipped, skipped + len(out))
    return out


def unzip(observations: Sequence[Observation]) -> Tuple[List[datetime], List[float]]:
    return [o.timestamp for o in observations], [o.value for o in observations]


def iso_timestamp(dt: datetime) -> str:
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_date(dt: datetime) -> str:
    return as_utc(dt).date().isoformat()


def day_of_week(dt: datetime) -> int:
    # Sunday=0 .. Saturday=6
    return (as_utc(dt).weekday() + 1) % 7

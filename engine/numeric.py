"""
Numeric helpers shared across the engine: half-up rounding for display quantities
and filtering of series down to usable values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional


def round_half_up(value: float, digits: int = 1) -> float:
    # dashboard numbers were always produced by Math.round, which rounds .5 up
    scale = 10 ** digits
    return math.floor(float(value) * scale + 0.5) / scale


def is_usable(value: Optional[float]) -> bool:
    if value is None:
        return False
    try:
        v = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(v) and v > 0


def positive_finite(values: Iterable[Optional[float]]) -> List[float]:
    return [float(v) for v in values if is_usable(v)]

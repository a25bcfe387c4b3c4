from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config import settings


class PredictionOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    forecast_days: int = Field(default_factory=lambda: settings.forecast_days, ge=1)
    anomaly_threshold: float = Field(default_factory=lambda: settings.anomaly_threshold, gt=0.0)

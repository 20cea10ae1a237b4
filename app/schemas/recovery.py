"""
Recovery schemas: timeline, training load trend and recovery score.
"""

import datetime

from pydantic import BaseModel, Field


class TrainingLoadTrend(BaseModel):
    """Week-over-week training load trend."""

    trend: str = Field(
        ...,
        description="One of: insufficient_data, new, increasing, decreasing, stable",
    )
    value: float = Field(
        ...,
        description="Change vs the previous week, or the weekly mean when trend is 'new'",
    )


class RecoveryTimelinePoint(BaseModel):
    """One night on the recovery timeline."""

    date: datetime.date
    readiness_score: float
    hrv: float
    resting_hr: float
    sleep_duration_h: float
    spo2: float
    training_load: float
    events: list[str] = Field(default_factory=list)


class RecoveryTimelineResponse(BaseModel):
    athlete_code: str
    load_trend: TrainingLoadTrend
    timeline: list[RecoveryTimelinePoint] = Field(default_factory=list)


class RecoveryScore(BaseModel):
    """Digital-twin recovery score for a single night."""

    athlete_code: str
    date: datetime.date | None = None
    score: int = Field(..., description="Recovery score (typically 0-100)")
    effective_hrv: float = Field(
        ..., description="HRV discounted by training load (ms, floor 10)",
    )
    hrv: float
    resting_hr: float
    sleep_duration_h: float
    training_load: float
    spo2: float
    temperature_c: float
    explanation: str

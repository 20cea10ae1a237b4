"""
Sleep analysis schemas.
"""

import datetime

from pydantic import BaseModel, Field


class SleepNight(BaseModel):
    """Derived sleep metrics for one night."""

    date: datetime.date
    sleep_duration_h: float
    recommended_sleep_h: float
    sleep_debt_h: float = Field(..., description="Duration minus recommended (negative = debt)")
    time_in_bed_h: float
    sleep_efficiency_pct: float
    deep_sleep_pct: float
    rem_sleep_pct: float
    light_sleep_pct: float
    sleep_onset_time: datetime.time | None = None
    wake_time: datetime.time | None = None
    chronotype: str = Field(
        ..., description="Morning Type, Intermediate, Evening Type or Unknown",
    )
    stress_indicators: list[str] = Field(default_factory=list)


class SleepConsistency(BaseModel):
    std_dev_minutes: float = Field(
        0.0, description="Mean of onset and wake time standard deviations",
    )
    level: str = Field(
        ..., description="High, Moderate, Low or Insufficient Data",
    )


class SleepAnalysis(BaseModel):
    athlete_code: str
    period_days: int
    nights: list[SleepNight] = Field(default_factory=list)
    consistency: SleepConsistency
    avg_deep_sleep_pct: float = 0.0
    avg_rem_sleep_pct: float = 0.0
    avg_light_sleep_pct: float = 0.0
    avg_sleep_debt_h: float = 0.0
    current_chronotype: str = "Unknown"

"""
Stress and autonomic load schemas.
"""

import datetime

from pydantic import BaseModel, Field


class StatusAssessment(BaseModel):
    """Band label with a short coaching message."""

    status: str
    message: str


class DailyStressLoad(BaseModel):
    """Acute (last N nights) vs chronic (N nights before) stress."""

    acute_stress: float = 0.0
    chronic_stress: float = 0.0
    stress_balance: float = Field(
        0.0, description="chronic - acute (positive = improving)",
    )


class StressSummary(BaseModel):
    """Stress picture for an athlete's latest night."""

    athlete_code: str
    date: datetime.date
    age: int
    resting_hr: float
    resting_hr_status: StatusAssessment
    hrv: float
    hrv_baseline: float = Field(..., description="Age-adjusted HRV reference (ms)")
    hrv_status: StatusAssessment
    strain_index: float = Field(..., ge=0.0, le=100.0)
    stress_level: StatusAssessment
    daily_load: DailyStressLoad
    hrv_trend: float = Field(..., description="Recent minus previous window HRV mean (ms)")
    sleep_debt_h: float = Field(..., description="Sleep duration minus 8 h")
    recovery_readiness: float = Field(..., ge=0.0, le=100.0)

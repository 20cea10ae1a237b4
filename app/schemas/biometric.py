"""
Biometric data API schemas.

One entry per athlete per night, keyed by date in the URL.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BiometricDataBase(BaseModel):
    """Nightly wearable metrics."""

    hrv_night: float = Field(..., ge=0, le=300, description="Night HRV, RMSSD (ms)")
    resting_hr: float = Field(..., ge=20, le=220, description="Resting heart rate (bpm)")
    spo2_night: float = Field(..., ge=0, le=100, description="Mean night SpO2 (%)")
    resp_rate_night: float = Field(..., ge=0, le=60, description="Breaths per minute")
    deep_sleep_pct: float = Field(..., ge=0, le=100)
    rem_sleep_pct: float = Field(..., ge=0, le=100)
    light_sleep_pct: float = Field(..., ge=0, le=100)
    sleep_duration_h: float = Field(..., ge=0, le=24)
    sleep_onset_time: Optional[datetime.time] = Field(
        None, description="Time of falling asleep (HH:MM)",
    )
    wake_time: Optional[datetime.time] = Field(
        None, description="Time of waking up (HH:MM)",
    )
    temp_trend_c: float = Field(..., ge=30, le=45, description="Skin temperature trend (°C)")
    training_load_pct: float = Field(
        ..., ge=0, le=200, description="Training load (% of planned max)",
    )


class BiometricDataCreate(BiometricDataBase):
    """Schema for creating/updating a night (date comes from the URL)."""
    pass


class BiometricDataResponse(BiometricDataBase):
    """Schema for biometric entry in API responses."""

    id: int
    athlete_id: int
    athlete_code: Optional[str] = None
    date: datetime.date
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True

"""
Biometric data database model.

Defines the biometric_data table for nightly wearable metrics.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class BiometricData(SQLModel, table=True):
    """
    Nightly biometric entry.

    Stores HRV, heart rate, SpO2, respiration, sleep architecture,
    temperature trend and the day's training load.
    One entry per athlete per day (enforced by unique constraint).
    """
    __tablename__ = "biometric_data"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_biometric_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Cardio-respiratory
    hrv_night: float = Field(nullable=False)
    resting_hr: float = Field(nullable=False)
    spo2_night: float = Field(nullable=False)
    resp_rate_night: float = Field(nullable=False)

    # Sleep architecture (% of total sleep)
    deep_sleep_pct: float = Field(nullable=False)
    rem_sleep_pct: float = Field(nullable=False)
    light_sleep_pct: float = Field(nullable=False)
    sleep_duration_h: float = Field(nullable=False)
    sleep_onset_time: Optional[datetime.time] = Field(default=None)
    wake_time: Optional[datetime.time] = Field(default=None)

    # Temperature and load
    temp_trend_c: float = Field(nullable=False)
    training_load_pct: float = Field(nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

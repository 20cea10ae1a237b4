"""
Dashboard schemas: athlete snapshot, team overview and global counts.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.alerts import Alert, MetricStatus
from app.schemas.biometric import BiometricDataResponse
from app.schemas.genetics import GeneticInsight
from app.schemas.recovery import TrainingLoadTrend


class AthleteSnapshot(BaseModel):
    """Everything the athlete page shows above the fold."""
    athlete_code: str
    name: str
    team: Optional[str] = None
    latest: Optional[BiometricDataResponse] = None
    alert: Alert
    readiness_score: float = 0.0
    metrics: list[MetricStatus] = Field(default_factory=list)
    genetic_insights: list[GeneticInsight] = Field(default_factory=list)
    training_load_trend: TrainingLoadTrend


class TeamAthleteSummary(BaseModel):
    athlete_code: str
    name: str
    team: Optional[str] = None
    date: Optional[datetime.date] = Field(None, description="Date of the latest record")
    hrv_night: Optional[float] = None
    sleep_duration_h: Optional[float] = None
    readiness_score: float = 0.0
    alert: Alert


class AlertCounts(BaseModel):
    high: int = Field(0, description="inflammation + airway alerts")
    medium: int = Field(0, description="circadian + nutrition alerts")
    optimal: int = Field(0, description="green alerts")


class TeamOverview(BaseModel):
    team: Optional[str] = Field(None, description="Team name (None = all athletes)")
    total_athletes: int
    avg_hrv: float = 0.0
    avg_sleep_h: float = 0.0
    avg_readiness: float = 0.0
    alert_counts: AlertCounts
    athletes: list[TeamAthleteSummary] = Field(default_factory=list)


class DashboardCounts(BaseModel):
    athletes: int
    biometric_records: int
    genetic_profiles: int
    body_compositions: int
    blood_results: int

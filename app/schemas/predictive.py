"""
Predictive analytics schemas: injury risk and performance forecast.
"""

import datetime

from pydantic import BaseModel, Field


class InjuryRisk(BaseModel):
    """Rule-based injury risk for one athlete."""

    athlete_code: str
    name: str
    injury_risk_score: int = Field(..., ge=0, le=100)
    risk_level: str = Field(..., description="One of: low, medium, high")
    contributing_factors: list[str] = Field(default_factory=list)


class ForecastDay(BaseModel):
    """Predicted readiness and suggested load for one future day."""

    date: datetime.date
    predicted_readiness: float
    optimal_training_load: int = Field(..., description="Suggested load (% of max)")
    confidence: int = Field(..., description="Decays 5 points per day, floor 50")


class PerformanceForecast(BaseModel):
    scope: str = Field(..., description="Athlete code, or 'team'")
    baseline_readiness: float | None = Field(
        None, description="Recent simplified readiness the forecast starts from",
    )
    days: list[ForecastDay] = Field(default_factory=list)

"""
Alert and readiness schemas.

An alert is the single headline card shown for an athlete: the first
matching physiological pattern in the latest night of data.
"""

import datetime

from pydantic import BaseModel, Field


class Alert(BaseModel):
    """Recovery alert card."""

    type: str = Field(
        ...,
        description="One of: inflammation, circadian, nutrition, airway, green, no_data",
    )
    title: str = Field(..., description="Headline including an emoji marker")
    cause: str = Field(..., description="Metrics that triggered the alert")
    rec: str = Field(..., description="Recommended action")


class MetricStatus(BaseModel):
    """Traffic-light status of one biometric compared with its team."""

    metric: str
    value: float
    status: str = Field(..., description="One of: green, yellow, red, unknown")
    team_average: float = Field(
        0.0, description="Team mean of this metric (0 when unavailable)",
    )


class ReadinessResponse(BaseModel):
    """Readiness score for the latest night of data."""

    athlete_code: str
    date: datetime.date | None = Field(
        None, description="Date of the record scored (None when no data)",
    )
    readiness_score: float = Field(
        ..., ge=0.0, le=100.0,
        description="Mean of HRV/RHR/sleep/SpO2 bucket scores × 100",
    )
    alert: Alert
    metrics: list[MetricStatus] = Field(default_factory=list)

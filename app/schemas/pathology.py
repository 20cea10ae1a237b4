"""
Pathology analysis schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HormonalBalance(BaseModel):
    cortisol: float
    testosterone: float
    ratio: float = Field(..., description="Cortisol / testosterone (0 when testosterone is missing)")
    status: str = Field(..., description="One of: catabolic, anabolic, optimal")
    message: str
    recommendations: list[str] = Field(default_factory=list)


class KeyMetric(BaseModel):
    name: str
    value: float
    unit: str
    status: str = Field(..., description="One of: critical, warning, optimal")
    reference: str
    description: str


class PathologyAnalysis(BaseModel):
    athlete_code: str
    date: Optional[datetime.date] = Field(None, description="Date of the panel analysed")
    hormonal_balance: Optional[HormonalBalance] = None
    key_metrics: list[KeyMetric] = Field(default_factory=list)

"""
Athlete API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.biometric import BiometricDataResponse
from app.schemas.blood_results import BloodResultResponse
from app.schemas.body_composition import BodyCompositionResponse
from app.schemas.genetics import GeneticEntry


class AthleteBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sport: Optional[str] = Field(None, max_length=100)
    team: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[datetime.date] = None
    gender: Optional[str] = Field(None, max_length=16)
    height_cm: Optional[float] = Field(None, gt=0, le=260)
    baseline_start_date: Optional[datetime.date] = None
    is_active: bool = True


class AthleteCreate(AthleteBase):
    """Schema for registering an athlete."""
    athlete_code: str = Field(
        ..., min_length=1, max_length=32, description="Human-readable code, e.g. ATH001",
    )


class AthleteUpdate(BaseModel):
    """Schema for updating an athlete (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    sport: Optional[str] = Field(None, max_length=100)
    team: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[datetime.date] = None
    gender: Optional[str] = Field(None, max_length=16)
    height_cm: Optional[float] = Field(None, gt=0, le=260)
    baseline_start_date: Optional[datetime.date] = None
    is_active: Optional[bool] = None


class AthleteResponse(AthleteBase):
    id: int
    athlete_code: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class AthleteAllData(BaseModel):
    """An athlete with every record type attached."""
    athlete: AthleteResponse
    biometric_data: list[BiometricDataResponse] = Field(default_factory=list)
    genetic_profile: list[GeneticEntry] = Field(default_factory=list)
    body_composition: list[BodyCompositionResponse] = Field(default_factory=list)
    blood_results: list[BloodResultResponse] = Field(default_factory=list)

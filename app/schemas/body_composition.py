"""
Body composition schemas.

The database stores segmental symmetry as flat columns; the API nests
them under ``symmetry``.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class SymmetryData(BaseModel):
    """Segmental lean mass (kg)."""
    arm_mass_left_kg: float = Field(..., ge=0)
    arm_mass_right_kg: float = Field(..., ge=0)
    leg_mass_left_kg: float = Field(..., ge=0)
    leg_mass_right_kg: float = Field(..., ge=0)
    trunk_mass_kg: Optional[float] = Field(None, ge=0)


SYMMETRY_FIELDS: tuple[str, ...] = (
    "arm_mass_left_kg", "arm_mass_right_kg",
    "leg_mass_left_kg", "leg_mass_right_kg",
    "trunk_mass_kg",
)


class BodyCompositionBase(BaseModel):
    weight_kg: float = Field(..., gt=0, description="Body weight (kg)")
    weight_kg_min: Optional[float] = None
    weight_kg_max: Optional[float] = None
    body_fat_kg: Optional[float] = Field(None, ge=0)
    body_fat_kg_min: Optional[float] = None
    body_fat_kg_max: Optional[float] = None
    muscle_mass_kg: Optional[float] = Field(None, ge=0)
    muscle_mass_kg_min: Optional[float] = None
    muscle_mass_kg_max: Optional[float] = None
    skeletal_muscle_kg: Optional[float] = Field(None, ge=0)
    body_fat_rate: float = Field(..., ge=0, le=100, description="Body fat (%)")
    bmi: float = Field(..., gt=0)
    target_weight_kg: Optional[float] = None
    weight_control_kg: float = Field(0.0, description="Weight to lose (+) or gain (-) to reach target")
    fat_control_kg: float = Field(0.0, description="Fat to lose (+) or gain (-)")
    muscle_control_kg: float = Field(0.0, description="Muscle to lose (+) or gain (-)")
    visceral_fat_grade: float = Field(0.0, ge=0)
    basal_metabolic_rate_kcal: Optional[float] = None
    fat_free_body_weight_kg: Optional[float] = None
    subcutaneous_fat_percent: Optional[float] = None
    smi_kg_m2: Optional[float] = None
    body_age: Optional[int] = None
    symmetry: Optional[SymmetryData] = None


class BodyCompositionCreate(BodyCompositionBase):
    """Schema for recording a scan (upserted by date)."""
    date: datetime.date


class BodyCompositionResponse(BodyCompositionBase):
    id: int
    athlete_id: int
    date: datetime.date
    created_at: datetime.datetime
    updated_at: datetime.datetime

    @classmethod
    def from_record(cls, record: Any) -> "BodyCompositionResponse":
        """Build from a flat database row, nesting the segmental columns."""
        data = {
            name: getattr(record, name)
            for name in cls.model_fields
            if name != "symmetry"
        }
        segments = {name: getattr(record, name) for name in SYMMETRY_FIELDS}
        if all(segments[name] is not None for name in SYMMETRY_FIELDS[:4]):
            data["symmetry"] = SymmetryData(**segments)
        return cls(**data)


class StatusLabel(BaseModel):
    value: float
    status: str


class SymmetryAssessment(BaseModel):
    arm_difference_kg: float
    leg_difference_kg: float
    leg_imbalance_pct: float = Field(
        ..., description="Leg difference relative to the mean leg mass (%)",
    )
    risk: str = Field(..., description="One of: significant, minor, excellent")
    recommendation: str


class NutritionTip(BaseModel):
    gene: str
    trait: str
    tip: str


class BodyCompositionAnalysis(BaseModel):
    athlete_code: str
    date: datetime.date
    bmi: StatusLabel
    body_fat: StatusLabel
    body_score: int = Field(..., ge=0)
    symmetry: Optional[SymmetryAssessment] = None
    nutrition_tips: list[NutritionTip] = Field(default_factory=list)
    weight_change_kg: Optional[float] = Field(
        None, description="Change since the first scan on record",
    )

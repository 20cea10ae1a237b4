"""
Body composition database model.

Defines the body_composition table for bioelectrical impedance scans.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class BodyComposition(SQLModel, table=True):
    """
    Body composition scan.

    Segmental symmetry columns are optional and exposed by the API as a
    nested ``symmetry`` object.
    One entry per athlete per day (enforced by unique constraint).
    """
    __tablename__ = "body_composition"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_body_composition_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Mass
    weight_kg: float = Field(nullable=False)
    weight_kg_min: Optional[float] = Field(default=None)
    weight_kg_max: Optional[float] = Field(default=None)
    body_fat_kg: Optional[float] = Field(default=None)
    body_fat_kg_min: Optional[float] = Field(default=None)
    body_fat_kg_max: Optional[float] = Field(default=None)
    muscle_mass_kg: Optional[float] = Field(default=None)
    muscle_mass_kg_min: Optional[float] = Field(default=None)
    muscle_mass_kg_max: Optional[float] = Field(default=None)
    skeletal_muscle_kg: Optional[float] = Field(default=None)

    # Indices
    body_fat_rate: float = Field(nullable=False)
    bmi: float = Field(nullable=False)
    target_weight_kg: Optional[float] = Field(default=None)
    weight_control_kg: float = Field(default=0.0)
    fat_control_kg: float = Field(default=0.0)
    muscle_control_kg: float = Field(default=0.0)
    visceral_fat_grade: float = Field(default=0.0)
    basal_metabolic_rate_kcal: Optional[float] = Field(default=None)
    fat_free_body_weight_kg: Optional[float] = Field(default=None)
    subcutaneous_fat_percent: Optional[float] = Field(default=None)
    smi_kg_m2: Optional[float] = Field(default=None)
    body_age: Optional[int] = Field(default=None)

    # Segmental symmetry
    arm_mass_left_kg: Optional[float] = Field(default=None)
    arm_mass_right_kg: Optional[float] = Field(default=None)
    leg_mass_left_kg: Optional[float] = Field(default=None)
    leg_mass_right_kg: Optional[float] = Field(default=None)
    trunk_mass_kg: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

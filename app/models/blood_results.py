"""
Blood results database model.

Defines the blood_results table for pathology panels.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class BloodResult(SQLModel, table=True):
    """
    Pathology panel for one athlete on one date.

    Every analyte is optional: labs rarely report the full panel.
    """
    __tablename__ = "blood_results"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_blood_results_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Hormones
    cortisol_nmol_l: Optional[float] = Field(default=None)
    testosterone: Optional[float] = Field(default=None)
    vitamin_d: Optional[float] = Field(default=None)

    # Muscle / metabolic
    ck: Optional[float] = Field(default=None)
    fasting_glucose: Optional[float] = Field(default=None)
    hba1c: Optional[float] = Field(default=None)

    # Kidney
    urea: Optional[float] = Field(default=None)
    creatinine: Optional[float] = Field(default=None)
    egfr: Optional[float] = Field(default=None)

    # Liver
    s_alanine_transaminase: Optional[float] = Field(default=None)
    s_aspartate_transaminase: Optional[float] = Field(default=None)
    s_glutamyl_transferase: Optional[float] = Field(default=None)
    lactate_dehydrogenase: Optional[float] = Field(default=None)

    # Minerals / inflammation
    calcium_adjusted: Optional[float] = Field(default=None)
    magnesium: Optional[float] = Field(default=None)
    c_reactive_protein: Optional[float] = Field(default=None)

    # Full blood count
    hemoglobin: Optional[float] = Field(default=None)
    hematocrit: Optional[float] = Field(default=None)
    wbc: Optional[float] = Field(default=None)
    neutrophils: Optional[float] = Field(default=None)
    lymphocytes: Optional[float] = Field(default=None)
    nlr: Optional[float] = Field(default=None)
    platelets: Optional[float] = Field(default=None)

    lab_name: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

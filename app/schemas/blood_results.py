"""
Blood result (pathology panel) schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BloodResultBase(BaseModel):
    cortisol_nmol_l: Optional[float] = Field(None, ge=0)
    testosterone: Optional[float] = Field(None, ge=0)
    vitamin_d: Optional[float] = Field(None, ge=0)
    ck: Optional[float] = Field(None, ge=0, description="Creatine kinase (U/L)")
    fasting_glucose: Optional[float] = None
    hba1c: Optional[float] = None
    urea: Optional[float] = None
    creatinine: Optional[float] = None
    egfr: Optional[float] = None
    s_alanine_transaminase: Optional[float] = Field(None, ge=0, description="ALT (U/L)")
    s_aspartate_transaminase: Optional[float] = Field(None, ge=0, description="AST (U/L)")
    s_glutamyl_transferase: Optional[float] = Field(None, ge=0, description="GGT (U/L)")
    lactate_dehydrogenase: Optional[float] = None
    calcium_adjusted: Optional[float] = None
    magnesium: Optional[float] = None
    c_reactive_protein: Optional[float] = Field(None, ge=0, description="CRP (mg/L)")
    hemoglobin: Optional[float] = Field(None, ge=0, description="g/dL")
    hematocrit: Optional[float] = None
    wbc: Optional[float] = None
    neutrophils: Optional[float] = None
    lymphocytes: Optional[float] = None
    nlr: Optional[float] = None
    platelets: Optional[float] = None
    lab_name: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None


class BloodResultCreate(BloodResultBase):
    """Schema for recording a panel (upserted by date)."""
    date: datetime.date


class BloodResultResponse(BloodResultBase):
    id: int
    athlete_id: int
    date: datetime.date
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True

"""
Genetic profile schemas.

Profiles are stored one row per gene but exchanged through the API as a
list of gene/genotype entries per athlete.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ======================================================================
# Profiles and gene catalog
# ======================================================================


class GeneticEntry(BaseModel):
    gene: str = Field(..., min_length=1, max_length=32, description="Gene symbol, e.g. ACTN3")
    genotype: str = Field(..., min_length=1, max_length=64, description="Genotype, e.g. RR")


class GeneticProfileUpdate(BaseModel):
    """Schema for replacing/adding genotype entries (upserted by gene)."""
    entries: list[GeneticEntry] = Field(..., min_length=1)


class GeneticProfileResponse(BaseModel):
    athlete_code: str
    entries: list[GeneticEntry] = Field(default_factory=list)
    updated_at: Optional[datetime] = None


class GeneBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=32)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=64)


class GeneCreate(GeneBase):
    pass


class GeneResponse(GeneBase):
    id: int

    class Config:
        from_attributes = True


class GeneQuery(BaseModel):
    """Body of a "which athletes carry these genes" query."""
    genes: list[str] = Field(..., min_length=1)


# ======================================================================
# Insights
# ======================================================================


class GeneticInsight(BaseModel):
    gene: str
    trait: str
    recommendation: str


class PharmacogenomicInsight(BaseModel):
    medication: str
    gene: str
    genotype: str
    effect: str
    recommendation: str
    risk_level: str = Field(..., description="One of: low, medium, high")


class NutrigenomicRecommendation(BaseModel):
    gene: str
    genotype: str
    supplement: str
    rationale: str
    dosage: str
    timing: str
    priority: str = Field(..., description="One of: low, medium, high")


class RecoveryGeneMarker(BaseModel):
    gene: str
    genotype: str
    trait: str
    impact: str
    protocol: str
    priority: str = Field(..., description="One of: low, medium, high")


class GeneticsReport(BaseModel):
    """All genotype-driven insights for one athlete."""
    athlete_code: str
    insights: list[GeneticInsight] = Field(default_factory=list)
    pharmacogenomics: list[PharmacogenomicInsight] = Field(default_factory=list)
    nutrigenomics: list[NutrigenomicRecommendation] = Field(default_factory=list)
    recovery_panel: list[RecoveryGeneMarker] = Field(default_factory=list)

"""
Genetics database models.

Defines the genes catalog and per-athlete genetic profile entries.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Gene(SQLModel, table=True):
    """Catalog entry for a tested gene (e.g. ACTN3, category ``performance``)."""
    __tablename__ = "genes"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=32, nullable=False)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None, max_length=64, index=True)


class GeneticProfile(SQLModel, table=True):
    """
    One genotype result for one athlete.

    One entry per athlete per gene (enforced by unique constraint).
    """
    __tablename__ = "genetic_profiles"
    __table_args__ = (
        UniqueConstraint("athlete_id", "gene", name="uq_genetic_athlete_gene"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    gene: str = Field(max_length=32, nullable=False, index=True)
    genotype: str = Field(max_length=64, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

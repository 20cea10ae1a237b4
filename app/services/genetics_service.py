"""
Genetics service.

Business logic for per-athlete genetic profiles and the gene catalog.
"""

import datetime
import logging
from collections import defaultdict
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.genetics import GeneRepository, GeneticProfileRepository
from app.models.genetics import Gene, GeneticProfile
from app.schemas.genetics import (
    GeneCreate,
    GeneResponse,
    GeneticEntry,
    GeneticProfileResponse,
    GeneticProfileUpdate,
)
from app.services.athlete_service import AthleteService

logger = logging.getLogger(__name__)


class GeneticsService:
    """Service for genetic profile business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = GeneticProfileRepository(session)
        self.genes = GeneRepository(session)
        self.athletes = AthleteService(session)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def get_profile(self, athlete_code: str) -> GeneticProfileResponse:
        athlete = self.athletes.get_or_404(athlete_code)
        return self._to_response(athlete_code, self.repository.get_by_athlete(athlete.id))

    def upsert_profile(self, athlete_code: str, data: GeneticProfileUpdate) -> GeneticProfileResponse:
        """Insert or overwrite genotype entries; genes not mentioned are kept."""
        athlete = self.athletes.get_or_404(athlete_code)
        now = datetime.datetime.utcnow()

        for item in data.entries:
            entry = self.repository.get_by_athlete_and_gene(athlete.id, item.gene)
            if entry is None:
                entry = GeneticProfile(athlete_id=athlete.id, gene=item.gene, genotype=item.genotype)
            else:
                entry.genotype = item.genotype
                entry.updated_at = now
            self.repository.save(entry)
            # Flush per entry so a repeated gene in one payload updates the staged row.
            self.session.flush()
        self.repository.commit()

        logger.info("Upserted %d genetic entries for %s", len(data.entries), athlete_code)
        return self._to_response(athlete_code, self.repository.get_by_athlete(athlete.id))

    def get_all_profiles(self) -> list[GeneticProfileResponse]:
        return self._group(self.repository.get_all())

    def get_profiles_by_category(self, category: str) -> list[GeneticProfileResponse]:
        return self._group(self.repository.get_by_category(category))

    def get_profiles_by_genes(self, genes: list[str]) -> list[GeneticProfileResponse]:
        return self._group(self.repository.get_by_genes(genes))

    # ------------------------------------------------------------------
    # Gene catalog
    # ------------------------------------------------------------------

    def list_genes(self, category: Optional[str] = None) -> list[Gene]:
        return self.genes.get_all(category)

    def create_gene(self, data: GeneCreate) -> GeneResponse:
        if self.genes.get_by_name(data.name):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Gene {data.name} already exists",
            )
        gene = self.genes.create(Gene(**data.model_dump()))
        return GeneResponse.model_validate(gene)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _group(self, rows: list[GeneticProfile]) -> list[GeneticProfileResponse]:
        """Group flat rows into one response per athlete, ordered by code."""
        by_athlete: dict[int, list[GeneticProfile]] = defaultdict(list)
        for row in rows:
            by_athlete[row.athlete_id].append(row)

        codes = {
            a.id: a.athlete_code
            for a in AthleteRepository(self.session).get_all(limit=10_000)
        }
        responses = [
            self._to_response(codes[athlete_id], entries)
            for athlete_id, entries in by_athlete.items()
            if athlete_id in codes
        ]
        return sorted(responses, key=lambda r: r.athlete_code)

    @staticmethod
    def _to_response(athlete_code: str, rows: list[GeneticProfile]) -> GeneticProfileResponse:
        return GeneticProfileResponse(
            athlete_code=athlete_code,
            entries=[GeneticEntry(gene=r.gene, genotype=r.genotype) for r in rows],
            updated_at=max((r.updated_at for r in rows), default=None),
        )

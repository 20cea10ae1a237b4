"""
Athlete service.

Business logic for the athlete roster and the combined "all data" view.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.biometric import BiometricRepository
from app.db.repositories.blood_results import BloodResultRepository
from app.db.repositories.body_composition import BodyCompositionRepository
from app.db.repositories.genetics import GeneticProfileRepository
from app.models.athlete import Athlete
from app.schemas.athlete import AthleteAllData, AthleteCreate, AthleteResponse, AthleteUpdate
from app.schemas.biometric import BiometricDataResponse
from app.schemas.blood_results import BloodResultResponse
from app.schemas.body_composition import BodyCompositionResponse
from app.schemas.genetics import GeneticEntry

logger = logging.getLogger(__name__)


class AthleteService:
    """Service for athlete business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = AthleteRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_or_404(self, athlete_code: str) -> Athlete:
        athlete = self.repository.get_by_code(athlete_code)
        if not athlete:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Athlete {athlete_code} not found",
            )
        return athlete

    def create(self, data: AthleteCreate) -> Athlete:
        if self.repository.exists_by_code(data.athlete_code):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Athlete {data.athlete_code} already exists",
            )
        athlete = self.repository.create(Athlete(**data.model_dump()))
        logger.info("Created athlete %s", athlete.athlete_code)
        return athlete

    def list_athletes(
        self,
        team: Optional[str] = None,
        active_only: bool = False,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Athlete]:
        return self.repository.get_all(team=team, active_only=active_only, skip=skip, limit=limit)

    def update(self, athlete_code: str, data: AthleteUpdate) -> Athlete:
        athlete = self.get_or_404(athlete_code)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(athlete, key, value)
        athlete.updated_at = datetime.datetime.utcnow()
        return self.repository.update(athlete)

    def delete(self, athlete_code: str) -> None:
        """Delete an athlete together with all of its records."""
        athlete = self.get_or_404(athlete_code)
        BiometricRepository(self.session).delete_by_athlete(athlete.id)
        GeneticProfileRepository(self.session).delete_by_athlete(athlete.id)
        BodyCompositionRepository(self.session).delete_by_athlete(athlete.id)
        BloodResultRepository(self.session).delete_by_athlete(athlete.id)
        self.repository.delete(athlete)
        logger.info("Deleted athlete %s", athlete_code)

    def get_all_data(self, athlete_code: str) -> AthleteAllData:
        athlete = self.get_or_404(athlete_code)
        biometrics = BiometricRepository(self.session).get_by_athlete(athlete.id)
        genetics = GeneticProfileRepository(self.session).get_by_athlete(athlete.id)
        scans = BodyCompositionRepository(self.session).get_by_athlete(athlete.id)
        blood = BloodResultRepository(self.session).get_by_athlete(athlete.id)

        return AthleteAllData(
            athlete=AthleteResponse.model_validate(athlete),
            biometric_data=[
                BiometricDataResponse.model_validate(b).model_copy(
                    update={"athlete_code": athlete.athlete_code}
                )
                for b in biometrics
            ],
            genetic_profile=[GeneticEntry(gene=g.gene, genotype=g.genotype) for g in genetics],
            body_composition=[BodyCompositionResponse.from_record(s) for s in scans],
            blood_results=[BloodResultResponse.model_validate(r) for r in blood],
        )

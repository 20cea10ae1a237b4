"""
Blood result service.

Business logic for pathology panels, upserted by date.
"""

import datetime
import logging

from sqlmodel import Session

from app.db.repositories.blood_results import BloodResultRepository
from app.models.blood_results import BloodResult
from app.schemas.blood_results import BloodResultCreate, BloodResultResponse
from app.services.athlete_service import AthleteService

logger = logging.getLogger(__name__)


class BloodResultService:
    """Service for blood result business logic."""

    def __init__(self, session: Session):
        self.repository = BloodResultRepository(session)
        self.athletes = AthleteService(session)

    def upsert(
        self, athlete_code: str, data: BloodResultCreate,
    ) -> tuple[BloodResultResponse, bool]:
        """Create or replace the panel for ``data.date``.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        athlete = self.athletes.get_or_404(athlete_code)
        existing = self.repository.get_by_athlete_and_date(athlete.id, data.date)

        if existing:
            for key, value in data.model_dump().items():
                setattr(existing, key, value)
            existing.updated_at = datetime.datetime.utcnow()
            entry = self.repository.save(existing)
            logger.info("Updated blood results for %s on %s", athlete_code, data.date)
            return BloodResultResponse.model_validate(entry), False

        entry = self.repository.save(BloodResult(athlete_id=athlete.id, **data.model_dump()))
        logger.info("Created blood results for %s on %s", athlete_code, data.date)
        return BloodResultResponse.model_validate(entry), True

    def list_for_athlete(self, athlete_code: str) -> list[BloodResultResponse]:
        athlete = self.athletes.get_or_404(athlete_code)
        return [BloodResultResponse.model_validate(e) for e in self.repository.get_by_athlete(athlete.id)]

    def list_all(self, skip: int = 0, limit: int = 1000) -> list[BloodResultResponse]:
        return [BloodResultResponse.model_validate(e) for e in self.repository.get_all(skip, limit)]

"""
Body composition service.

Business logic for scale scans, upserted by date.
Handles mapping between the nested API symmetry object and the flat
database columns.
"""

import datetime
import logging

from sqlmodel import Session

from app.db.repositories.body_composition import BodyCompositionRepository
from app.models.body_composition import BodyComposition
from app.schemas.body_composition import (
    SYMMETRY_FIELDS,
    BodyCompositionCreate,
    BodyCompositionResponse,
)
from app.services.athlete_service import AthleteService

logger = logging.getLogger(__name__)


class BodyCompositionService:
    """Service for body composition business logic."""

    def __init__(self, session: Session):
        self.repository = BodyCompositionRepository(session)
        self.athletes = AthleteService(session)

    def upsert(
        self, athlete_code: str, data: BodyCompositionCreate,
    ) -> tuple[BodyCompositionResponse, bool]:
        """Create or replace the scan for ``data.date``.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        athlete = self.athletes.get_or_404(athlete_code)
        flat = self._schema_to_flat(data)
        existing = self.repository.get_by_athlete_and_date(athlete.id, data.date)

        if existing:
            for key, value in flat.items():
                setattr(existing, key, value)
            existing.updated_at = datetime.datetime.utcnow()
            entry = self.repository.save(existing)
            created = False
        else:
            entry = self.repository.save(BodyComposition(athlete_id=athlete.id, **flat))
            created = True

        logger.info(
            "%s body composition for %s on %s",
            "Created" if created else "Updated", athlete_code, data.date,
        )
        return BodyCompositionResponse.from_record(entry), created

    def list_for_athlete(self, athlete_code: str) -> list[BodyCompositionResponse]:
        athlete = self.athletes.get_or_404(athlete_code)
        return [
            BodyCompositionResponse.from_record(e)
            for e in self.repository.get_by_athlete(athlete.id)
        ]

    def list_all(self, skip: int = 0, limit: int = 1000) -> list[BodyCompositionResponse]:
        return [BodyCompositionResponse.from_record(e) for e in self.repository.get_all(skip, limit)]

    @staticmethod
    def _schema_to_flat(data: BodyCompositionCreate) -> dict:
        """Convert the nested schema to a flat dict for the database model."""
        flat = data.model_dump(exclude={"symmetry"})
        symmetry = data.symmetry.model_dump() if data.symmetry else {}
        for name in SYMMETRY_FIELDS:
            flat[name] = symmetry.get(name)
        return flat

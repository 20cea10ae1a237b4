"""
Biometric data service.

Business logic for nightly biometric entries, upserted by date.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.biometric import BiometricRepository
from app.models.biometric import BiometricData
from app.schemas.biometric import BiometricDataCreate, BiometricDataResponse
from app.services.athlete_service import AthleteService

logger = logging.getLogger(__name__)


class BiometricService:
    """Service for biometric data business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = BiometricRepository(session)
        self.athletes = AthleteService(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upsert(
        self, athlete_code: str, date: datetime.date, data: BiometricDataCreate,
    ) -> tuple[BiometricDataResponse, bool]:
        """Create or replace the entry for the given night.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        athlete = self.athletes.get_or_404(athlete_code)
        existing = self.repository.get_by_athlete_and_date(athlete.id, date)

        if existing:
            for key, value in data.model_dump().items():
                setattr(existing, key, value)
            existing.updated_at = datetime.datetime.utcnow()
            entry = self.repository.update(existing)
            logger.info("Updated biometric data for %s on %s", athlete_code, date)
            return self._to_response(entry, athlete_code), False

        entry = BiometricData(athlete_id=athlete.id, date=date, **data.model_dump())
        entry = self.repository.create(entry)
        logger.info("Created biometric data for %s on %s", athlete_code, date)
        return self._to_response(entry, athlete_code), True

    def get_for_athlete(
        self,
        athlete_code: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> list[BiometricDataResponse]:
        athlete = self.athletes.get_or_404(athlete_code)
        entries = self.repository.get_by_athlete(athlete.id, start, end)
        return [self._to_response(e, athlete_code) for e in entries]

    def get_by_date(self, athlete_code: str, date: datetime.date) -> BiometricDataResponse:
        athlete = self.athletes.get_or_404(athlete_code)
        entry = self._get_entry_or_404(athlete.id, athlete_code, date)
        return self._to_response(entry, athlete_code)

    def delete_by_date(self, athlete_code: str, date: datetime.date) -> None:
        athlete = self.athletes.get_or_404(athlete_code)
        entry = self._get_entry_or_404(athlete.id, athlete_code, date)
        self.repository.delete(entry)

    def get_all(
        self,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        skip: int = 0,
        limit: int = 1000,
    ) -> list[BiometricDataResponse]:
        entries = self.repository.get_all(start, end, skip, limit)
        codes = self._athlete_codes()
        return [self._to_response(e, codes.get(e.athlete_id)) for e in entries]

    def get_latest_per_athlete(self) -> list[BiometricDataResponse]:
        codes = self._athlete_codes()
        return [
            self._to_response(e, codes.get(e.athlete_id))
            for e in self.repository.get_latest_per_athlete()
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry_or_404(
        self, athlete_id: int, athlete_code: str, date: datetime.date,
    ) -> BiometricData:
        entry = self.repository.get_by_athlete_and_date(athlete_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No biometric data for {athlete_code} on {date}",
            )
        return entry

    def _athlete_codes(self) -> dict[int, str]:
        return {
            a.id: a.athlete_code
            for a in AthleteRepository(self.session).get_all(limit=10_000)
        }

    @staticmethod
    def _to_response(entry: BiometricData, athlete_code: Optional[str]) -> BiometricDataResponse:
        response = BiometricDataResponse.model_validate(entry)
        return response.model_copy(update={"athlete_code": athlete_code})

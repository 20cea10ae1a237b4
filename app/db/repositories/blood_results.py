"""
Blood results repository.

Handles database operations for the BloodResult model.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.blood_results import BloodResult


class BloodResultRepository:
    """Repository for BloodResult database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete_and_date(
        self, athlete_id: int, date: datetime.date,
    ) -> Optional[BloodResult]:
        statement = select(BloodResult).where(
            BloodResult.athlete_id == athlete_id,
            BloodResult.date == date,
        )
        return self.session.exec(statement).first()

    def get_by_athlete(self, athlete_id: int) -> list[BloodResult]:
        """Panels for one athlete, ascending by date."""
        statement = (
            select(BloodResult)
            .where(BloodResult.athlete_id == athlete_id)
            .order_by(BloodResult.date)
        )
        return list(self.session.exec(statement).all())

    def get_latest_by_athlete(self, athlete_id: int) -> Optional[BloodResult]:
        statement = (
            select(BloodResult)
            .where(BloodResult.athlete_id == athlete_id)
            .order_by(BloodResult.date.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_all(self, skip: int = 0, limit: int = 1000) -> list[BloodResult]:
        statement = (
            select(BloodResult)
            .order_by(BloodResult.athlete_id, BloodResult.date)
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(BloodResult)).one()

    def save(self, entry: BloodResult) -> BloodResult:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_by_athlete(self, athlete_id: int) -> None:
        """Remove every panel of an athlete (caller commits)."""
        for entry in self.get_by_athlete(athlete_id):
            self.session.delete(entry)

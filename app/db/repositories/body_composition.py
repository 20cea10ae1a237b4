"""
Body composition repository.

Handles database operations for the BodyComposition model.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.body_composition import BodyComposition


class BodyCompositionRepository:
    """Repository for BodyComposition database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete_and_date(
        self, athlete_id: int, date: datetime.date,
    ) -> Optional[BodyComposition]:
        statement = select(BodyComposition).where(
            BodyComposition.athlete_id == athlete_id,
            BodyComposition.date == date,
        )
        return self.session.exec(statement).first()

    def get_by_athlete(self, athlete_id: int) -> list[BodyComposition]:
        """Scans for one athlete, ascending by date."""
        statement = (
            select(BodyComposition)
            .where(BodyComposition.athlete_id == athlete_id)
            .order_by(BodyComposition.date)
        )
        return list(self.session.exec(statement).all())

    def get_all(self, skip: int = 0, limit: int = 1000) -> list[BodyComposition]:
        statement = (
            select(BodyComposition)
            .order_by(BodyComposition.athlete_id, BodyComposition.date)
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(BodyComposition)).one()

    def save(self, entry: BodyComposition) -> BodyComposition:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_by_athlete(self, athlete_id: int) -> None:
        """Remove every scan of an athlete (caller commits)."""
        for entry in self.get_by_athlete(athlete_id):
            self.session.delete(entry)

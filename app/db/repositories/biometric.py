"""
Biometric data repository.

Handles database operations for the BiometricData model.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.biometric import BiometricData


class BiometricRepository:
    """Repository for BiometricData database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: BiometricData) -> BiometricData:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_athlete_and_date(
        self, athlete_id: int, date: datetime.date,
    ) -> Optional[BiometricData]:
        statement = select(BiometricData).where(
            BiometricData.athlete_id == athlete_id,
            BiometricData.date == date,
        )
        return self.session.exec(statement).first()

    def get_by_athlete(
        self,
        athlete_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> list[BiometricData]:
        """Entries for one athlete, ascending by date (bounds inclusive)."""
        statement = select(BiometricData).where(BiometricData.athlete_id == athlete_id)
        if start is not None:
            statement = statement.where(BiometricData.date >= start)
        if end is not None:
            statement = statement.where(BiometricData.date <= end)
        statement = statement.order_by(BiometricData.date)
        return list(self.session.exec(statement).all())

    def get_by_athletes(self, athlete_ids: list[int]) -> list[BiometricData]:
        """Entries for several athletes, ascending by athlete then date."""
        if not athlete_ids:
            return []
        statement = (
            select(BiometricData)
            .where(BiometricData.athlete_id.in_(athlete_ids))
            .order_by(BiometricData.athlete_id, BiometricData.date)
        )
        return list(self.session.exec(statement).all())

    def get_all(
        self,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        skip: int = 0,
        limit: int = 1000,
    ) -> list[BiometricData]:
        statement = select(BiometricData)
        if start is not None:
            statement = statement.where(BiometricData.date >= start)
        if end is not None:
            statement = statement.where(BiometricData.date <= end)
        statement = (
            statement.order_by(BiometricData.athlete_id, BiometricData.date)
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_latest_per_athlete(self) -> list[BiometricData]:
        """The most recent entry of every athlete that has data."""
        latest_dates = (
            select(
                BiometricData.athlete_id,
                func.max(BiometricData.date).label("max_date"),
            )
            .group_by(BiometricData.athlete_id)
            .subquery()
        )
        statement = (
            select(BiometricData)
            .join(
                latest_dates,
                (BiometricData.athlete_id == latest_dates.c.athlete_id)
                & (BiometricData.date == latest_dates.c.max_date),
            )
            .order_by(BiometricData.athlete_id)
        )
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(BiometricData)).one()

    def update(self, entry: BiometricData) -> BiometricData:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: BiometricData) -> None:
        self.session.delete(entry)
        self.session.commit()

    def delete_by_athlete(self, athlete_id: int) -> None:
        """Remove every entry of an athlete (caller commits)."""
        for entry in self.get_by_athlete(athlete_id):
            self.session.delete(entry)

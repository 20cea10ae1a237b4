"""
Athlete repository.

Handles database operations for the Athlete model.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.athlete import Athlete


class AthleteRepository:
    """Repository for Athlete database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, athlete: Athlete) -> Athlete:
        self.session.add(athlete)
        self.session.commit()
        self.session.refresh(athlete)
        return athlete

    def get_by_id(self, athlete_id: int) -> Optional[Athlete]:
        return self.session.get(Athlete, athlete_id)

    def get_by_code(self, athlete_code: str) -> Optional[Athlete]:
        statement = select(Athlete).where(Athlete.athlete_code == athlete_code)
        return self.session.exec(statement).first()

    def get_all(
        self,
        team: Optional[str] = None,
        active_only: bool = False,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Athlete]:
        """List athletes ordered by code, optionally filtered by team."""
        statement = select(Athlete)
        if team is not None:
            statement = statement.where(Athlete.team == team)
        if active_only:
            statement = statement.where(Athlete.is_active == True)  # noqa: E712
        statement = statement.order_by(Athlete.athlete_code).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def get_by_team(self, team: str) -> list[Athlete]:
        statement = (
            select(Athlete)
            .where(Athlete.team == team)
            .order_by(Athlete.athlete_code)
        )
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Athlete)).one()

    def update(self, athlete: Athlete) -> Athlete:
        self.session.add(athlete)
        self.session.commit()
        self.session.refresh(athlete)
        return athlete

    def delete(self, athlete: Athlete) -> None:
        self.session.delete(athlete)
        self.session.commit()

    def exists_by_code(self, athlete_code: str) -> bool:
        return self.get_by_code(athlete_code) is not None

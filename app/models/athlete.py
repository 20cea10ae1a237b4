"""
Athlete database model.

Defines the athletes table. Athletes are addressed in the API by their
human-readable ``athlete_code`` (e.g. ``ATH001``).
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

DEFAULT_ATHLETE_AGE = 25


class Athlete(SQLModel, table=True):
    """
    Monitored athlete.

    Biometric, genetic, body composition and blood records reference
    the athlete by its integer id.
    """
    __tablename__ = "athletes"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_code: str = Field(unique=True, index=True, max_length=32, nullable=False)
    name: str = Field(max_length=255, nullable=False)
    sport: Optional[str] = Field(default=None, max_length=100)
    team: Optional[str] = Field(default=None, max_length=100, index=True)

    date_of_birth: Optional[datetime.date] = Field(default=None)
    gender: Optional[str] = Field(default=None, max_length=16)
    height_cm: Optional[float] = Field(default=None)
    baseline_start_date: Optional[datetime.date] = Field(default=None)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    def age_on(self, when: datetime.date) -> int:
        """Age in whole years on ``when`` (defaults when DOB is unknown)."""
        if self.date_of_birth is None:
            return DEFAULT_ATHLETE_AGE
        dob = self.date_of_birth
        years = when.year - dob.year
        if (when.month, when.day) < (dob.month, dob.day):
            years -= 1
        return years

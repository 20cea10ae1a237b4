"""Database repositories."""

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.biometric import BiometricRepository
from app.db.repositories.blood_results import BloodResultRepository
from app.db.repositories.body_composition import BodyCompositionRepository
from app.db.repositories.genetics import GeneRepository, GeneticProfileRepository
from app.db.repositories.user import UserRepository

__all__ = [
    "AthleteRepository",
    "BiometricRepository",
    "BloodResultRepository",
    "BodyCompositionRepository",
    "GeneRepository",
    "GeneticProfileRepository",
    "UserRepository",
]

"""SQLModel database models."""

from app.models.user import User
from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.models.genetics import Gene, GeneticProfile
from app.models.body_composition import BodyComposition
from app.models.blood_results import BloodResult

__all__ = [
    "User",
    "Athlete",
    "BiometricData",
    "Gene",
    "GeneticProfile",
    "BodyComposition",
    "BloodResult",
]

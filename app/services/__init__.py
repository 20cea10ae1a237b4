"""Business logic services."""

from app.services.user_service import UserService
from app.services.athlete_service import AthleteService
from app.services.biometric_service import BiometricService
from app.services.genetics_service import GeneticsService
from app.services.body_composition_service import BodyCompositionService
from app.services.blood_result_service import BloodResultService
from app.services.analytics_service import AnalyticsService

__all__ = [
    "UserService",
    "AthleteService",
    "BiometricService",
    "GeneticsService",
    "BodyCompositionService",
    "BloodResultService",
    "AnalyticsService",
]

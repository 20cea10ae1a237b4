"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.athlete import Athlete  # noqa: F401
from app.models.biometric import BiometricData  # noqa: F401
from app.models.genetics import Gene, GeneticProfile  # noqa: F401
from app.models.body_composition import BodyComposition  # noqa: F401
from app.models.blood_results import BloodResult  # noqa: F401

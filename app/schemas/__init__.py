"""Pydantic schemas for request/response validation."""

from app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from app.schemas.athlete import AthleteAllData, AthleteCreate, AthleteResponse, AthleteUpdate
from app.schemas.biometric import BiometricDataCreate, BiometricDataResponse
from app.schemas.genetics import (
    GeneCreate,
    GeneResponse,
    GeneticEntry,
    GeneticProfileResponse,
    GeneticProfileUpdate,
    GeneticsReport,
)
from app.schemas.body_composition import (
    BodyCompositionAnalysis,
    BodyCompositionCreate,
    BodyCompositionResponse,
)
from app.schemas.blood_results import BloodResultCreate, BloodResultResponse
from app.schemas.alerts import Alert, MetricStatus, ReadinessResponse
from app.schemas.stress import StressSummary
from app.schemas.recovery import RecoveryScore, RecoveryTimelineResponse, TrainingLoadTrend
from app.schemas.predictive import InjuryRisk, PerformanceForecast
from app.schemas.sleep import SleepAnalysis
from app.schemas.pathology import PathologyAnalysis
from app.schemas.weather import WeatherData, WeatherImpactReport, WeatherResponse
from app.schemas.dashboard import AthleteSnapshot, DashboardCounts, TeamOverview

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "AthleteAllData",
    "AthleteCreate",
    "AthleteResponse",
    "AthleteUpdate",
    "BiometricDataCreate",
    "BiometricDataResponse",
    "GeneCreate",
    "GeneResponse",
    "GeneticEntry",
    "GeneticProfileResponse",
    "GeneticProfileUpdate",
    "GeneticsReport",
    "BodyCompositionAnalysis",
    "BodyCompositionCreate",
    "BodyCompositionResponse",
    "BloodResultCreate",
    "BloodResultResponse",
    "Alert",
    "MetricStatus",
    "ReadinessResponse",
    "StressSummary",
    "RecoveryScore",
    "RecoveryTimelineResponse",
    "TrainingLoadTrend",
    "InjuryRisk",
    "PerformanceForecast",
    "SleepAnalysis",
    "PathologyAnalysis",
    "WeatherData",
    "WeatherImpactReport",
    "WeatherResponse",
    "AthleteSnapshot",
    "DashboardCounts",
    "TeamOverview",
]

"""
Analytics endpoints: alerts, readiness, stress, recovery, risk, forecasts,
sleep, body composition, pathology and genetics.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.alerts import Alert, MetricStatus, ReadinessResponse
from app.schemas.body_composition import BodyCompositionAnalysis
from app.schemas.dashboard import AthleteSnapshot, TeamOverview
from app.schemas.genetics import GeneticsReport
from app.schemas.pathology import PathologyAnalysis
from app.schemas.predictive import InjuryRisk, PerformanceForecast
from app.schemas.recovery import RecoveryScore, RecoveryTimelineResponse, TrainingLoadTrend
from app.schemas.sleep import SleepAnalysis
from app.schemas.stress import StressSummary
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get(
    "/athletes/{athlete_code}/alert",
    summary="Current alert derived from the latest biometric record.",
    response_model=Alert,
)
def get_alert(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_alert(athlete_code)


@router.get(
    "/athletes/{athlete_code}/readiness",
    summary="Readiness score, alert and metric statuses.",
    response_model=ReadinessResponse,
)
def get_readiness(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_readiness(athlete_code)


@router.get(
    "/athletes/{athlete_code}/metrics",
    summary="Per-metric status against the team average.",
    response_model=list[MetricStatus],
)
def get_metrics(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_metric_statuses(athlete_code)


@router.get(
    "/athletes/{athlete_code}/stress",
    summary="Seven-day stress summary.",
    response_model=StressSummary,
)
def get_stress(
    athlete_code: str,
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date for the athlete's age (defaults to the latest record)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_stress(athlete_code, as_of)


@router.get(
    "/athletes/{athlete_code}/recovery",
    summary="Recovery timeline and training load trend.",
    response_model=RecoveryTimelineResponse,
)
def get_recovery(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_recovery_timeline(athlete_code)


@router.get(
    "/athletes/{athlete_code}/recovery-score",
    summary="Recovery score from the latest record.",
    response_model=RecoveryScore,
)
def get_recovery_score(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_recovery_score(athlete_code)


@router.get(
    "/athletes/{athlete_code}/training-load",
    summary="Training load trend (last 7 vs previous 7 days).",
    response_model=TrainingLoadTrend,
)
def get_training_load(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_training_load_trend(athlete_code)


@router.get(
    "/athletes/{athlete_code}/injury-risk",
    summary="Injury risk assessment.",
    response_model=InjuryRisk,
)
def get_injury_risk(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_injury_risk(athlete_code)


@router.get(
    "/athletes/{athlete_code}/forecast",
    summary="14-day performance forecast.",
    response_model=PerformanceForecast,
)
def get_forecast(
    athlete_code: str,
    start: Optional[datetime.date] = Query(
        None, description="First forecast day (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_forecast(athlete_code, start)


@router.get(
    "/athletes/{athlete_code}/sleep",
    summary="Sleep analysis over a trailing window.",
    response_model=SleepAnalysis,
)
def get_sleep(
    athlete_code: str,
    period_days: int = Query(30, ge=1, le=365, description="Window length in days"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_sleep(athlete_code, period_days)


@router.get(
    "/athletes/{athlete_code}/body-composition",
    summary="Body composition analysis.",
    response_model=BodyCompositionAnalysis,
)
def get_body_composition(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_body_composition(athlete_code)


@router.get(
    "/athletes/{athlete_code}/pathology",
    summary="Hormonal balance and key blood markers.",
    response_model=PathologyAnalysis,
)
def get_pathology(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_pathology(athlete_code)


@router.get(
    "/athletes/{athlete_code}/genetics",
    summary="Genetic insights, pharmacogenomics, nutrigenomics and recovery panel.",
    response_model=GeneticsReport,
)
def get_genetics(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_genetics_report(athlete_code)


@router.get(
    "/athletes/{athlete_code}/dashboard",
    summary="Everything the athlete dashboard card needs.",
    response_model=AthleteSnapshot,
)
def get_athlete_dashboard(
    athlete_code: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_athlete_dashboard(athlete_code)


@router.get(
    "/team/overview",
    summary="Team averages and alert counts.",
    response_model=TeamOverview,
)
def get_team_overview(
    team: Optional[str] = Query(None, description="Team filter (defaults to all athletes)"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_team_overview(team)


@router.get(
    "/team/injury-risk",
    summary="Injury risk of every athlete, highest first.",
    response_model=list[InjuryRisk],
)
def get_team_injury_risk(
    team: Optional[str] = Query(None, description="Team filter (defaults to all athletes)"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_team_injury_risk(team)


@router.get(
    "/team/forecast",
    summary="14-day team performance forecast.",
    response_model=PerformanceForecast,
)
def get_team_forecast(
    team: Optional[str] = Query(None, description="Team filter (defaults to all athletes)"),
    start: Optional[datetime.date] = Query(
        None, description="First forecast day (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return AnalyticsService(db).get_team_forecast(team, start)

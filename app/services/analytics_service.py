"""
Analytics service.

Loads athlete records and runs them through the ``app.sam`` engine.
The engine itself is pure; this layer owns database access and the
404s for unknown athletes or missing data.
"""

import datetime
import logging
from collections import defaultdict
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.biometric import BiometricRepository
from app.db.repositories.blood_results import BloodResultRepository
from app.db.repositories.body_composition import BodyCompositionRepository
from app.db.repositories.genetics import GeneticProfileRepository
from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.sam.alerts import calculate_readiness_score, generate_alert
from app.sam.body_composition import analyze_body_composition
from app.sam.dashboard import build_athlete_snapshot, build_metric_statuses, build_team_overview
from app.sam.genetics import (
    get_genetic_insights,
    get_nutrigenomics_recommendations,
    get_pharmacogenomics_insights,
    get_recovery_gene_panel,
)
from app.sam.pathology import analyze_pathology
from app.sam.predictive import calculate_injury_risk, forecast_athlete, forecast_team
from app.sam.recovery import (
    calculate_recovery_score,
    calculate_training_load_trend,
    get_recovery_timeline,
)
from app.sam.sleep import analyze_sleep
from app.sam.stress import compute_stress_summary
from app.sam.weather import analyze_genetic_weather_impacts, calculate_performance_impact
from app.schemas.alerts import Alert, MetricStatus, ReadinessResponse
from app.schemas.body_composition import BodyCompositionAnalysis
from app.schemas.dashboard import AthleteSnapshot, DashboardCounts, TeamOverview
from app.schemas.genetics import GeneticsReport
from app.schemas.pathology import PathologyAnalysis
from app.schemas.predictive import InjuryRisk, PerformanceForecast
from app.schemas.recovery import RecoveryScore, RecoveryTimelineResponse, TrainingLoadTrend
from app.schemas.sleep import SleepAnalysis
from app.schemas.stress import StressSummary
from app.schemas.weather import WeatherData, WeatherImpactReport
from app.services.athlete_service import AthleteService

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service exposing the analytics engine over stored data."""

    def __init__(self, session: Session):
        self.athletes = AthleteService(session)
        self.athlete_repo = AthleteRepository(session)
        self.biometrics = BiometricRepository(session)
        self.genetics = GeneticProfileRepository(session)
        self.body_composition = BodyCompositionRepository(session)
        self.blood_results = BloodResultRepository(session)

    # ------------------------------------------------------------------
    # Athlete analytics
    # ------------------------------------------------------------------

    def get_alert(self, athlete_code: str) -> Alert:
        _, records = self._load(athlete_code)
        return generate_alert(records)

    def get_readiness(self, athlete_code: str) -> ReadinessResponse:
        athlete, records = self._load(athlete_code)
        latest = records[-1] if records else None
        return ReadinessResponse(
            athlete_code=athlete_code,
            date=latest.date if latest else None,
            readiness_score=calculate_readiness_score(latest) if latest else 0.0,
            alert=generate_alert(records),
            metrics=self._metric_statuses(athlete, latest),
        )

    def get_metric_statuses(self, athlete_code: str) -> list[MetricStatus]:
        athlete, records = self._load(athlete_code)
        return self._metric_statuses(athlete, records[-1] if records else None)

    def get_stress(self, athlete_code: str, reference: Optional[datetime.date] = None) -> StressSummary:
        athlete, records = self._load(athlete_code)
        self._require_data(athlete_code, records)
        age = athlete.age_on(reference or records[-1].date)
        return compute_stress_summary(athlete_code, records, age)

    def get_recovery_timeline(self, athlete_code: str) -> RecoveryTimelineResponse:
        _, records = self._load(athlete_code)
        return RecoveryTimelineResponse(
            athlete_code=athlete_code,
            load_trend=calculate_training_load_trend(records),
            timeline=get_recovery_timeline(records),
        )

    def get_recovery_score(self, athlete_code: str) -> RecoveryScore:
        _, records = self._load(athlete_code)
        return calculate_recovery_score(athlete_code, records[-1] if records else None)

    def get_training_load_trend(self, athlete_code: str) -> TrainingLoadTrend:
        _, records = self._load(athlete_code)
        return calculate_training_load_trend(records)

    def get_injury_risk(self, athlete_code: str) -> InjuryRisk:
        athlete, records = self._load(athlete_code)
        return calculate_injury_risk(athlete.athlete_code, athlete.name, records)

    def get_forecast(self, athlete_code: str, start: Optional[datetime.date] = None) -> PerformanceForecast:
        _, records = self._load(athlete_code)
        return forecast_athlete(athlete_code, records, start or datetime.date.today())

    def get_sleep(self, athlete_code: str, period_days: int = 30) -> SleepAnalysis:
        _, records = self._load(athlete_code)
        return analyze_sleep(athlete_code, records, period_days)

    def get_body_composition(self, athlete_code: str) -> BodyCompositionAnalysis:
        athlete = self.athletes.get_or_404(athlete_code)
        history = self.body_composition.get_by_athlete(athlete.id)
        if not history:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No body composition data for {athlete_code}",
            )
        return analyze_body_composition(athlete_code, history, self.genetics.get_by_athlete(athlete.id))

    def get_pathology(self, athlete_code: str) -> PathologyAnalysis:
        athlete = self.athletes.get_or_404(athlete_code)
        return analyze_pathology(athlete_code, self.blood_results.get_latest_by_athlete(athlete.id))

    def get_genetics_report(self, athlete_code: str) -> GeneticsReport:
        athlete = self.athletes.get_or_404(athlete_code)
        profiles = self.genetics.get_by_athlete(athlete.id)
        return GeneticsReport(
            athlete_code=athlete_code,
            insights=get_genetic_insights(profiles),
            pharmacogenomics=get_pharmacogenomics_insights(profiles),
            nutrigenomics=get_nutrigenomics_recommendations(profiles),
            recovery_panel=get_recovery_gene_panel(profiles),
        )

    def get_athlete_dashboard(self, athlete_code: str) -> AthleteSnapshot:
        athlete, records = self._load(athlete_code)
        roster, all_records = self._team_context(athlete)
        return build_athlete_snapshot(
            athlete, records, self.genetics.get_by_athlete(athlete.id), roster, all_records,
        )

    def get_weather_impact(
        self, athlete_code: str, weather: Optional[WeatherData],
    ) -> WeatherImpactReport:
        """Performance impact of ``weather`` given the athlete's genotypes."""
        athlete = self.athletes.get_or_404(athlete_code)
        current = weather.current if weather else None
        impacts = analyze_genetic_weather_impacts(current, self.genetics.get_by_athlete(athlete.id))
        return WeatherImpactReport(
            athlete_code=athlete_code,
            weather=weather,
            genetic_impacts=impacts,
            performance=calculate_performance_impact(current, impacts),
        )

    # ------------------------------------------------------------------
    # Team analytics
    # ------------------------------------------------------------------

    def get_team_overview(self, team: Optional[str] = None) -> TeamOverview:
        athletes, by_athlete = self._load_roster(team)
        logger.debug("Team overview for %s: %d athletes", team or "all teams", len(athletes))
        return build_team_overview(athletes, by_athlete, team)

    def get_team_injury_risk(self, team: Optional[str] = None) -> list[InjuryRisk]:
        """Injury risk of every athlete, highest score first."""
        athletes, by_athlete = self._load_roster(team)
        risks = [
            calculate_injury_risk(a.athlete_code, a.name, by_athlete.get(a.id, []))
            for a in athletes
        ]
        return sorted(risks, key=lambda r: r.injury_risk_score, reverse=True)

    def get_team_forecast(
        self, team: Optional[str] = None, start: Optional[datetime.date] = None,
    ) -> PerformanceForecast:
        athletes, by_athlete = self._load_roster(team)
        return forecast_team(athletes, by_athlete, start or datetime.date.today())

    def get_counts(self) -> DashboardCounts:
        return DashboardCounts(
            athletes=self.athlete_repo.count(),
            biometric_records=self.biometrics.count(),
            genetic_profiles=self.genetics.count(),
            body_compositions=self.body_composition.count(),
            blood_results=self.blood_results.count(),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, athlete_code: str) -> tuple[Athlete, list[BiometricData]]:
        athlete = self.athletes.get_or_404(athlete_code)
        return athlete, self.biometrics.get_by_athlete(athlete.id)

    def _load_roster(
        self, team: Optional[str],
    ) -> tuple[list[Athlete], dict[int, list[BiometricData]]]:
        athletes = self.athlete_repo.get_all(team=team, limit=10_000)
        by_athlete: dict[int, list[BiometricData]] = defaultdict(list)
        for record in self.biometrics.get_by_athletes([a.id for a in athletes]):
            by_athlete[record.athlete_id].append(record)
        return athletes, dict(by_athlete)

    def _team_context(self, athlete: Athlete) -> tuple[list[Athlete], list[BiometricData]]:
        """Roster and records needed for team averages."""
        roster = self.athlete_repo.get_by_team(athlete.team) if athlete.team else [athlete]
        return roster, self.biometrics.get_by_athletes([a.id for a in roster])

    def _metric_statuses(
        self, athlete: Athlete, latest: Optional[BiometricData],
    ) -> list[MetricStatus]:
        if latest is None:
            return []
        roster, all_records = self._team_context(athlete)
        return build_metric_statuses(latest, athlete.id, all_records, roster)

    @staticmethod
    def _require_data(athlete_code: str, records: list[BiometricData]) -> None:
        if not records:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No biometric data for {athlete_code}",
            )

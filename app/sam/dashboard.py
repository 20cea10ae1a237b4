"""
Dashboard aggregation: athlete snapshot and team overview.

Works on records already loaded by the caller; nothing here touches the
database.
"""

from __future__ import annotations

from typing import Optional, Sequence

from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.models.genetics import GeneticProfile
from app.sam.alerts import (
    STATUS_METRICS,
    calculate_readiness_score,
    generate_alert,
    get_metric_status,
    get_team_average,
)
from app.sam.genetics import get_genetic_insights
from app.sam.recovery import calculate_training_load_trend
from app.schemas.alerts import MetricStatus
from app.schemas.biometric import BiometricDataResponse
from app.schemas.dashboard import (
    AlertCounts,
    AthleteSnapshot,
    TeamAthleteSummary,
    TeamOverview,
)

_HIGH_ALERTS = frozenset({"inflammation", "airway"})
_MEDIUM_ALERTS = frozenset({"circadian", "nutrition"})


def build_metric_statuses(
    latest: Optional[BiometricData],
    athlete_id: int,
    all_biometrics: Sequence[BiometricData],
    athletes: Sequence[Athlete],
) -> list[MetricStatus]:
    """Traffic-light status of each tracked metric, with its team mean."""
    if latest is None:
        return []
    return [
        MetricStatus(
            metric=metric,
            value=getattr(latest, metric),
            status=get_metric_status(getattr(latest, metric), metric),
            team_average=get_team_average(metric, athlete_id, all_biometrics, athletes),
        )
        for metric in STATUS_METRICS
    ]


def build_athlete_snapshot(
    athlete: Athlete,
    biometrics: Sequence[BiometricData],
    genetics: Sequence[GeneticProfile],
    athletes: Sequence[Athlete],
    all_biometrics: Sequence[BiometricData],
) -> AthleteSnapshot:
    """
    Args:
        athlete: The athlete shown.
        biometrics: The athlete's own records, ascending by date.
        genetics: The athlete's profile rows.
        athletes: Roster used to resolve the athlete's team.
        all_biometrics: Records of every athlete on the roster.
    """
    latest = biometrics[-1] if biometrics else None
    return AthleteSnapshot(
        athlete_code=athlete.athlete_code,
        name=athlete.name,
        team=athlete.team,
        latest=(
            BiometricDataResponse.model_validate(latest).model_copy(
                update={"athlete_code": athlete.athlete_code}
            )
            if latest is not None else None
        ),
        alert=generate_alert(biometrics),
        readiness_score=calculate_readiness_score(latest) if latest is not None else 0.0,
        metrics=build_metric_statuses(latest, athlete.id, all_biometrics, athletes),
        genetic_insights=get_genetic_insights(genetics),
        training_load_trend=calculate_training_load_trend(biometrics),
    )


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def build_team_overview(
    athletes: Sequence[Athlete],
    biometrics_by_athlete: dict[int, list[BiometricData]],
    team: Optional[str] = None,
) -> TeamOverview:
    """Latest-night summary of ``athletes``; averages skip athletes without data."""
    summaries: list[TeamAthleteSummary] = []
    counts = AlertCounts()

    for athlete in athletes:
        records = biometrics_by_athlete.get(athlete.id, [])
        latest = records[-1] if records else None
        alert = generate_alert(records)

        if alert.type in _HIGH_ALERTS:
            counts.high += 1
        elif alert.type in _MEDIUM_ALERTS:
            counts.medium += 1
        elif alert.type == "green":
            counts.optimal += 1

        summaries.append(TeamAthleteSummary(
            athlete_code=athlete.athlete_code,
            name=athlete.name,
            team=athlete.team,
            date=latest.date if latest is not None else None,
            hrv_night=latest.hrv_night if latest is not None else None,
            sleep_duration_h=latest.sleep_duration_h if latest is not None else None,
            readiness_score=calculate_readiness_score(latest) if latest is not None else 0.0,
            alert=alert,
        ))

    with_data = [s for s in summaries if s.date is not None]
    return TeamOverview(
        team=team,
        total_athletes=len(athletes),
        avg_hrv=round(_mean([s.hrv_night for s in with_data]), 1),
        avg_sleep_h=round(_mean([s.sleep_duration_h for s in with_data]), 2),
        avg_readiness=round(_mean([s.readiness_score for s in with_data]), 1),
        alert_counts=counts,
        athletes=summaries,
    )

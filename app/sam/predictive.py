"""
Predictive analytics: injury risk and a 14-day performance forecast.

Both are heuristics, not trained models.

Injury risk adds fixed points per warning sign and caps at 100:

    +30  last-7-night HRV mean < 85% of the previous 7 nights
    +20  latest resting HR > 70 bpm
    +15  latest sleep < 6 h
    +25  latest training load > 85%
    +20  last three nights all loaded > 80%

The forecast starts from the mean "simplified readiness" of the last
seven nights (HRV/RHR/sleep buckets only) and decays it by 2 points per
day, floored at 30.  Confidence decays by 5 points per day, floored at 50.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.schemas.predictive import ForecastDay, InjuryRisk, PerformanceForecast

FORECAST_DAYS = 14
DEFAULT_TEAM_READINESS = 70.0

_RISK_WINDOW = 7
_HRV_DECLINE_RATIO = 0.85

# Descending (lower bound, suggested load) pairs.
_LOAD_BY_READINESS: list[tuple[float, int]] = [(80, 85), (60, 70), (40, 50)]
_MIN_LOAD = 30


# ======================================================================
# Injury risk
# ======================================================================


def _label_risk(score: int) -> str:
    if score > 70:
        return "high"
    if score > 40:
        return "medium"
    return "low"


def calculate_injury_risk(
    athlete_code: str, name: str, biometrics: Sequence[BiometricData],
) -> InjuryRisk:
    """Score injury risk from one athlete's records (ascending by date)."""
    score = 0
    factors: list[str] = []

    if len(biometrics) >= _RISK_WINDOW:
        recent = [d.hrv_night for d in biometrics[-_RISK_WINDOW:]]
        previous = [d.hrv_night for d in biometrics[-_RISK_WINDOW * 2:-_RISK_WINDOW]]
        if previous:
            avg_recent = sum(recent) / len(recent)
            avg_previous = sum(previous) / len(previous)
            if avg_recent < avg_previous * _HRV_DECLINE_RATIO:
                score += 30
                factors.append("Decreasing HRV trend")

    latest = biometrics[-1] if biometrics else None
    if latest is not None:
        if latest.resting_hr > 70:
            score += 20
            factors.append("Elevated resting heart rate")
        if latest.sleep_duration_h < 6:
            score += 15
            factors.append("Inadequate sleep")
        if latest.training_load_pct > 85:
            score += 25
            factors.append("High training load")

    if len(biometrics) >= 3 and all(d.training_load_pct > 80 for d in biometrics[-3:]):
        score += 20
        factors.append("Consecutive high load days")

    score = min(100, score)
    return InjuryRisk(
        athlete_code=athlete_code,
        name=name,
        injury_risk_score=score,
        risk_level=_label_risk(score),
        contributing_factors=factors,
    )


# ======================================================================
# Performance forecast
# ======================================================================


def simplified_readiness(record: BiometricData) -> float:
    """Readiness 0-100 from HRV, RHR and sleep buckets only."""
    hrv_score = 1.0 if record.hrv_night > 50 else 0.5 if record.hrv_night > 30 else 0.0
    rhr_score = 1.0 if record.resting_hr < 60 else 0.5 if record.resting_hr < 70 else 0.0
    sleep_score = 1.0 if record.sleep_duration_h > 7 else 0.5 if record.sleep_duration_h > 6 else 0.0
    return (hrv_score + rhr_score + sleep_score) / 3 * 100


def recent_readiness(biometrics: Sequence[BiometricData], window: int = 7) -> Optional[float]:
    """Mean simplified readiness over the last ``window`` nights."""
    if not biometrics:
        return None
    recent = biometrics[-window:]
    return sum(simplified_readiness(d) for d in recent) / len(recent)


def _optimal_load(predicted: float) -> int:
    for lower, load in _LOAD_BY_READINESS:
        if predicted > lower:
            return load
    return _MIN_LOAD


def forecast_performance(
    baseline: Optional[float],
    start: datetime.date,
    days: int = FORECAST_DAYS,
) -> list[ForecastDay]:
    """Project readiness forward from ``start``.

    A None ``baseline`` (no data) yields an all-zero forecast.
    """
    forecast: list[ForecastDay] = []
    for i in range(days):
        day = start + datetime.timedelta(days=i)
        if baseline is None:
            forecast.append(ForecastDay(
                date=day, predicted_readiness=0.0,
                optimal_training_load=0, confidence=0,
            ))
            continue
        predicted = max(30.0, baseline - i * 2)
        forecast.append(ForecastDay(
            date=day,
            predicted_readiness=round(predicted, 1),
            optimal_training_load=_optimal_load(predicted),
            confidence=max(50, 100 - i * 5),
        ))
    return forecast


def forecast_athlete(
    athlete_code: str,
    biometrics: Sequence[BiometricData],
    start: datetime.date,
    days: int = FORECAST_DAYS,
) -> PerformanceForecast:
    baseline = recent_readiness(biometrics)
    return PerformanceForecast(
        scope=athlete_code,
        baseline_readiness=round(baseline, 1) if baseline is not None else None,
        days=forecast_performance(baseline, start, days),
    )


def forecast_team(
    athletes: Sequence[Athlete],
    biometrics_by_athlete: dict[int, list[BiometricData]],
    start: datetime.date,
    days: int = FORECAST_DAYS,
) -> PerformanceForecast:
    """Forecast from the mean athlete baseline (70 when nobody has data)."""
    baselines = [
        b for b in (
            recent_readiness(biometrics_by_athlete.get(a.id, []))
            for a in athletes
        )
        if b is not None
    ]
    baseline = sum(baselines) / len(baselines) if baselines else DEFAULT_TEAM_READINESS
    return PerformanceForecast(
        scope="team",
        baseline_readiness=round(baseline, 1),
        days=forecast_performance(baseline, start, days),
    )

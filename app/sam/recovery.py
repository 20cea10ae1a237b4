"""
Recovery analytics: recovery timeline, training load trend and the
digital-twin recovery score.

Recovery score
--------------
Training load discounts the night's HRV before it is scored:

    effective_hrv = max(10, hrv × (1 - load / 150))
    score = round(effective_hrv / 80 × 40 + sleep_h / 9 × 30 + (1 - load / 100) × 30)

Missing inputs fall back to population defaults (HRV 60 ms, RHR 60 bpm,
load 80%, SpO2 97%, 37.0 °C, 7.5 h sleep) so a partially synced night
still produces a score.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from app.models.biometric import BiometricData
from app.sam.alerts import calculate_readiness_score
from app.schemas.recovery import (
    RecoveryScore,
    RecoveryTimelinePoint,
    TrainingLoadTrend,
)

_TREND_WINDOW = 7
_TREND_THRESHOLD = 5.0

_DEFAULTS: dict[str, float] = {
    "hrv_night": 60.0,
    "resting_hr": 60.0,
    "training_load_pct": 80.0,
    "spo2_night": 97.0,
    "temp_trend_c": 37.0,
    "sleep_duration_h": 7.5,
}

_RECOVERY_SCORE_TARGET = 60


def _mean_load(window: Sequence[BiometricData]) -> float:
    return sum(d.training_load_pct for d in window) / len(window)


def calculate_training_load_trend(biometrics: Sequence[BiometricData]) -> TrainingLoadTrend:
    """Compare this week's mean training load with last week's."""
    if len(biometrics) < _TREND_WINDOW:
        return TrainingLoadTrend(trend="insufficient_data", value=0.0)

    avg_load = _mean_load(biometrics[-_TREND_WINDOW:])

    if len(biometrics) >= _TREND_WINDOW * 2:
        prev_avg = _mean_load(biometrics[-_TREND_WINDOW * 2:-_TREND_WINDOW])
        change = avg_load - prev_avg
        if change > _TREND_THRESHOLD:
            return TrainingLoadTrend(trend="increasing", value=change)
        if change < -_TREND_THRESHOLD:
            return TrainingLoadTrend(trend="decreasing", value=change)
        return TrainingLoadTrend(trend="stable", value=change)

    return TrainingLoadTrend(trend="new", value=avg_load)


def get_recovery_events(record: BiometricData) -> list[str]:
    """Notable events for a single night."""
    events: list[str] = []
    if record.training_load_pct > 90:
        events.append("High Load Session")
    if record.hrv_night < 40:
        events.append("Low HRV")
    if record.sleep_duration_h < 6:
        events.append("Short Sleep")
    if record.resting_hr > 70:
        events.append("Elevated RHR")
    return events


def get_recovery_timeline(biometrics: Sequence[BiometricData]) -> list[RecoveryTimelinePoint]:
    return [
        RecoveryTimelinePoint(
            date=d.date,
            readiness_score=calculate_readiness_score(d),
            hrv=d.hrv_night,
            resting_hr=d.resting_hr,
            sleep_duration_h=d.sleep_duration_h,
            spo2=d.spo2_night,
            training_load=d.training_load_pct,
            events=get_recovery_events(d),
        )
        for d in biometrics
    ]


def _value_or_default(record: Optional[BiometricData], field: str) -> float:
    value = getattr(record, field, None) if record is not None else None
    return _DEFAULTS[field] if value is None else value


def _explain_recovery(
    score: int, load: float, sleep: float, effective_hrv: float, temp: float,
) -> str:
    if score >= _RECOVERY_SCORE_TARGET:
        return "Optimal recovery state"
    if load > 90:
        return "High training load – consider rest"
    if sleep < 7:
        return "Low sleep duration"
    if effective_hrv < 45:
        return "Low HRV – recovery impaired"
    if temp > 37.2:
        return "Elevated body temperature"
    return "Multiple stressors affecting recovery"


def calculate_recovery_score(
    athlete_code: str, record: Optional[BiometricData],
) -> RecoveryScore:
    """Score one night (``record`` may be None: defaults are used)."""
    hrv = _value_or_default(record, "hrv_night")
    rhr = _value_or_default(record, "resting_hr")
    load = _value_or_default(record, "training_load_pct")
    spo2 = _value_or_default(record, "spo2_night")
    temp = _value_or_default(record, "temp_trend_c")
    sleep = _value_or_default(record, "sleep_duration_h")

    effective_hrv = max(10.0, hrv * (1 - load / 150))
    score = math.floor(
        (effective_hrv / 80) * 40
        + (sleep / 9) * 30
        + (1 - load / 100) * 30 + 0.5
    )

    return RecoveryScore(
        athlete_code=athlete_code,
        date=record.date if record is not None else None,
        score=score,
        effective_hrv=round(effective_hrv, 1),
        hrv=hrv,
        resting_hr=rhr,
        sleep_duration_h=sleep,
        training_load=load,
        spo2=spo2,
        temperature_c=temp,
        explanation=_explain_recovery(score, load, sleep, effective_hrv, temp),
    )

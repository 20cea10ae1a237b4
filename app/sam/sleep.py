"""
Sleep analytics: debt, efficiency, consistency, chronotype and
sleep-time stress indicators.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional, Sequence

from app.models.biometric import BiometricData
from app.schemas.sleep import SleepAnalysis, SleepConsistency, SleepNight

RECOMMENDED_SLEEP_H = 8.0
FALL_ASLEEP_ALLOWANCE_H = 0.5
UNKNOWN_CHRONOTYPE = "Unknown"

_CONSISTENCY_BANDS: list[tuple[float, str]] = [(15, "High"), (45, "Moderate")]


def _to_minutes(t: datetime.time) -> int:
    return t.hour * 60 + t.minute


def _population_std(values: Sequence[float]) -> float:
    mean = sum(values) / len(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def calculate_sleep_debt(duration_h: float, recommended_h: float = RECOMMENDED_SLEEP_H) -> float:
    return duration_h - recommended_h


def time_in_bed_hours(record: BiometricData) -> float:
    """Hours between onset and wake (wrapping midnight).

    Without timing data, estimated as sleep duration plus 30 minutes.
    """
    if record.sleep_onset_time is None or record.wake_time is None:
        return record.sleep_duration_h + FALL_ASLEEP_ALLOWANCE_H
    minutes = _to_minutes(record.wake_time) - _to_minutes(record.sleep_onset_time)
    if minutes < 0:
        minutes += 24 * 60
    return minutes / 60


def calculate_sleep_efficiency(duration_h: float, time_in_bed_h: float) -> float:
    return duration_h / time_in_bed_h * 100 if time_in_bed_h > 0 else 0.0


def determine_chronotype(onset: Optional[datetime.time], wake: Optional[datetime.time]) -> str:
    if onset is None or wake is None:
        return UNKNOWN_CHRONOTYPE
    hour = onset.hour
    if hour >= 23 or hour <= 5:
        return "Evening Type"
    if 21 <= hour <= 22:
        return "Intermediate"
    return "Morning Type"


def get_sleep_stress_indicators(record: BiometricData) -> list[str]:
    indicators: list[str] = []
    if record.sleep_duration_h < 6:
        indicators.append("Fragmented Sleep")
    if record.hrv_night < 40:
        indicators.append("HRV Suppression")
    if record.resting_hr > 70:
        indicators.append("Elevated Resting HR")
    if record.deep_sleep_pct < 15:
        indicators.append("Low Deep Sleep")
    if record.rem_sleep_pct < 15:
        indicators.append("Low REM Sleep")
    return indicators


def calculate_sleep_consistency(biometrics: Sequence[BiometricData]) -> SleepConsistency:
    """Variability of bed and wake times over nights with timing data."""
    timed = [
        d for d in biometrics
        if d.sleep_onset_time is not None and d.wake_time is not None
    ]
    if len(timed) < 2:
        return SleepConsistency(std_dev_minutes=0.0, level="Insufficient Data")

    onset_std = _population_std([_to_minutes(d.sleep_onset_time) for d in timed])
    wake_std = _population_std([_to_minutes(d.wake_time) for d in timed])
    std_dev = (onset_std + wake_std) / 2

    level = "Low"
    for limit, label in _CONSISTENCY_BANDS:
        if std_dev <= limit:
            level = label
            break
    return SleepConsistency(std_dev_minutes=round(std_dev, 1), level=level)


def analyze_night(record: BiometricData) -> SleepNight:
    in_bed = time_in_bed_hours(record)
    return SleepNight(
        date=record.date,
        sleep_duration_h=record.sleep_duration_h,
        recommended_sleep_h=RECOMMENDED_SLEEP_H,
        sleep_debt_h=round(calculate_sleep_debt(record.sleep_duration_h), 2),
        time_in_bed_h=round(in_bed, 2),
        sleep_efficiency_pct=round(calculate_sleep_efficiency(record.sleep_duration_h, in_bed), 1),
        deep_sleep_pct=record.deep_sleep_pct,
        rem_sleep_pct=record.rem_sleep_pct,
        light_sleep_pct=record.light_sleep_pct,
        sleep_onset_time=record.sleep_onset_time,
        wake_time=record.wake_time,
        chronotype=determine_chronotype(record.sleep_onset_time, record.wake_time),
        stress_indicators=get_sleep_stress_indicators(record),
    )


def analyze_sleep(
    athlete_code: str,
    biometrics: Sequence[BiometricData],
    period_days: int = 30,
) -> SleepAnalysis:
    """Sleep analysis over the last ``period_days`` nights of data."""
    window = list(biometrics[-period_days:]) if period_days > 0 else []
    nights = [analyze_night(d) for d in window]

    if not nights:
        return SleepAnalysis(
            athlete_code=athlete_code,
            period_days=period_days,
            consistency=calculate_sleep_consistency(window),
        )

    count = len(nights)
    return SleepAnalysis(
        athlete_code=athlete_code,
        period_days=period_days,
        nights=nights,
        consistency=calculate_sleep_consistency(window),
        avg_deep_sleep_pct=round(sum(n.deep_sleep_pct for n in nights) / count, 1),
        avg_rem_sleep_pct=round(sum(n.rem_sleep_pct for n in nights) / count, 1),
        avg_light_sleep_pct=round(sum(n.light_sleep_pct for n in nights) / count, 1),
        avg_sleep_debt_h=round(sum(n.sleep_debt_h for n in nights) / count, 2),
        current_chronotype=nights[-1].chronotype,
    )

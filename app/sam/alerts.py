"""
Recovery alerts: headline alert, readiness score and metric statuses.

The alert engine looks at the latest night of biometric data (and the
night before it, when available) and returns the first matching pattern:

    inflammation  HRV↓ + RHR↑ + temperature↑ + SpO2↓
    circadian     HRV↓ + deep sleep↓ + late sleep onset
    nutrition     HRV↓ + REM↓ with stable temperature
    airway        SpO2↓ + respiratory rate↑
    green         none of the above

"HRV↓" and "RHR↑" are night-over-night changes (>15% drop, >5% rise).
With a single night available they fall back to absolute limits
(HRV < 40 ms, RHR > 70 bpm).

"Late sleep onset" means 23:30 or later.  The dashboard this engine
replaces compared the onset hour against 23.5, so its circadian alert
could never fire; the minute-level comparison here is intentional.

Records are expected in ascending date order; the latest is the last.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional, Sequence

from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.schemas.alerts import Alert

# ======================================================================
# Configuration
# ======================================================================

_HRV_DROP_RATIO = 0.15
_RHR_RISE_RATIO = 0.05
_HRV_FLOOR = 40.0
_RHR_CEILING = 70.0

_TEMP_HIGH_C = 37.0
_SPO2_LOW_PCT = 94.0
_DEEP_LOW_PCT = 17.0
_REM_LOW_PCT = 16.0
_RESP_HIGH = 17.0
_SLEEP_LATE = datetime.time(23, 30)

# Inclusive (low, high) bands, checked in order green → yellow → red.
_METRIC_THRESHOLDS: dict[str, list[tuple[str, float, float]]] = {
    "hrv_night": [("green", 45, 100), ("yellow", 35, 44), ("red", 0, 34)],
    "resting_hr": [("green", 45, 65), ("yellow", 66, 75), ("red", 76, 120)],
    "spo2_night": [("green", 96, 100), ("yellow", 94, 95), ("red", 0, 93)],
    "deep_sleep_pct": [("green", 18, 30), ("yellow", 15, 17), ("red", 0, 14)],
    "rem_sleep_pct": [("green", 18, 30), ("yellow", 15, 17), ("red", 0, 14)],
    "sleep_duration_h": [("green", 7.5, 10), ("yellow", 6.5, 7.4), ("red", 0, 6.4)],
    "temp_trend_c": [("green", 36.0, 36.8), ("yellow", 36.9, 36.9), ("red", 37.0, 40.0)],
}

STATUS_METRICS: tuple[str, ...] = tuple(_METRIC_THRESHOLDS)


def _fmt(value: float) -> str:
    return f"{value:g}"


# ======================================================================
# Alert rules
# ======================================================================


def _trend_flags(biometrics: Sequence[BiometricData]) -> tuple[bool, bool]:
    """Return ``(hrv_drop, rhr_rise)`` for the latest record."""
    latest = biometrics[-1]
    if len(biometrics) >= 2:
        prev = biometrics[-2]
        hrv_drop = (
            prev.hrv_night > 0
            and (prev.hrv_night - latest.hrv_night) / prev.hrv_night > _HRV_DROP_RATIO
        )
        rhr_rise = (
            prev.resting_hr > 0
            and (latest.resting_hr - prev.resting_hr) / prev.resting_hr > _RHR_RISE_RATIO
        )
        return hrv_drop, rhr_rise
    return latest.hrv_night < _HRV_FLOOR, latest.resting_hr > _RHR_CEILING


def _is_sleep_late(onset: Optional[datetime.time]) -> bool:
    return onset is not None and onset >= _SLEEP_LATE


def generate_alert(biometrics: Sequence[BiometricData]) -> Alert:
    """Classify the latest night of data into a single alert.

    Args:
        biometrics: One athlete's records in ascending date order.

    Returns:
        :class:`Alert`; ``no_data`` when ``biometrics`` is empty.
    """
    if not biometrics:
        return Alert(
            type="no_data",
            title="📊 No Data",
            cause="No recent biometric data available",
            rec="Please ensure data collection is active.",
        )

    latest = biometrics[-1]
    hrv_drop, rhr_rise = _trend_flags(biometrics)

    temp_high = latest.temp_trend_c >= _TEMP_HIGH_C
    spo2_low = latest.spo2_night <= _SPO2_LOW_PCT
    deep_low = latest.deep_sleep_pct < _DEEP_LOW_PCT
    rem_low = latest.rem_sleep_pct < _REM_LOW_PCT
    resp_high = latest.resp_rate_night >= _RESP_HIGH
    sleep_late = _is_sleep_late(latest.sleep_onset_time)

    if hrv_drop and rhr_rise and temp_high and spo2_low:
        return Alert(
            type="inflammation",
            title="⚠️ Inflammation/Illness Risk",
            cause=(
                f"HRV↓({_fmt(latest.hrv_night)}) + RHR↑({_fmt(latest.resting_hr)}) + "
                f"Temp↑({_fmt(latest.temp_trend_c)}) + SpO₂↓({_fmt(latest.spo2_night)})"
            ),
            rec="Prioritize rest, hydration, anti-inflammatory nutrition. Monitor temperature closely.",
        )
    if hrv_drop and deep_low and sleep_late:
        return Alert(
            type="circadian",
            title="🌙 Circadian Misalignment",
            cause=f"HRV↓ + Deep Sleep↓({_fmt(latest.deep_sleep_pct)}%) + Late Sleep",
            rec="Advance bedtime by 45min, increase morning light exposure, avoid screens after 9PM.",
        )
    if hrv_drop and rem_low and not temp_high:
        return Alert(
            type="nutrition",
            title="🥗 Possible Nutrient Gap",
            cause=f"HRV↓ + REM↓({_fmt(latest.rem_sleep_pct)}%) with stable temperature",
            rec="Check iron, magnesium, omega-3, B12 status. Increase nutrient-dense foods.",
        )
    if spo2_low and resp_high:
        return Alert(
            type="airway",
            title="🌬️ Airway/Respiratory Stress",
            cause=f"SpO₂={_fmt(latest.spo2_night)}% + Resp Rate={_fmt(latest.resp_rate_night)}/min",
            rec="Evaluate sleep environment, nasal breathing. Consider air quality assessment.",
        )
    return Alert(
        type="green",
        title="🟢 Optimal Recovery State",
        cause="All metrics within target ranges",
        rec="Maintain current training and recovery protocols.",
    )


# ======================================================================
# Status and scores
# ======================================================================


def get_metric_status(value: float, metric: str) -> str:
    """Map a metric value to green / yellow / red (``unknown`` if unmapped)."""
    bands = _METRIC_THRESHOLDS.get(metric)
    if bands is None:
        return "unknown"
    for label, low, high in bands:
        if low <= value <= high:
            return label
    return "unknown"


def _bucket(value: float, full: float, half: float, higher_is_better: bool = True) -> float:
    if higher_is_better:
        return 1.0 if value > full else 0.5 if value > half else 0.0
    return 1.0 if value < full else 0.5 if value < half else 0.0


def calculate_readiness_score(record: BiometricData) -> float:
    """Readiness 0-100: mean of HRV, RHR, sleep and SpO2 bucket scores."""
    hrv_score = _bucket(record.hrv_night, 45, 35)
    rhr_score = _bucket(record.resting_hr, 65, 75, higher_is_better=False)
    sleep_score = _bucket(record.sleep_duration_h, 7.5, 6.5)
    spo2_score = _bucket(record.spo2_night, 96, 94)
    return (hrv_score + rhr_score + sleep_score + spo2_score) / 4 * 100


def get_team_average(
    metric: str,
    athlete_id: int,
    all_biometrics: Sequence[BiometricData],
    athletes: Sequence[Athlete],
) -> float:
    """Mean of ``metric`` across every record of the athlete's team.

    Missing and zero values are ignored.  Returns 0 when the athlete has
    no team or the team has no values.
    """
    team = next((a.team for a in athletes if a.id == athlete_id), None)
    if not team:
        return 0.0

    member_ids = {a.id for a in athletes if a.team == team}
    values = [
        getattr(r, metric) for r in all_biometrics
        if r.athlete_id in member_ids and getattr(r, metric, None)
    ]
    if not values:
        return 0.0
    return math.floor(sum(values) / len(values) * 10 + 0.5) / 10

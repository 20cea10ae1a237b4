"""
Stress analytics: autonomic status, strain index and stress load.

Resting heart rate and HRV are classified against fixed bands; HRV bands
are relative to an age-adjusted baseline (60 ms under 25, 55 ms under
35, 50 ms otherwise).

The strain index blends normalised resting HR (40-100 bpm range, 60%)
with inverted normalised HRV (0-150% of baseline, 40%) into 0-100.

Daily stress load compares an acute window (the last ``days`` nights)
with the chronic window before it:

    stress(window) = mean_rhr / 70 × 50 + (1 - mean_hrv / 60) × 50
    balance        = chronic - acute        (positive = improving)
"""

from __future__ import annotations

from typing import Sequence

from app.models.biometric import BiometricData
from app.schemas.stress import DailyStressLoad, StatusAssessment, StressSummary

_RESTING_HR_BANDS: list[tuple[float, str, str]] = [
    (55, "Optimal", "Excellent cardiovascular fitness"),
    (65, "Good", "Healthy resting heart rate"),
    (75, "Elevated", "Slightly elevated, monitor trends"),
]
_RESTING_HR_HIGH = ("High", "Significantly elevated, potential stress/fatigue")

_STRESS_BANDS: list[tuple[float, str, str]] = [
    (30, "Low", "Low stress levels, good recovery"),
    (60, "Moderate", "Moderate stress, monitor recovery"),
]
_STRESS_HIGH = ("High", "High stress levels, prioritize recovery")

RECOMMENDED_SLEEP_H = 8.0


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def get_resting_hr_status(resting_hr: float) -> StatusAssessment:
    for limit, status, message in _RESTING_HR_BANDS:
        if resting_hr < limit:
            return StatusAssessment(status=status, message=message)
    return StatusAssessment(status=_RESTING_HR_HIGH[0], message=_RESTING_HR_HIGH[1])


def hrv_baseline(age: int) -> float:
    """Age-adjusted reference HRV (ms)."""
    if age < 25:
        return 60.0
    if age < 35:
        return 55.0
    return 50.0


def get_hrv_status(hrv: float, age: int) -> StatusAssessment:
    baseline = hrv_baseline(age)
    if hrv > baseline + 10:
        return StatusAssessment(status="Excellent", message="Strong parasympathetic activity")
    if hrv > baseline:
        return StatusAssessment(status="Good", message="Healthy HRV levels")
    if hrv > baseline - 10:
        return StatusAssessment(status="Moderate", message="Moderately reduced HRV, monitor trends")
    return StatusAssessment(status="Low", message="Reduced HRV, potential stress/fatigue")


def calculate_strain_index(resting_hr: float, hrv: float, age: int) -> float:
    """Strain 0-100: high resting HR and low HRV push it up."""
    normalized_hr = _clamp((resting_hr - 40) / 60)
    normalized_hrv = _clamp(hrv / (hrv_baseline(age) * 1.5))
    return (normalized_hr * 0.6 + (1 - normalized_hrv) * 0.4) * 100


def get_stress_level(strain_index: float) -> StatusAssessment:
    for limit, level, message in _STRESS_BANDS:
        if strain_index < limit:
            return StatusAssessment(status=level, message=message)
    return StatusAssessment(status=_STRESS_HIGH[0], message=_STRESS_HIGH[1])


def _window_stress(window: Sequence[BiometricData]) -> float:
    mean_hr = _mean([d.resting_hr for d in window])
    mean_hrv = _mean([d.hrv_night for d in window])
    return (mean_hr / 70) * 50 + (1 - mean_hrv / 60) * 50


def calculate_daily_stress_load(
    biometrics: Sequence[BiometricData], days: int = 7,
) -> DailyStressLoad:
    """Acute vs chronic stress; zeros until two full windows exist."""
    if days <= 0 or len(biometrics) < days * 2:
        return DailyStressLoad()

    acute = _window_stress(biometrics[-days:])
    chronic = _window_stress(biometrics[-days * 2:-days])
    return DailyStressLoad(
        acute_stress=acute,
        chronic_stress=chronic,
        stress_balance=chronic - acute,
    )


def calculate_recovery_readiness(
    biometrics: Sequence[BiometricData],
    sleep_debt: float,
    hrv_trend: float,
    resting_hr: float,
    training_load: float,
) -> float:
    """Composite 0-100 of sleep debt, HRV trend, resting HR and load.

    Returns the neutral value 50 with fewer than three nights of data.
    """
    if len(biometrics) < 3:
        return 50.0

    sleep_score = max(0.0, 100 - abs(sleep_debt) * 10)
    hrv_score = _clamp(50 + hrv_trend * 2, 0.0, 100.0)
    hr_score = max(0.0, 100 - (resting_hr - 50) * 2)
    if training_load > 85:
        load_score = 100 - (training_load - 85) * 2
    elif training_load < 40:
        load_score = 100 - (40 - training_load) * 1.5
    else:
        load_score = 100.0

    return sleep_score * 0.25 + hrv_score * 0.25 + hr_score * 0.25 + load_score * 0.25


def get_hrv_trend(biometrics: Sequence[BiometricData], days: int = 7) -> float:
    """Mean HRV of the last ``days`` nights minus the ``days`` before."""
    if days <= 0 or len(biometrics) < days:
        return 0.0

    recent = biometrics[-days:]
    previous = biometrics[-days * 2:-days]
    if not recent or not previous:
        return 0.0
    return _mean([d.hrv_night for d in recent]) - _mean([d.hrv_night for d in previous])


def compute_stress_summary(
    athlete_code: str,
    biometrics: Sequence[BiometricData],
    age: int,
    days: int = 7,
) -> StressSummary:
    """Assemble the stress picture for the latest night.

    ``biometrics`` must not be empty.
    """
    latest = biometrics[-1]
    strain = calculate_strain_index(latest.resting_hr, latest.hrv_night, age)
    hrv_trend = get_hrv_trend(biometrics, days)
    sleep_debt = latest.sleep_duration_h - RECOMMENDED_SLEEP_H

    return StressSummary(
        athlete_code=athlete_code,
        date=latest.date,
        age=age,
        resting_hr=latest.resting_hr,
        resting_hr_status=get_resting_hr_status(latest.resting_hr),
        hrv=latest.hrv_night,
        hrv_baseline=hrv_baseline(age),
        hrv_status=get_hrv_status(latest.hrv_night, age),
        strain_index=round(strain, 1),
        stress_level=get_stress_level(strain),
        daily_load=calculate_daily_stress_load(biometrics, days),
        hrv_trend=round(hrv_trend, 2),
        sleep_debt_h=round(sleep_debt, 2),
        recovery_readiness=round(
            _clamp(
                calculate_recovery_readiness(
                    biometrics, sleep_debt, hrv_trend,
                    latest.resting_hr, latest.training_load_pct,
                ),
                0.0, 100.0,
            ),
            1,
        ),
    )

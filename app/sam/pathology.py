"""
Pathology analytics: hormonal balance and key blood markers.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from app.models.blood_results import BloodResult
from app.schemas.pathology import HormonalBalance, KeyMetric, PathologyAnalysis

_CATABOLIC_RATIO = 0.05
_ANABOLIC_RATIO = 0.01


class _Marker(NamedTuple):
    name: str
    field: str
    unit: str
    reference: str
    description: str
    critical: float
    warning: float
    # True when high values are the concern (e.g. CK), False for low ones.
    high_is_bad: bool


_KEY_MARKERS: list[_Marker] = [
    _Marker("Cortisol", "cortisol_nmol_l", "nmol/L", "150-550", "Stress hormone", 550, 150, True),
    _Marker("Testosterone", "testosterone", "nmol/L", "10-35", "Anabolic hormone", 10, 15, False),
    _Marker("Hemoglobin", "hemoglobin", "g/dL", "13-17", "Oxygen transport", 13, 14, False),
    _Marker("Creatine Kinase", "ck", "U/L", "30-200", "Muscle damage marker", 200, 150, True),
    _Marker("ALT", "s_alanine_transaminase", "U/L", "7-40", "Liver function", 40, 30, True),
    _Marker("CRP", "c_reactive_protein", "mg/L", "<3", "Inflammation marker", 3, 1, True),
]


def analyze_hormones(result: BloodResult) -> HormonalBalance:
    """Classify the cortisol/testosterone ratio (missing values count as 0)."""
    cortisol = result.cortisol_nmol_l or 0.0
    testosterone = result.testosterone or 0.0
    ratio = cortisol / testosterone if testosterone > 0 else 0.0

    if ratio > _CATABOLIC_RATIO:
        status = "catabolic"
        message = (
            "High cortisol relative to testosterone indicates potential "
            "overtraining or chronic stress."
        )
        recommendations = [
            "Consider reducing training intensity",
            "Prioritize recovery and sleep",
            "Monitor stress levels",
        ]
    elif ratio < _ANABOLIC_RATIO:
        status = "anabolic"
        message = "Low cortisol-testosterone ratio suggests good recovery and adaptation."
        recommendations = [
            "Current training load is appropriate",
            "Continue monitoring for optimal performance",
        ]
    else:
        status = "optimal"
        message = "Hormonal balance is optimal for athletic performance."
        recommendations = ["Maintain current training and recovery protocols"]

    return HormonalBalance(
        cortisol=cortisol,
        testosterone=testosterone,
        ratio=ratio,
        status=status,
        message=message,
        recommendations=recommendations,
    )


def _marker_status(marker: _Marker, value: float) -> str:
    if marker.high_is_bad:
        if value > marker.critical:
            return "critical"
        if value > marker.warning:
            return "warning"
        return "optimal"
    if value < marker.critical:
        return "critical"
    if value < marker.warning:
        return "warning"
    return "optimal"


def get_key_metrics(result: BloodResult) -> list[KeyMetric]:
    """One entry per key analyte present in the panel."""
    metrics: list[KeyMetric] = []
    for marker in _KEY_MARKERS:
        value = getattr(result, marker.field)
        if value is None:
            continue
        metrics.append(KeyMetric(
            name=marker.name,
            value=value,
            unit=marker.unit,
            status=_marker_status(marker, value),
            reference=marker.reference,
            description=marker.description,
        ))
    return metrics


def analyze_pathology(athlete_code: str, latest: Optional[BloodResult]) -> PathologyAnalysis:
    if latest is None:
        return PathologyAnalysis(athlete_code=athlete_code)
    return PathologyAnalysis(
        athlete_code=athlete_code,
        date=latest.date,
        hormonal_balance=analyze_hormones(latest),
        key_metrics=get_key_metrics(latest),
    )

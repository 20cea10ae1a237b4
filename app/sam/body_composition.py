"""
Body composition analytics: BMI and body fat bands, body score,
segmental symmetry and genotype-driven nutrition tips.

Body score starts at 100 and is adjusted by how far the athlete is from
the scale's control targets:

    -10           weight control > +0.5 kg (needs to lose weight)
    -5            weight control < -0.5 kg (needs to gain weight)
    -8 per kg     fat to lose
    -5 per kg     muscle to gain
    +10 / -15     visceral fat grade <= 1 / >= 4
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from app.models.body_composition import BodyComposition
from app.models.genetics import GeneticProfile
from app.sam.genetics import genotype_map
from app.schemas.body_composition import (
    BodyCompositionAnalysis,
    NutritionTip,
    StatusLabel,
    SymmetryAssessment,
)

_BMI_BANDS: list[tuple[float, str]] = [
    (16, "Severely Underweight"),
    (18.5, "Underweight"),
    (25, "Healthy"),
    (30, "Overweight"),
]

# Male reference ranges.
_BODY_FAT_BANDS: list[tuple[float, str]] = [
    (6, "Very Low"),
    (14, "Low"),
    (18, "Normal"),
    (25, "High"),
]


def get_bmi_status(bmi: float) -> str:
    for limit, label in _BMI_BANDS:
        if bmi < limit:
            return label
    return "Obese"


def get_body_fat_status(body_fat_pct: float) -> str:
    for limit, label in _BODY_FAT_BANDS:
        if body_fat_pct < limit:
            return label
    return "Very High"


def calculate_body_score(record: BodyComposition) -> int:
    score = 100.0

    if record.weight_control_kg > 0.5:
        score -= 10
    if record.weight_control_kg < -0.5:
        score -= 5

    if record.fat_control_kg > 0:
        score -= abs(record.fat_control_kg) * 8
    if record.muscle_control_kg < 0:
        score -= abs(record.muscle_control_kg) * 5

    if record.visceral_fat_grade <= 1:
        score += 10
    if record.visceral_fat_grade >= 4:
        score -= 15

    return max(0, math.floor(score + 0.5))


def assess_symmetry(record: BodyComposition) -> Optional[SymmetryAssessment]:
    """Left/right imbalance; None when segmental data is missing."""
    segments = (
        record.arm_mass_left_kg, record.arm_mass_right_kg,
        record.leg_mass_left_kg, record.leg_mass_right_kg,
    )
    if any(v is None for v in segments):
        return None

    arm_diff = abs(record.arm_mass_left_kg - record.arm_mass_right_kg)
    leg_diff = abs(record.leg_mass_left_kg - record.leg_mass_right_kg)
    leg_mean = (record.leg_mass_left_kg + record.leg_mass_right_kg) / 2
    leg_pct = leg_diff / leg_mean * 100 if leg_mean > 0 else 0.0

    if leg_diff > 0.4 or arm_diff > 0.3:
        risk = "significant"
        recommendation = (
            "Significant muscle imbalance detected. Consider unilateral training "
            "and mobility work to reduce injury risk."
        )
    elif leg_diff > 0.2 or arm_diff > 0.2:
        risk = "minor"
        recommendation = "Minor asymmetry. Monitor over time and include balanced strength work."
    else:
        risk = "excellent"
        recommendation = "Excellent symmetry. Keep up balanced training."

    return SymmetryAssessment(
        arm_difference_kg=round(arm_diff, 2),
        leg_difference_kg=round(leg_diff, 2),
        leg_imbalance_pct=round(leg_pct, 1),
        risk=risk,
        recommendation=recommendation,
    )


def get_nutrition_tips(genetics: Sequence[GeneticProfile]) -> list[NutritionTip]:
    genes = genotype_map(genetics)
    tips: list[NutritionTip] = []

    actn3 = genes.get("ACTN3")
    if actn3 is not None:
        if actn3 == "RR":
            tip = "High-protein + creatine may boost power gains."
        elif actn3 == "XX":
            tip = "Prioritize complex carbs and antioxidants for endurance recovery."
        else:
            tip = "Hybrid profile, balance macronutrients."
        tips.append(NutritionTip(gene="ACTN3", trait="Power vs Endurance", tip=tip))

    if genes.get("ADRB2") == "Gly16Gly":
        tips.append(NutritionTip(
            gene="ADRB2",
            trait="Fat Metabolism",
            tip="Reduced fat mobilization, optimize carb timing around training.",
        ))

    if "Ser" in genes.get("PPARGC1A", ""):
        tips.append(NutritionTip(
            gene="PPARGC1A",
            trait="Mitochondrial Health",
            tip="Polyphenol-rich foods (green tea, berries) may support endurance adaptation.",
        ))

    return tips


def analyze_body_composition(
    athlete_code: str,
    history: Sequence[BodyComposition],
    genetics: Sequence[GeneticProfile],
) -> BodyCompositionAnalysis:
    """Analyse the latest scan. ``history`` is ascending by date, non-empty."""
    latest = history[-1]
    weight_change = None
    if len(history) > 1:
        weight_change = round(latest.weight_kg - history[0].weight_kg, 2)

    return BodyCompositionAnalysis(
        athlete_code=athlete_code,
        date=latest.date,
        bmi=StatusLabel(value=latest.bmi, status=get_bmi_status(latest.bmi)),
        body_fat=StatusLabel(value=latest.body_fat_rate, status=get_body_fat_status(latest.body_fat_rate)),
        body_score=calculate_body_score(latest),
        symmetry=assess_symmetry(latest),
        nutrition_tips=get_nutrition_tips(genetics),
        weight_change_kg=weight_change,
    )

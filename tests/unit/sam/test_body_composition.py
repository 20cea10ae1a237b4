"""
Unit tests for body composition analytics.
"""

import datetime

import pytest

from app.models.body_composition import BodyComposition
from app.models.genetics import GeneticProfile
from app.sam.body_composition import (
    analyze_body_composition,
    assess_symmetry,
    calculate_body_score,
    get_bmi_status,
    get_body_fat_status,
    get_nutrition_tips,
)


def _make_scan(day: int = 0, **overrides) -> BodyComposition:
    values = {
        "athlete_id": 1,
        "date": datetime.date(2025, 9, 1) + datetime.timedelta(days=day),
        "weight_kg": 90.0,
        "body_fat_rate": 14.0,
        "bmi": 26.0,
        "weight_control_kg": 0.0,
        "fat_control_kg": 0.0,
        "muscle_control_kg": 0.0,
        "visceral_fat_grade": 2.0,
        "arm_mass_left_kg": 5.0,
        "arm_mass_right_kg": 5.0,
        "leg_mass_left_kg": 15.0,
        "leg_mass_right_kg": 15.0,
    }
    values.update(overrides)
    return BodyComposition(**values)


def _make_genetics(**genotypes: str) -> list[GeneticProfile]:
    return [GeneticProfile(athlete_id=1, gene=g, genotype=v) for g, v in genotypes.items()]


class TestStatusBands:

    @pytest.mark.parametrize("bmi, expected", [
        (15.9, "Severely Underweight"), (18.4, "Underweight"), (22.0, "Healthy"),
        (25.0, "Overweight"), (30.0, "Obese"),
    ])
    def test_bmi(self, bmi, expected):
        assert get_bmi_status(bmi) == expected

    @pytest.mark.parametrize("body_fat, expected", [
        (5.0, "Very Low"), (10.0, "Low"), (16.0, "Normal"), (20.0, "High"), (25.0, "Very High"),
    ])
    def test_body_fat(self, body_fat, expected):
        assert get_body_fat_status(body_fat) == expected


class TestBodyScore:

    @pytest.mark.parametrize("overrides, expected", [
        ({}, 100),
        ({"weight_control_kg": 1.0}, 90),
        ({"weight_control_kg": -1.0}, 95),
        ({"weight_control_kg": 0.5}, 100),
        ({"fat_control_kg": 1.5}, 88),
        ({"fat_control_kg": -1.5}, 100),
        ({"muscle_control_kg": -2.0}, 90),
        ({"visceral_fat_grade": 1.0}, 110),
        ({"visceral_fat_grade": 4.0}, 85),
        ({"weight_control_kg": 1.0, "fat_control_kg": 2.0,
          "muscle_control_kg": -1.0, "visceral_fat_grade": 5.0}, 54),
        ({"fat_control_kg": 20.0}, 0),
    ])
    def test_adjustments(self, overrides, expected):
        assert calculate_body_score(_make_scan(**overrides)) == expected


class TestSymmetry:

    def test_excellent(self):
        symmetry = assess_symmetry(_make_scan())
        assert symmetry.risk == "excellent"
        assert symmetry.leg_imbalance_pct == 0.0

    def test_minor(self):
        assert assess_symmetry(_make_scan(leg_mass_right_kg=15.3)).risk == "minor"

    def test_significant_legs(self):
        symmetry = assess_symmetry(_make_scan(leg_mass_right_kg=15.5))
        assert symmetry.risk == "significant"
        assert symmetry.leg_difference_kg == 0.5
        assert symmetry.leg_imbalance_pct == 3.3

    def test_significant_arms(self):
        assert assess_symmetry(_make_scan(arm_mass_right_kg=5.35)).risk == "significant"

    def test_missing_segments(self):
        assert assess_symmetry(_make_scan(leg_mass_left_kg=None)) is None


class TestNutritionTips:

    def test_all_tips(self):
        tips = get_nutrition_tips(_make_genetics(ACTN3="RR", ADRB2="Gly16Gly", PPARGC1A="Gly482Ser"))
        assert [t.gene for t in tips] == ["ACTN3", "ADRB2", "PPARGC1A"]
        assert tips[0].tip == "High-protein + creatine may boost power gains."

    @pytest.mark.parametrize("genotype, fragment", [
        ("XX", "complex carbs"),
        ("RX", "Hybrid profile"),
    ])
    def test_actn3_variants(self, genotype, fragment):
        tips = get_nutrition_tips(_make_genetics(ACTN3=genotype))
        assert fragment in tips[0].tip

    def test_no_genetics(self):
        assert get_nutrition_tips([]) == []

    def test_non_matching_genotypes(self):
        assert get_nutrition_tips(_make_genetics(ADRB2="Arg16Arg", PPARGC1A="Gly482Gly")) == []


class TestAnalyze:

    def test_latest_scan_and_weight_change(self):
        history = [_make_scan(0, weight_kg=90.0), _make_scan(30, weight_kg=88.5, bmi=24.0)]
        analysis = analyze_body_composition("ATH001", history, _make_genetics(ACTN3="XX"))
        assert analysis.date == history[-1].date
        assert analysis.bmi.status == "Healthy"
        assert analysis.body_fat.status == "Normal"
        assert analysis.weight_change_kg == -1.5
        assert analysis.body_score == 100
        assert len(analysis.nutrition_tips) == 1

    def test_single_scan_has_no_weight_change(self):
        analysis = analyze_body_composition("ATH001", [_make_scan()], [])
        assert analysis.weight_change_kg is None

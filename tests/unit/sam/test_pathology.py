"""
Unit tests for pathology analytics.
"""

import datetime

import pytest

from app.models.blood_results import BloodResult
from app.sam.pathology import analyze_hormones, analyze_pathology, get_key_metrics


def _make_panel(**values) -> BloodResult:
    return BloodResult(athlete_id=1, date=datetime.date(2025, 9, 5), **values)


class TestHormones:

    @pytest.mark.parametrize("cortisol, testosterone, expected", [
        (600.0, 10.0, "catabolic"),
        (0.05, 1.0, "optimal"),
        (0.03, 1.0, "optimal"),
        (0.009, 1.0, "anabolic"),
    ])
    def test_ratio_status(self, cortisol, testosterone, expected):
        balance = analyze_hormones(_make_panel(cortisol_nmol_l=cortisol, testosterone=testosterone))
        assert balance.status == expected

    def test_catabolic_recommendations(self):
        balance = analyze_hormones(_make_panel(cortisol_nmol_l=400.0, testosterone=20.0))
        assert balance.ratio == 20.0
        assert balance.recommendations[0] == "Consider reducing training intensity"

    def test_missing_values_count_as_zero(self):
        balance = analyze_hormones(_make_panel())
        assert (balance.cortisol, balance.testosterone, balance.ratio) == (0.0, 0.0, 0.0)
        assert balance.status == "anabolic"


class TestKeyMetrics:

    @pytest.mark.parametrize("field, value, expected", [
        ("cortisol_nmol_l", 600.0, "critical"),
        ("cortisol_nmol_l", 300.0, "warning"),
        ("cortisol_nmol_l", 150.0, "optimal"),
        ("testosterone", 8.0, "critical"),
        ("testosterone", 12.0, "warning"),
        ("testosterone", 20.0, "optimal"),
        ("hemoglobin", 13.5, "warning"),
        ("ck", 250.0, "critical"),
        ("ck", 180.0, "warning"),
        ("s_alanine_transaminase", 25.0, "optimal"),
        ("c_reactive_protein", 2.0, "warning"),
        ("c_reactive_protein", 0.5, "optimal"),
    ])
    def test_marker_status(self, field, value, expected):
        metrics = get_key_metrics(_make_panel(**{field: value}))
        assert len(metrics) == 1
        assert metrics[0].status == expected

    def test_panel_order_and_skips_missing(self):
        metrics = get_key_metrics(_make_panel(c_reactive_protein=1.0, cortisol_nmol_l=200.0, ck=100.0))
        assert [m.name for m in metrics] == ["Cortisol", "Creatine Kinase", "CRP"]
        assert metrics[1].unit == "U/L"
        assert metrics[1].reference == "30-200"


class TestAnalyzePathology:

    def test_no_panel(self):
        analysis = analyze_pathology("ATH001", None)
        assert analysis.date is None
        assert analysis.hormonal_balance is None
        assert analysis.key_metrics == []

    def test_panel(self):
        panel = _make_panel(cortisol_nmol_l=300.0, testosterone=20.0, hemoglobin=15.0)
        analysis = analyze_pathology("ATH001", panel)
        assert analysis.date == panel.date
        assert analysis.hormonal_balance.status == "catabolic"
        assert len(analysis.key_metrics) == 3

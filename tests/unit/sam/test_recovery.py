"""
Unit tests for recovery analytics: training load trend, recovery
timeline events and the recovery score.
"""

import datetime

import pytest

from app.models.biometric import BiometricData
from app.sam.recovery import (
    calculate_recovery_score,
    calculate_training_load_trend,
    get_recovery_events,
    get_recovery_timeline,
)


def _make_record(day: int = 0, **overrides) -> BiometricData:
    values = {
        "athlete_id": 1,
        "date": datetime.date(2025, 7, 10) + datetime.timedelta(days=day),
        "hrv_night": 60.0,
        "resting_hr": 55.0,
        "spo2_night": 97.0,
        "resp_rate_night": 14.0,
        "deep_sleep_pct": 20.0,
        "rem_sleep_pct": 20.0,
        "light_sleep_pct": 60.0,
        "sleep_duration_h": 8.0,
        "temp_trend_c": 36.5,
        "training_load_pct": 80.0,
    }
    values.update(overrides)
    return BiometricData(**values)


def _make_loads(*loads: float) -> list[BiometricData]:
    return [_make_record(i, training_load_pct=load) for i, load in enumerate(loads)]


# ======================================================================
# calculate_training_load_trend
# ======================================================================


class TestTrainingLoadTrend:

    def test_insufficient_data(self):
        trend = calculate_training_load_trend(_make_loads(*[80] * 6))
        assert (trend.trend, trend.value) == ("insufficient_data", 0.0)

    def test_new_with_one_week(self):
        trend = calculate_training_load_trend(_make_loads(*[70] * 3 + [80] * 7))
        assert trend.trend == "new"
        assert trend.value == 80.0

    @pytest.mark.parametrize("previous, recent, expected, change", [
        (70, 80, "increasing", 10.0),
        (80, 70, "decreasing", -10.0),
        (80, 83, "stable", 3.0),
        (80, 85, "stable", 5.0),
    ])
    def test_week_over_week(self, previous, recent, expected, change):
        trend = calculate_training_load_trend(_make_loads(*[previous] * 7 + [recent] * 7))
        assert trend.trend == expected
        assert trend.value == pytest.approx(change)


# ======================================================================
# Recovery timeline
# ======================================================================


class TestRecoveryTimeline:

    def test_events(self):
        record = _make_record(training_load_pct=95.0, hrv_night=35.0,
                              sleep_duration_h=5.5, resting_hr=75.0)
        assert get_recovery_events(record) == [
            "High Load Session", "Low HRV", "Short Sleep", "Elevated RHR",
        ]

    def test_no_events_on_a_normal_night(self):
        assert get_recovery_events(_make_record()) == []

    def test_one_point_per_record(self):
        records = [_make_record(0), _make_record(1, training_load_pct=95.0)]
        timeline = get_recovery_timeline(records)
        assert [p.date for p in timeline] == [r.date for r in records]
        assert timeline[0].readiness_score == 100.0
        assert timeline[1].events == ["High Load Session"]

    def test_empty(self):
        assert get_recovery_timeline([]) == []


# ======================================================================
# calculate_recovery_score
# ======================================================================


class TestRecoveryScore:

    def test_defaults_without_record(self):
        # effective HRV 60 × (1 - 80/150) = 28 → 14 + 25 + 6 = 45
        score = calculate_recovery_score("ATH001", None)
        assert score.date is None
        assert score.score == 45
        assert score.effective_hrv == 28.0
        assert score.explanation == "Low HRV – recovery impaired"

    def test_optimal(self):
        record = _make_record(hrv_night=100.0, training_load_pct=30.0, sleep_duration_h=9.0)
        score = calculate_recovery_score("ATH001", record)
        assert score.score == 91
        assert score.effective_hrv == 80.0
        assert score.date == record.date
        assert score.explanation == "Optimal recovery state"

    def test_effective_hrv_floor(self):
        record = _make_record(hrv_night=10.0, training_load_pct=100.0, sleep_duration_h=7.5)
        score = calculate_recovery_score("ATH001", record)
        assert score.effective_hrv == 10.0
        assert score.score == 30
        assert score.explanation == "High training load – consider rest"

    @pytest.mark.parametrize("overrides, explanation", [
        ({"sleep_duration_h": 6.0, "hrv_night": 90.0, "training_load_pct": 60.0}, "Low sleep duration"),
        ({"sleep_duration_h": 8.0, "hrv_night": 80.0, "training_load_pct": 80.0}, "Low HRV – recovery impaired"),
        ({"sleep_duration_h": 7.0, "hrv_night": 115.0, "training_load_pct": 90.0, "temp_trend_c": 37.5},
         "Elevated body temperature"),
        ({"sleep_duration_h": 7.0, "hrv_night": 115.0, "training_load_pct": 90.0, "temp_trend_c": 37.0},
         "Multiple stressors affecting recovery"),
    ])
    def test_explanations(self, overrides, explanation):
        score = calculate_recovery_score("ATH001", _make_record(**overrides))
        assert score.score < 60
        assert score.explanation == explanation

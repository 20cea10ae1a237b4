"""
Unit tests for sleep analytics.
"""

import datetime

import pytest

from app.models.biometric import BiometricData
from app.sam.sleep import (
    analyze_night,
    analyze_sleep,
    calculate_sleep_consistency,
    calculate_sleep_efficiency,
    determine_chronotype,
    get_sleep_stress_indicators,
    time_in_bed_hours,
)


def _make_record(day: int = 0, onset=datetime.time(22, 30), wake=datetime.time(6, 30),
                 **overrides) -> BiometricData:
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
        "sleep_duration_h": 7.2,
        "temp_trend_c": 36.5,
        "training_load_pct": 70.0,
        "sleep_onset_time": onset,
        "wake_time": wake,
    }
    values.update(overrides)
    return BiometricData(**values)


class TestTimeInBed:

    def test_wraps_midnight(self):
        assert time_in_bed_hours(_make_record()) == 8.0

    def test_same_day(self):
        record = _make_record(onset=datetime.time(1, 0), wake=datetime.time(7, 30))
        assert time_in_bed_hours(record) == 6.5

    def test_estimated_without_timing(self):
        assert time_in_bed_hours(_make_record(onset=None)) == pytest.approx(7.7)

    def test_efficiency(self):
        assert calculate_sleep_efficiency(7.2, 8.0) == pytest.approx(90.0)
        assert calculate_sleep_efficiency(7.2, 0.0) == 0.0


class TestChronotype:

    @pytest.mark.parametrize("onset, expected", [
        (datetime.time(23, 15), "Evening Type"),
        (datetime.time(0, 30), "Evening Type"),
        (datetime.time(5, 59), "Evening Type"),
        (datetime.time(21, 0), "Intermediate"),
        (datetime.time(22, 59), "Intermediate"),
        (datetime.time(20, 45), "Morning Type"),
        (datetime.time(6, 0), "Morning Type"),
    ])
    def test_by_onset_hour(self, onset, expected):
        assert determine_chronotype(onset, datetime.time(7, 0)) == expected

    def test_unknown_without_times(self):
        assert determine_chronotype(None, datetime.time(7, 0)) == "Unknown"
        assert determine_chronotype(datetime.time(22, 0), None) == "Unknown"


class TestStressIndicators:

    def test_all(self):
        record = _make_record(sleep_duration_h=5.5, hrv_night=35.0, resting_hr=72.0,
                              deep_sleep_pct=12.0, rem_sleep_pct=14.0)
        assert get_sleep_stress_indicators(record) == [
            "Fragmented Sleep", "HRV Suppression", "Elevated Resting HR",
            "Low Deep Sleep", "Low REM Sleep",
        ]

    def test_none(self):
        assert get_sleep_stress_indicators(_make_record()) == []


class TestConsistency:

    def test_insufficient(self):
        records = [_make_record(0), _make_record(1, onset=None)]
        consistency = calculate_sleep_consistency(records)
        assert consistency.level == "Insufficient Data"
        assert consistency.std_dev_minutes == 0.0

    def test_identical_nights_are_high(self):
        consistency = calculate_sleep_consistency([_make_record(i) for i in range(3)])
        assert consistency.level == "High"
        assert consistency.std_dev_minutes == 0.0

    @pytest.mark.parametrize("spread_minutes, expected", [(30, "High"), (60, "Moderate"), (120, "Low")])
    def test_levels(self, spread_minutes, expected):
        # two nights: population std of two values is half their spread
        late = datetime.time(21 + spread_minutes // 60, spread_minutes % 60)
        wake = datetime.time(5 + spread_minutes // 60, spread_minutes % 60)
        records = [
            _make_record(0, onset=datetime.time(21, 0), wake=datetime.time(5, 0)),
            _make_record(1, onset=late, wake=wake),
        ]
        consistency = calculate_sleep_consistency(records)
        assert consistency.std_dev_minutes == spread_minutes / 2
        assert consistency.level == expected


class TestAnalyzeSleep:

    def test_night(self):
        night = analyze_night(_make_record())
        assert night.sleep_debt_h == -0.8
        assert night.time_in_bed_h == 8.0
        assert night.sleep_efficiency_pct == 90.0
        assert night.chronotype == "Intermediate"

    def test_window_and_averages(self):
        records = [_make_record(0, deep_sleep_pct=10.0)] + [
            _make_record(i, deep_sleep_pct=20.0 + i) for i in range(1, 4)
        ]
        analysis = analyze_sleep("ATH001", records, period_days=3)
        assert analysis.period_days == 3
        assert [n.date for n in analysis.nights] == [r.date for r in records[1:]]
        assert analysis.avg_deep_sleep_pct == 22.0
        assert analysis.avg_sleep_debt_h == -0.8
        assert analysis.current_chronotype == "Intermediate"

    def test_empty(self):
        analysis = analyze_sleep("ATH001", [])
        assert analysis.nights == []
        assert analysis.consistency.level == "Insufficient Data"
        assert analysis.current_chronotype == "Unknown"

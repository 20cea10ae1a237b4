"""
Unit tests for the recovery alert engine.

Covers alert pattern matching (trend and absolute fallbacks), metric
status bands, the readiness score and team averages.
"""

import datetime

import pytest

from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.sam.alerts import (
    calculate_readiness_score,
    generate_alert,
    get_metric_status,
    get_team_average,
)


# ======================================================================
# Helpers
# ======================================================================


def _make_record(day: int = 0, athlete_id: int = 1, **overrides) -> BiometricData:
    """Build a record whose defaults produce a green alert."""
    values = {
        "athlete_id": athlete_id,
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
        "sleep_onset_time": datetime.time(22, 30),
        "wake_time": datetime.time(6, 30),
    }
    values.update(overrides)
    return BiometricData(**values)


def _make_pair(**latest) -> list[BiometricData]:
    """Baseline night followed by a night with ``latest`` overrides."""
    return [_make_record(0), _make_record(1, **latest)]


# ======================================================================
# generate_alert
# ======================================================================


class TestGenerateAlert:
    """Test alert classification."""

    def test_no_data(self):
        alert = generate_alert([])
        assert alert.type == "no_data"
        assert alert.title == "📊 No Data"

    def test_green_when_nothing_matches(self):
        alert = generate_alert(_make_pair())
        assert alert.type == "green"
        assert alert.cause == "All metrics within target ranges"

    def test_inflammation_from_trend(self):
        records = _make_pair(hrv_night=50.0, resting_hr=58.0, temp_trend_c=37.0, spo2_night=94.0)
        alert = generate_alert(records)
        assert alert.type == "inflammation"
        assert alert.cause == "HRV↓(50) + RHR↑(58) + Temp↑(37) + SpO₂↓(94)"

    def test_inflammation_from_absolute_limits_single_night(self):
        records = [_make_record(hrv_night=35.0, resting_hr=75.0, temp_trend_c=37.2, spo2_night=93.0)]
        assert generate_alert(records).type == "inflammation"

    def test_small_hrv_drop_is_not_a_drop(self):
        # 10% drop stays under the 15% threshold
        records = _make_pair(hrv_night=54.0, resting_hr=60.0, temp_trend_c=37.2, spo2_night=93.0)
        assert generate_alert(records).type != "inflammation"

    def test_circadian(self):
        records = _make_pair(hrv_night=45.0, deep_sleep_pct=15.0,
                             sleep_onset_time=datetime.time(23, 45))
        alert = generate_alert(records)
        assert alert.type == "circadian"
        assert "Deep Sleep↓(15%)" in alert.cause

    @pytest.mark.parametrize("onset, expected", [
        (datetime.time(23, 30), "circadian"),
        (datetime.time(23, 29), "green"),
        (None, "green"),
    ])
    def test_late_sleep_boundary(self, onset, expected):
        records = _make_pair(hrv_night=45.0, deep_sleep_pct=15.0, sleep_onset_time=onset)
        assert generate_alert(records).type == expected

    def test_nutrition_requires_stable_temperature(self):
        stable = _make_pair(hrv_night=45.0, rem_sleep_pct=14.0, temp_trend_c=36.5)
        warm = _make_pair(hrv_night=45.0, rem_sleep_pct=14.0, temp_trend_c=37.1)
        assert generate_alert(stable).type == "nutrition"
        assert generate_alert(warm).type == "green"

    def test_airway(self):
        alert = generate_alert(_make_pair(spo2_night=93.0, resp_rate_night=18.0))
        assert alert.type == "airway"
        assert alert.cause == "SpO₂=93% + Resp Rate=18/min"

    def test_only_latest_two_nights_matter(self):
        records = [_make_record(0, hrv_night=30.0), _make_record(1), _make_record(2)]
        assert generate_alert(records).type == "green"


# ======================================================================
# get_metric_status
# ======================================================================


class TestMetricStatus:
    """Test traffic-light bands."""

    @pytest.mark.parametrize("value, metric, expected", [
        (50, "hrv_night", "green"),
        (40, "hrv_night", "yellow"),
        (30, "hrv_night", "red"),
        (44.5, "hrv_night", "unknown"),
        (101, "hrv_night", "unknown"),
        (70, "resting_hr", "yellow"),
        (80, "resting_hr", "red"),
        (95, "spo2_night", "yellow"),
        (7.0, "sleep_duration_h", "yellow"),
        (36.9, "temp_trend_c", "yellow"),
        (37.5, "temp_trend_c", "red"),
        (5, "training_load_pct", "unknown"),
    ])
    def test_bands(self, value, metric, expected):
        assert get_metric_status(value, metric) == expected


# ======================================================================
# calculate_readiness_score
# ======================================================================


class TestReadinessScore:
    """Test the four-bucket readiness score."""

    def test_all_optimal(self):
        assert calculate_readiness_score(_make_record()) == 100.0

    def test_all_middle(self):
        record = _make_record(hrv_night=40.0, resting_hr=70.0, sleep_duration_h=7.0, spo2_night=95.0)
        assert calculate_readiness_score(record) == 50.0

    def test_all_poor(self):
        record = _make_record(hrv_night=30.0, resting_hr=80.0, sleep_duration_h=6.0, spo2_night=93.0)
        assert calculate_readiness_score(record) == 0.0

    def test_thresholds_are_exclusive(self):
        record = _make_record(hrv_night=45.0, resting_hr=65.0, sleep_duration_h=7.5, spo2_night=96.0)
        assert calculate_readiness_score(record) == 50.0


# ======================================================================
# get_team_average
# ======================================================================


class TestTeamAverage:
    """Test team averages over all records of a team."""

    @pytest.fixture
    def athletes(self) -> list[Athlete]:
        return [
            Athlete(id=1, athlete_code="ATH001", name="A One", team="Sevens"),
            Athlete(id=2, athlete_code="ATH002", name="A Two", team="Sevens"),
            Athlete(id=3, athlete_code="ATH003", name="B One", team="Fifteens"),
            Athlete(id=4, athlete_code="ATH004", name="No Team"),
        ]

    def test_includes_athlete_and_ignores_zero_and_other_teams(self, athletes):
        records = [
            _make_record(0, athlete_id=1, hrv_night=50.0),
            _make_record(0, athlete_id=2, hrv_night=60.0),
            _make_record(1, athlete_id=2, hrv_night=0.0),
            _make_record(0, athlete_id=3, hrv_night=90.0),
        ]
        assert get_team_average("hrv_night", 1, records, athletes) == 55.0

    def test_rounds_to_one_decimal(self, athletes):
        records = [
            _make_record(0, athlete_id=1, hrv_night=50.0),
            _make_record(1, athlete_id=1, hrv_night=50.0),
            _make_record(0, athlete_id=2, hrv_night=51.0),
        ]
        assert get_team_average("hrv_night", 2, records, athletes) == 50.3

    def test_rounds_half_up(self, athletes):
        records = [
            _make_record(0, athlete_id=1, hrv_night=45.0),
            _make_record(0, athlete_id=2, hrv_night=45.5),
        ]
        assert get_team_average("hrv_night", 1, records, athletes) == 45.3

    @pytest.mark.parametrize("athlete_id", [4, 99])
    def test_zero_without_team(self, athletes, athlete_id):
        records = [_make_record(0, athlete_id=athlete_id)]
        assert get_team_average("hrv_night", athlete_id, records, athletes) == 0.0

    def test_zero_without_values(self, athletes):
        assert get_team_average("hrv_night", 1, [], athletes) == 0.0

"""
Unit tests for weather normalisation and performance impact.
"""

import datetime

import pytest

from app.models.genetics import GeneticProfile
from app.sam.weather import (
    NO_WEATHER_SCORE,
    analyze_genetic_weather_impacts,
    calculate_performance_impact,
    get_air_quality_category,
    get_weather_description,
    transform_airvisual_payload,
)
from app.schemas.weather import CurrentWeather

NOW = datetime.datetime(2025, 9, 18, 8, 0)


def _make_payload(**weather) -> dict:
    current_weather = {"ts": "2025-09-18T08:00:00.000Z", "tp": 24, "pr": 1015, "hu": 40,
                       "ws": 3.1, "wd": 270, "ic": "01d"}
    current_weather.update(weather)
    return {
        "status": "success",
        "data": {
            "city": "Pretoria",
            "state": "Gauteng",
            "country": "South Africa",
            "location": {"type": "Point", "coordinates": [28.19, -25.74]},
            "current": {
                "pollution": {"ts": "2025-09-18T08:00:00.000Z", "aqius": 42, "mainus": "p2"},
                "weather": current_weather,
            },
        },
    }


def _make_current(**overrides) -> CurrentWeather:
    values = {"temperature": 20.0, "humidity": 50.0, "wind_speed": 3.0,
              "air_quality_index": 40, "timestamp": NOW}
    values.update(overrides)
    return CurrentWeather(**values)


def _make_genetics(**genotypes: str) -> list[GeneticProfile]:
    return [GeneticProfile(athlete_id=1, gene=g, genotype=v) for g, v in genotypes.items()]


class TestLookups:

    @pytest.mark.parametrize("aqi, expected", [
        (None, "Unknown"), (0, "Unknown"), (42, "Good"), (50, "Good"), (51, "Moderate"),
        (150, "Unhealthy for Sensitive Groups"), (180, "Unhealthy"), (250, "Very Unhealthy"),
        (301, "Hazardous"),
    ])
    def test_air_quality_category(self, aqi, expected):
        assert get_air_quality_category(aqi) == expected

    @pytest.mark.parametrize("icon, expected", [
        ("01d", "Clear sky"), ("01n", "Clear sky"), ("10d", "Rain"), ("50n", "Mist"),
        ("07d", "Unknown"), ("01x", "Unknown"), ("01", "Unknown"), (None, "Unknown"),
    ])
    def test_weather_description(self, icon, expected):
        assert get_weather_description(icon) == expected


class TestTransformPayload:

    def test_normalises_fields(self):
        data = transform_airvisual_payload(_make_payload(), now=NOW)
        assert data.location.city == "Pretoria"
        assert data.location.coordinates.latitude == -25.74
        assert data.location.coordinates.longitude == 28.19
        assert data.current.temperature == 24
        assert data.current.feels_like == 24
        assert data.current.weather_description == "Clear sky"
        assert data.current.air_quality_index == 42
        assert data.current.air_quality_category == "Good"
        assert data.current.visibility == 10
        assert data.current.timestamp == NOW

    def test_zero_temperature_is_kept(self):
        data = transform_airvisual_payload(_make_payload(tp=0), now=NOW)
        assert data.current.temperature == 0

    def test_missing_pollution(self):
        payload = _make_payload()
        del payload["data"]["current"]["pollution"]
        data = transform_airvisual_payload(payload, now=NOW)
        assert data.current.air_quality_index is None
        assert data.current.air_quality_category == "Unknown"

    def test_malformed_payload_raises_key_error(self):
        with pytest.raises(KeyError):
            transform_airvisual_payload({"status": "fail"})


class TestGeneticWeatherImpacts:

    def test_no_weather(self):
        assert analyze_genetic_weather_impacts(None, _make_genetics(ACTN3="XX")) == []

    def test_hot_humid(self):
        profiles = _make_genetics(ACTN3="XX", ADRB2="Gly16Gly", CFTR="Fdel", ACE="DD")
        impacts = analyze_genetic_weather_impacts(_make_current(temperature=32.0, humidity=80.0), profiles)
        assert [(i.gene, i.severity) for i in impacts] == [
            ("ACTN3", "high"), ("ADRB2", "medium"), ("CFTR", "high"), ("ACE", "medium"),
        ]

    def test_rr_heat_tolerance(self):
        impacts = analyze_genetic_weather_impacts(_make_current(temperature=29.0), _make_genetics(ACTN3="RR"))
        assert impacts[0].severity == "low"

    def test_cold_adaptation(self):
        impacts = analyze_genetic_weather_impacts(
            _make_current(temperature=5.0), _make_genetics(PPARGC1A="Gly482Ser"),
        )
        assert impacts[0].impact == "Better cold adaptation"

    def test_mild_conditions(self):
        profiles = _make_genetics(ACTN3="XX", ADRB2="Gly16Gly", CFTR="Fdel", ACE="DD")
        assert analyze_genetic_weather_impacts(_make_current(), profiles) == []


class TestPerformanceImpact:

    def test_no_weather_is_neutral(self):
        impact = calculate_performance_impact(None)
        assert impact.score == NO_WEATHER_SCORE
        assert impact.category == "moderate"

    def test_optimal_temperature_capped_at_100(self):
        impact = calculate_performance_impact(_make_current())
        assert impact.score == 100
        assert impact.category == "optimal"
        assert impact.factors == ["Optimal temperature range for performance"]

    @pytest.mark.parametrize("overrides, expected_score, expected_category", [
        ({"temperature": 36.0}, 60, "moderate"),
        ({"temperature": 31.0}, 75, "good"),
        ({"temperature": 2.0}, 80, "optimal"),
        ({"temperature": 10.0, "humidity": 90.0}, 80, "optimal"),
        ({"temperature": 10.0, "humidity": 20.0}, 90, "optimal"),
        ({"temperature": 10.0, "wind_speed": 20.0}, 85, "optimal"),
        ({"temperature": 10.0, "air_quality_index": 160}, 70, "good"),
        ({"temperature": 10.0, "air_quality_index": 120}, 85, "optimal"),
        ({"temperature": 36.0, "humidity": 90.0, "wind_speed": 20.0, "air_quality_index": 200},
         0, "dangerous"),
        ({"temperature": None, "humidity": None, "wind_speed": None, "air_quality_index": None},
         100, "optimal"),
    ])
    def test_conditions(self, overrides, expected_score, expected_category):
        impact = calculate_performance_impact(_make_current(**overrides))
        assert impact.score == expected_score
        assert impact.category == expected_category

    def test_genetic_penalties(self):
        current = _make_current(temperature=32.0, humidity=80.0)
        impacts = analyze_genetic_weather_impacts(current, _make_genetics(ACTN3="XX", ADRB2="Gly16Gly"))
        # 100 - 25 (heat) - 15 (high) - 8 (medium)
        impact = calculate_performance_impact(current, impacts)
        assert impact.score == 52
        assert impact.category == "moderate"

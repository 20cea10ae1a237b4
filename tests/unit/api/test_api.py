"""
API tests.

Run the application against an in-memory SQLite database with the
authentication and weather dependencies overridden.
"""

import datetime

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import base  # noqa: F401
from app.api.dependencies import (
    get_current_user,
    get_optional_weather_service,
    get_weather_cache,
    get_weather_service,
)
from app.db.session import get_db
from app.main import app
from app.models.user import User
from app.schemas.weather import Coordinates, CurrentWeather, WeatherData, WeatherLocation
from app.services.weather_cache import WeatherCache
from app.services.weather_service import WeatherService, WeatherServiceError

API = "/api/v1"


class FakeWeatherService:
    def __init__(self, temperature: float = 20.0, error: WeatherServiceError = None):
        self.temperature = temperature
        self.error = error
        self.calls: list[tuple] = []

    def _data(self, city: str = "Pretoria") -> WeatherData:
        if self.error is not None:
            raise self.error
        return WeatherData(
            location=WeatherLocation(
                city=city, state="Gauteng", country="South Africa",
                coordinates=Coordinates(latitude=-25.74, longitude=28.19),
            ),
            current=CurrentWeather(
                temperature=self.temperature, humidity=50.0, wind_speed=3.0,
                air_quality_index=40, air_quality_category="Good",
                timestamp=datetime.datetime(2025, 9, 18, 8, 0),
            ),
        )

    def get_by_city(self, city, state, country):
        self.calls.append(("city", city, state, country))
        return self._data(city)

    def get_by_coordinates(self, lat, lon):
        self.calls.append(("coords", lat, lon))
        return self._data()

    def get_by_ip(self):
        self.calls.append(("ip",))
        return self._data()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def weather():
    return FakeWeatherService()


@pytest.fixture
def client(engine, weather):
    def override_get_db():
        with Session(engine) as session:
            yield session

    cache = WeatherCache(ttl_seconds=60, max_size=10)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = lambda: User(
        id=1, email="coach@example.com", hashed_password="x", role="Coach",
    )
    app.dependency_overrides[get_weather_service] = lambda: weather
    app.dependency_overrides[get_optional_weather_service] = lambda: weather
    app.dependency_overrides[get_weather_cache] = lambda: cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_athlete(client, code: str = "ATH001", team: str = "Sevens", **overrides) -> dict:
    payload = {"athlete_code": code, "name": f"Athlete {code}", "sport": "Rugby Sevens",
               "team": team, "date_of_birth": "2000-03-15"}
    payload.update(overrides)
    response = client.post(f"{API}/athletes", json=payload)
    assert response.status_code == 201
    return response.json()


def _make_night(**overrides) -> dict:
    values = {
        "hrv_night": 60, "resting_hr": 55, "spo2_night": 97, "resp_rate_night": 14,
        "deep_sleep_pct": 20, "rem_sleep_pct": 20, "light_sleep_pct": 60,
        "sleep_duration_h": 8, "sleep_onset_time": "22:30", "wake_time": "06:30",
        "temp_trend_c": 36.5, "training_load_pct": 80,
    }
    values.update(overrides)
    return values


def _put_night(client, code: str, date: str, **overrides):
    return client.put(f"{API}/athletes/{code}/biometric-data/{date}", json=_make_night(**overrides))


def _make_scan(date: str = "2025-09-01", **overrides) -> dict:
    values = {
        "date": date, "weight_kg": 90.0, "body_fat_rate": 14.0, "bmi": 24.0,
        "muscle_mass_kg": 42.0,
        "symmetry": {"arm_mass_left_kg": 6.0, "arm_mass_right_kg": 6.1,
                     "leg_mass_left_kg": 15.0, "leg_mass_right_kg": 15.2, "trunk_mass_kg": 14.0},
    }
    values.update(overrides)
    return values


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json()["service"] == "sam-api"

    def test_cors_preflight(self, client):
        response = client.options("/health", headers={
            "Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET",
        })
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestAthletes:

    def test_create_and_get(self, client):
        created = _make_athlete(client)
        assert created["athlete_code"] == "ATH001"
        response = client.get(f"{API}/athletes/ATH001")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_duplicate_code(self, client):
        _make_athlete(client)
        response = client.post(f"{API}/athletes", json={"athlete_code": "ATH001", "name": "Again"})
        assert response.status_code == 400

    def test_unknown_athlete(self, client):
        response = client.get(f"{API}/athletes/ATH999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Athlete ATH999 not found"

    def test_list_filters_by_team(self, client):
        _make_athlete(client, "ATH002", team="Fifteens")
        _make_athlete(client, "ATH001")
        codes = [a["athlete_code"] for a in client.get(f"{API}/athletes").json()]
        assert codes == ["ATH001", "ATH002"]
        sevens = client.get(f"{API}/athletes", params={"team": "Sevens"}).json()
        assert [a["athlete_code"] for a in sevens] == ["ATH001"]

    def test_update(self, client):
        _make_athlete(client)
        response = client.patch(f"{API}/athletes/ATH001", json={"team": "Fifteens"})
        assert response.status_code == 200
        assert response.json()["team"] == "Fifteens"
        assert response.json()["name"] == "Athlete ATH001"

    def test_delete_removes_records(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        client.put(f"{API}/athletes/ATH001/genetic-profile",
                   json={"entries": [{"gene": "ACTN3", "genotype": "RR"}]})

        assert client.delete(f"{API}/athletes/ATH001").status_code == 204
        assert client.get(f"{API}/athletes/ATH001").status_code == 404
        counts = client.get(f"{API}/dashboard").json()
        assert counts == {"athletes": 0, "biometric_records": 0, "genetic_profiles": 0,
                          "body_compositions": 0, "blood_results": 0}

    def test_all_data(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        client.post(f"{API}/athletes/ATH001/body-composition", json=_make_scan())
        body = client.get(f"{API}/athletes/ATH001/all-data").json()
        assert body["athlete"]["athlete_code"] == "ATH001"
        assert body["biometric_data"][0]["athlete_code"] == "ATH001"
        assert body["body_composition"][0]["symmetry"]["leg_mass_right_kg"] == 15.2
        assert body["genetic_profile"] == []


class TestBiometricData:

    def test_put_creates_then_updates(self, client):
        _make_athlete(client)
        first = _put_night(client, "ATH001", "2025-07-10")
        assert first.status_code == 201
        second = _put_night(client, "ATH001", "2025-07-10", hrv_night=42)
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["hrv_night"] == 42

    def test_get_by_date_and_delete(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        response = client.get(f"{API}/athletes/ATH001/biometric-data/2025-07-10")
        assert response.status_code == 200
        assert response.json()["sleep_onset_time"] == "22:30:00"

        assert client.delete(f"{API}/athletes/ATH001/biometric-data/2025-07-10").status_code == 204
        assert client.get(f"{API}/athletes/ATH001/biometric-data/2025-07-10").status_code == 404

    def test_range_filter(self, client):
        _make_athlete(client)
        for day in ("2025-07-10", "2025-07-11", "2025-07-12"):
            _put_night(client, "ATH001", day)
        response = client.get(f"{API}/athletes/ATH001/biometric-data",
                              params={"start": "2025-07-11", "end": "2025-07-12"})
        assert [r["date"] for r in response.json()] == ["2025-07-11", "2025-07-12"]

    def test_validation(self, client):
        _make_athlete(client)
        assert _put_night(client, "ATH001", "2025-07-10", spo2_night=120).status_code == 422

    def test_latest_per_athlete(self, client):
        _make_athlete(client, "ATH001")
        _make_athlete(client, "ATH002")
        _put_night(client, "ATH001", "2025-07-10")
        _put_night(client, "ATH001", "2025-07-11")
        _put_night(client, "ATH002", "2025-07-10")
        latest = client.get(f"{API}/biometric-data/latest").json()
        assert sorted((r["athlete_code"], r["date"]) for r in latest) == [
            ("ATH001", "2025-07-11"), ("ATH002", "2025-07-10"),
        ]


class TestGenetics:

    def test_upsert_keeps_unmentioned_genes(self, client):
        _make_athlete(client)
        url = f"{API}/athletes/ATH001/genetic-profile"
        client.put(url, json={"entries": [{"gene": "ACTN3", "genotype": "RR"},
                                          {"gene": "ACE", "genotype": "ID"}]})
        response = client.put(url, json={"entries": [{"gene": "ACTN3", "genotype": "XX"}]})
        assert response.status_code == 200
        genotypes = {e["gene"]: e["genotype"] for e in response.json()["entries"]}
        assert genotypes == {"ACTN3": "XX", "ACE": "ID"}

    def test_gene_catalog(self, client):
        response = client.post(f"{API}/genes", json={"name": "ACTN3", "category": "performance"})
        assert response.status_code == 201
        assert client.post(f"{API}/genes", json={"name": "ACTN3"}).status_code == 400
        genes = client.get(f"{API}/genes", params={"category": "performance"}).json()
        assert [g["name"] for g in genes] == ["ACTN3"]

    def test_report(self, client):
        _make_athlete(client)
        client.put(f"{API}/athletes/ATH001/genetic-profile",
                   json={"entries": [{"gene": "ACTN3", "genotype": "XX"}]})
        report = client.get(f"{API}/analytics/athletes/ATH001/genetics").json()
        assert report["insights"][0]["gene"] == "ACTN3 (XX genotype)"


class TestBodyComposition:

    def test_upsert_by_date(self, client):
        _make_athlete(client)
        url = f"{API}/athletes/ATH001/body-composition"
        assert client.post(url, json=_make_scan()).status_code == 201
        response = client.post(url, json=_make_scan(weight_kg=91.0))
        assert response.status_code == 200
        scans = client.get(url).json()
        assert len(scans) == 1
        assert scans[0]["weight_kg"] == 91.0
        assert scans[0]["symmetry"]["arm_mass_left_kg"] == 6.0

    def test_scan_without_symmetry(self, client):
        _make_athlete(client)
        response = client.post(f"{API}/athletes/ATH001/body-composition",
                               json=_make_scan(symmetry=None))
        assert response.json()["symmetry"] is None

    def test_analysis_requires_scan(self, client):
        _make_athlete(client)
        url = f"{API}/analytics/athletes/ATH001/body-composition"
        assert client.get(url).status_code == 404
        client.post(f"{API}/athletes/ATH001/body-composition", json=_make_scan())
        response = client.get(url)
        assert response.status_code == 200
        assert response.json()["athlete_code"] == "ATH001"


class TestAnalytics:

    def test_readiness(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        body = client.get(f"{API}/analytics/athletes/ATH001/readiness").json()
        assert body["date"] == "2025-07-10"
        assert body["readiness_score"] == 100.0
        assert body["alert"]["type"] == "green"
        assert body["metrics"][0] == {"metric": "hrv_night", "value": 60.0,
                                      "status": "green", "team_average": 60.0}

    def test_readiness_without_data(self, client):
        _make_athlete(client)
        body = client.get(f"{API}/analytics/athletes/ATH001/readiness").json()
        assert body["date"] is None
        assert body["alert"]["type"] == "no_data"

    def test_alert_airway(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10", spo2_night=93, resp_rate_night=18)
        assert client.get(f"{API}/analytics/athletes/ATH001/alert").json()["type"] == "airway"

    def test_stress_requires_data(self, client):
        _make_athlete(client)
        assert client.get(f"{API}/analytics/athletes/ATH001/stress").status_code == 404

    @pytest.mark.parametrize("path", [
        "stress", "recovery", "recovery-score", "training-load", "injury-risk",
        "forecast", "sleep", "pathology", "dashboard",
    ])
    def test_athlete_endpoints_respond(self, client, path):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        response = client.get(f"{API}/analytics/athletes/ATH001/{path}")
        assert response.status_code == 200

    def test_sleep_period_bounds(self, client):
        _make_athlete(client)
        url = f"{API}/analytics/athletes/ATH001/sleep"
        assert client.get(url, params={"period_days": 0}).status_code == 422
        assert client.get(url, params={"period_days": 366}).status_code == 422

    def test_team_overview(self, client):
        _make_athlete(client, "ATH001")
        _make_athlete(client, "ATH002")
        _make_athlete(client, "ATH003", team="Fifteens")
        _put_night(client, "ATH001", "2025-07-10")
        _put_night(client, "ATH002", "2025-07-10", spo2_night=93, resp_rate_night=18, hrv_night=50)

        body = client.get(f"{API}/analytics/team/overview", params={"team": "Sevens"}).json()
        assert body["total_athletes"] == 2
        assert body["alert_counts"]["high"] == 1
        assert body["alert_counts"]["optimal"] == 1
        assert body["avg_hrv"] == 55.0

    def test_team_injury_risk_sorted(self, client):
        _make_athlete(client, "ATH001")
        _make_athlete(client, "ATH002")
        _put_night(client, "ATH002", "2025-07-10", hrv_night=30, sleep_duration_h=5,
                   training_load_pct=100)
        risks = client.get(f"{API}/analytics/team/injury-risk").json()
        scores = [r["injury_risk_score"] for r in risks]
        assert scores == sorted(scores, reverse=True)
        assert len(risks) == 2


def _use_html_upstream() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
    service = WeatherService(
        api_keys=["k1"], retry_attempts=1,
        client=httpx.Client(transport=transport, base_url="https://api.example.test/v2"),
    )
    app.dependency_overrides[get_weather_service] = lambda: service
    app.dependency_overrides[get_optional_weather_service] = lambda: service


class TestWeather:

    def test_current_uses_cache(self, client, weather):
        first = client.get(f"{API}/weather/current", params={"city": "Pretoria"})
        assert first.status_code == 200
        assert first.json()["cached"] is False
        assert first.json()["message"] == "Weather data retrieved successfully"
        second = client.get(f"{API}/weather/current", params={"city": "pretoria"})
        assert second.json()["cached"] is True
        assert weather.calls == [("city", "Pretoria", "Gauteng", "South Africa")]

    def test_coordinates_validation(self, client):
        response = client.get(f"{API}/weather/coordinates", params={"lat": 91, "lon": 0})
        assert response.status_code == 422

    def test_coordinates(self, client, weather):
        response = client.get(f"{API}/weather/coordinates", params={"lat": -25.74, "lon": 28.19})
        assert response.status_code == 200
        assert weather.calls == [("coords", -25.74, 28.19)]

    def test_service_error_maps_to_status(self, client, weather):
        weather.error = WeatherServiceError(404, "Location not found")
        response = client.get(f"{API}/weather/current", params={"city": "Atlantis"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Location not found"

    def test_cache_stats_and_clear(self, client):
        client.get(f"{API}/weather/ip")
        stats = client.get(f"{API}/weather/cache/stats").json()
        assert stats["keys"] == ["weather:ip"]
        assert client.post(f"{API}/weather/cache/clear").json()["success"] is True
        assert client.get(f"{API}/weather/cache/stats").json()["size"] == 0

    def test_impact(self, client, weather):
        weather.temperature = 32.0
        _make_athlete(client)
        client.put(f"{API}/athletes/ATH001/genetic-profile",
                   json={"entries": [{"gene": "ACTN3", "genotype": "XX"}]})
        body = client.get(f"{API}/weather/impact/ATH001").json()
        assert body["weather"]["location"]["city"] == "Pretoria"
        assert body["genetic_impacts"][0]["severity"] == "high"
        # 100 - 25 (heat) - 15 (ACTN3 XX)
        assert body["performance"]["score"] == 60

    def test_impact_when_lookup_fails(self, client, weather):
        weather.error = WeatherServiceError(503, "Network connection error")
        _make_athlete(client)
        body = client.get(f"{API}/weather/impact/ATH001").json()
        assert body["weather"] is None
        assert body["performance"] == {"score": 50, "category": "moderate",
                                       "factors": [], "recommendations": []}

    def test_impact_without_client(self, client):
        app.dependency_overrides[get_optional_weather_service] = lambda: None
        _make_athlete(client)
        body = client.get(f"{API}/weather/impact/ATH001").json()
        assert body["performance"]["score"] == 50

    def test_non_json_upstream_body(self, client):
        _use_html_upstream()
        response = client.get(f"{API}/weather/current", params={"city": "Pretoria"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Unexpected weather service response"

    def test_impact_with_non_json_upstream_body(self, client):
        _use_html_upstream()
        _make_athlete(client)
        response = client.get(f"{API}/weather/impact/ATH001")
        assert response.status_code == 200
        assert response.json()["weather"] is None
        assert response.json()["performance"]["score"] == 50

class TestDashboard:

    def test_counts(self, client):
        _make_athlete(client)
        _put_night(client, "ATH001", "2025-07-10")
        client.post(f"{API}/athletes/ATH001/body-composition", json=_make_scan())
        counts = client.get(f"{API}/dashboard").json()
        assert counts["athletes"] == 1
        assert counts["biometric_records"] == 1
        assert counts["body_compositions"] == 1

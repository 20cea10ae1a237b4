"""
Environmental analytics: AirVisual payload normalisation, air quality
bands and the weather performance-impact score.

Performance impact starts at 100 and is adjusted per condition:

    temperature   >35 °C -40 | >30 °C -25 | <5 °C -20 | 15-25 °C +10
    humidity      >85% -20   | <30% -10
    wind          >15 m/s -15
    AQI           >150 -30   | >100 -15
    genotype      high severity -15 | medium severity -8

The score is clamped to 0-100 and banded into optimal (>=80), good
(>=65), moderate (>=45), challenging (>=25) or dangerous.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional, Sequence

from app.models.genetics import GeneticProfile
from app.sam.genetics import genotype_map
from app.schemas.weather import (
    Coordinates,
    CurrentWeather,
    GeneticWeatherImpact,
    PerformanceImpact,
    WeatherData,
    WeatherLocation,
)

NO_WEATHER_SCORE = 50

_AQI_BANDS: list[tuple[int, str]] = [
    (50, "Good"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive Groups"),
    (200, "Unhealthy"),
    (300, "Very Unhealthy"),
]

# AirVisual icon codes; day ("d") and night ("n") share a description.
_ICON_DESCRIPTIONS: dict[str, str] = {
    "01": "Clear sky",
    "02": "Few clouds",
    "03": "Scattered clouds",
    "04": "Broken clouds",
    "09": "Shower rain",
    "10": "Rain",
    "11": "Thunderstorm",
    "13": "Snow",
    "50": "Mist",
}

_IMPACT_BANDS: list[tuple[int, str]] = [
    (80, "optimal"),
    (65, "good"),
    (45, "moderate"),
    (25, "challenging"),
]

_SEVERITY_PENALTY = {"high": 15, "medium": 8}


def get_air_quality_category(aqi: Optional[float]) -> str:
    if not aqi:
        return "Unknown"
    for limit, label in _AQI_BANDS:
        if aqi <= limit:
            return label
    return "Hazardous"


def get_weather_description(icon: Optional[str]) -> str:
    if not icon or len(icon) != 3 or icon[2] not in ("d", "n"):
        return "Unknown"
    return _ICON_DESCRIPTIONS.get(icon[:2], "Unknown")


def transform_airvisual_payload(
    payload: dict[str, Any], now: Optional[datetime.datetime] = None,
) -> WeatherData:
    """Normalise an AirVisual ``city``/``nearest_city`` response.

    Raises:
        KeyError: when the payload lacks the location or weather block.
    """
    data = payload["data"]
    weather = data["current"]["weather"]
    pollution = data["current"].get("pollution") or {}
    # GeoJSON order: [longitude, latitude]
    lon, lat = data["location"]["coordinates"][:2]
    aqi = pollution.get("aqius")

    return WeatherData(
        location=WeatherLocation(
            city=data["city"],
            state=data["state"],
            country=data["country"],
            coordinates=Coordinates(latitude=lat, longitude=lon),
        ),
        current=CurrentWeather(
            temperature=weather.get("tp"),
            humidity=weather.get("hu"),
            pressure=weather.get("pr"),
            wind_speed=weather.get("ws"),
            wind_direction=weather.get("wd"),
            weather_condition=weather.get("ic"),
            weather_description=get_weather_description(weather.get("ic")),
            uv_index=weather.get("uv") or 0,
            visibility=weather.get("vi") or 10,
            cloud_cover=weather.get("cl") or 0,
            feels_like=weather.get("tp"),
            dew_point=weather.get("dp") or 0,
            air_quality_index=aqi,
            air_quality_category=get_air_quality_category(aqi),
            timestamp=now or datetime.datetime.utcnow(),
        ),
    )


# ======================================================================
# Genotype x weather
# ======================================================================


def analyze_genetic_weather_impacts(
    current: Optional[CurrentWeather], genetics: Sequence[GeneticProfile],
) -> list[GeneticWeatherImpact]:
    """Genotype-specific effects of the current conditions."""
    if current is None:
        return []

    genes = genotype_map(genetics)
    temp = current.temperature
    humidity = current.humidity
    impacts: list[GeneticWeatherImpact] = []

    actn3 = genes.get("ACTN3")
    if actn3 and temp is not None and temp > 28:
        if actn3 == "XX":
            impacts.append(GeneticWeatherImpact(
                gene="ACTN3", genotype=actn3,
                impact="Reduced power output in heat",
                severity="high",
                recommendation="Focus on endurance work, avoid high-intensity efforts",
            ))
        elif actn3 == "RR":
            impacts.append(GeneticWeatherImpact(
                gene="ACTN3", genotype=actn3,
                impact="Better heat tolerance for power activities",
                severity="low",
                recommendation="Can maintain power training in moderate heat",
            ))

    adrb2 = genes.get("ADRB2")
    if adrb2 == "Gly16Gly" and humidity is not None and humidity > 70:
        impacts.append(GeneticWeatherImpact(
            gene="ADRB2", genotype=adrb2,
            impact="Reduced sweat efficiency in high humidity",
            severity="medium",
            recommendation="Monitor hydration closely, use cooling strategies",
        ))

    cftr = genes.get("CFTR")
    if cftr and "del" in cftr and temp is not None and temp > 25:
        impacts.append(GeneticWeatherImpact(
            gene="CFTR", genotype=cftr,
            impact="Increased dehydration risk in heat",
            severity="high",
            recommendation="Aggressive hydration protocol, electrolyte monitoring",
        ))

    ppargc1a = genes.get("PPARGC1A")
    if ppargc1a and "Ser" in ppargc1a and temp is not None and temp < 10:
        impacts.append(GeneticWeatherImpact(
            gene="PPARGC1A", genotype=ppargc1a,
            impact="Better cold adaptation",
            severity="low",
            recommendation="Can train effectively in cold conditions",
        ))

    ace = genes.get("ACE")
    if ace == "DD" and temp is not None and temp > 30:
        impacts.append(GeneticWeatherImpact(
            gene="ACE", genotype=ace,
            impact="Higher heat stress risk",
            severity="medium",
            recommendation="Monitor blood pressure, avoid extreme heat exposure",
        ))

    return impacts


# ======================================================================
# Performance impact
# ======================================================================


def _impact_category(score: int) -> str:
    for lower, label in _IMPACT_BANDS:
        if score >= lower:
            return label
    return "dangerous"


def calculate_performance_impact(
    current: Optional[CurrentWeather],
    impacts: Sequence[GeneticWeatherImpact] = (),
) -> PerformanceImpact:
    if current is None:
        return PerformanceImpact(score=NO_WEATHER_SCORE, category="moderate")

    score = 100
    factors: list[str] = []
    recommendations: list[str] = []

    temp = current.temperature
    if temp is not None:
        if temp > 35:
            score -= 40
            factors.append("Extreme heat reduces performance by ~15-25%")
            recommendations.append("Consider indoor training or early morning sessions")
        elif temp > 30:
            score -= 25
            factors.append("High heat impacts endurance and power output")
            recommendations.append("Increase hydration, use cooling strategies")
        elif temp < 5:
            score -= 20
            factors.append("Cold weather reduces muscle performance")
            recommendations.append("Extended warm-up, appropriate layering")
        elif 15 <= temp <= 25:
            score += 10
            factors.append("Optimal temperature range for performance")

    humidity = current.humidity
    if humidity is not None:
        if humidity > 85:
            score -= 20
            factors.append("High humidity impairs heat dissipation")
            recommendations.append("Monitor core temperature, use fans")
        elif humidity < 30:
            score -= 10
            factors.append("Low humidity increases respiratory stress")
            recommendations.append("Stay well hydrated")

    if current.wind_speed is not None and current.wind_speed > 15:
        score -= 15
        factors.append("Strong winds affect pacing and energy expenditure")
        recommendations.append("Adjust pacing strategy, consider protected routes")

    aqi = current.air_quality_index
    if aqi is not None:
        if aqi > 150:
            score -= 30
            factors.append("Poor air quality reduces lung function")
            recommendations.append("Consider indoor training, use air filtration")
        elif aqi > 100:
            score -= 15
            factors.append("Moderate air pollution affects respiratory performance")
            recommendations.append("Monitor breathing rate, consider masks")

    for impact in impacts:
        score -= _SEVERITY_PENALTY.get(impact.severity, 0)

    score = max(0, min(100, score))
    return PerformanceImpact(
        score=score,
        category=_impact_category(score),
        factors=factors,
        recommendations=recommendations,
    )

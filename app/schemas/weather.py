"""
Weather and environmental impact schemas.

``WeatherData`` is the normalised form of an AirVisual (IQAir) payload.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class WeatherLocation(BaseModel):
    city: str
    state: str
    country: str
    coordinates: Coordinates


class CurrentWeather(BaseModel):
    temperature: Optional[float] = Field(None, description="°C")
    humidity: Optional[float] = Field(None, description="%")
    pressure: Optional[float] = Field(None, description="hPa")
    wind_speed: Optional[float] = Field(None, description="m/s")
    wind_direction: Optional[float] = Field(None, description="Degrees")
    weather_condition: Optional[str] = Field(None, description="AirVisual icon code, e.g. 01d")
    weather_description: str = "Unknown"
    uv_index: float = 0
    visibility: float = 10
    cloud_cover: float = 0
    feels_like: Optional[float] = None
    dew_point: float = 0
    precipitation_probability: float = 0
    air_quality_index: Optional[int] = Field(None, description="US AQI")
    air_quality_category: str = "Unknown"
    timestamp: datetime


class WeatherData(BaseModel):
    location: WeatherLocation
    current: CurrentWeather


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherData
    message: str
    cached: bool = False
    timestamp: datetime


class GeneticWeatherImpact(BaseModel):
    gene: str
    genotype: str
    impact: str
    severity: str = Field(..., description="One of: low, medium, high")
    recommendation: str


class PerformanceImpact(BaseModel):
    score: int = Field(..., ge=0, le=100)
    category: str = Field(
        ..., description="One of: optimal, good, moderate, challenging, dangerous",
    )
    factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class WeatherImpactReport(BaseModel):
    athlete_code: str
    weather: Optional[WeatherData] = None
    genetic_impacts: list[GeneticWeatherImpact] = Field(default_factory=list)
    performance: PerformanceImpact


class CacheStats(BaseModel):
    size: int
    max_size: int
    ttl_seconds: int
    hits: int
    misses: int
    keys: list[str] = Field(default_factory=list)

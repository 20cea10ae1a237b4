"""
Weather endpoints.

Current conditions by city, coordinates or caller IP, served through the
in-memory cache, plus the athlete performance impact analysis.
"""

import datetime
import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app.api.dependencies import (
    get_current_user,
    get_optional_weather_service,
    get_weather_cache,
    get_weather_service,
)
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.schemas.weather import CacheStats, WeatherData, WeatherImpactReport, WeatherResponse
from app.services.analytics_service import AnalyticsService
from app.services.weather_cache import WeatherCache, make_cache_key
from app.services.weather_service import WeatherService, WeatherServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def _cached_lookup(
    cache: WeatherCache, key: str, fetch: Callable[[], WeatherData],
) -> WeatherResponse:
    now = datetime.datetime.utcnow()
    data = cache.get(key)
    if data is not None:
        return WeatherResponse(
            data=data, message="Weather data retrieved from cache", cached=True, timestamp=now,
        )
    try:
        data = fetch()
    except WeatherServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    cache.set(key, data)
    return WeatherResponse(data=data, message="Weather data retrieved successfully", timestamp=now)


@router.get("/current", summary="Current weather for a city.", response_model=WeatherResponse)
def current_weather(
    city: str = Query(..., min_length=1, max_length=100),
    state: Optional[str] = Query(None, min_length=1, max_length=100),
    country: Optional[str] = Query(None, min_length=1, max_length=100),
    service: WeatherService = Depends(get_weather_service),
    cache: WeatherCache = Depends(get_weather_cache),
    user: User = Depends(get_current_user),
):
    state = state or settings.WEATHER_DEFAULT_STATE
    country = country or settings.WEATHER_DEFAULT_COUNTRY
    key = make_cache_key(city=city, state=state, country=country)
    return _cached_lookup(cache, key, lambda: service.get_by_city(city, state, country))


@router.get("/coordinates", summary="Current weather at the nearest city to a point.",
            response_model=WeatherResponse)
def weather_by_coordinates(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    service: WeatherService = Depends(get_weather_service),
    cache: WeatherCache = Depends(get_weather_cache),
    user: User = Depends(get_current_user),
):
    key = make_cache_key(lat=lat, lon=lon)
    return _cached_lookup(cache, key, lambda: service.get_by_coordinates(lat, lon))


@router.get("/ip", summary="Current weather at the caller's IP location.",
            response_model=WeatherResponse)
def weather_by_ip(
    service: WeatherService = Depends(get_weather_service),
    cache: WeatherCache = Depends(get_weather_cache),
    user: User = Depends(get_current_user),
):
    return _cached_lookup(cache, make_cache_key(), service.get_by_ip)


@router.get("/impact/{athlete_code}", summary="Weather impact on an athlete's performance.",
            response_model=WeatherImpactReport)
def weather_impact(
    athlete_code: str,
    city: Optional[str] = Query(None, min_length=1, max_length=100),
    state: Optional[str] = Query(None, min_length=1, max_length=100),
    country: Optional[str] = Query(None, min_length=1, max_length=100),
    service: Optional[WeatherService] = Depends(get_optional_weather_service),
    cache: WeatherCache = Depends(get_weather_cache),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Looks up the weather for the given city (the configured default city
    when omitted). Without a configured client, or when the lookup fails,
    the analysis runs without weather and reports a neutral score.
    """
    city = city or settings.WEATHER_DEFAULT_CITY
    state = state or settings.WEATHER_DEFAULT_STATE
    country = country or settings.WEATHER_DEFAULT_COUNTRY
    if service is None:
        return AnalyticsService(db).get_weather_impact(athlete_code, None)
    key = make_cache_key(city=city, state=state, country=country)
    try:
        weather = _cached_lookup(cache, key, lambda: service.get_by_city(city, state, country)).data
    except HTTPException as exc:
        logger.warning("Weather unavailable for %s impact analysis: %s", athlete_code, exc.detail)
        weather = None
    return AnalyticsService(db).get_weather_impact(athlete_code, weather)


@router.get("/cache/stats", summary="Weather cache statistics.", response_model=CacheStats)
def cache_stats(cache: WeatherCache = Depends(get_weather_cache),
                user: User = Depends(get_current_user)):
    return cache.stats()


@router.post("/cache/clear", summary="Empty the weather cache.")
def clear_cache(cache: WeatherCache = Depends(get_weather_cache),
                user: User = Depends(get_current_user)):
    cache.clear()
    return {"success": True, "message": "Weather cache cleared"}

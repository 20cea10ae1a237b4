"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and the weather client.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService
from app.services.weather_cache import WeatherCache, weather_cache
from app.services.weather_service import WeatherService, WeatherServiceError, get_weather_client


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Extract and validate the current user from the JWT token."""
    email = decode_access_token(token)
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = UserService(db).get_user_by_email(email)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")
    return user


def get_weather_service() -> WeatherService:
    try:
        return get_weather_client()
    except WeatherServiceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message) from exc


def get_optional_weather_service() -> Optional[WeatherService]:
    """Weather client, or None when no API key is configured."""
    try:
        return get_weather_client()
    except WeatherServiceError:
        return None


def get_weather_cache() -> WeatherCache:
    return weather_cache

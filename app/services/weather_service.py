"""
AirVisual (IQAir) weather client.

Wraps the ``/city`` and ``/nearest_city`` endpoints with API key
rotation, linear back-off retries and error normalisation.  Payloads are
converted to :class:`WeatherData` by :mod:`app.sam.weather`.
"""

import itertools
import logging
import threading
import time
from functools import lru_cache
from typing import Any, Callable, Optional

import httpx

from app.core.config import settings
from app.sam.weather import transform_airvisual_payload
from app.schemas.weather import WeatherData

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[int, str] = {
    400: "Invalid request parameters",
    401: "Invalid API key",
    403: "API key quota exceeded or access denied",
    404: "Location not found",
    429: "API rate limit exceeded",
    500: "Weather service internal error",
}


class WeatherServiceError(Exception):
    """Weather lookup failure carrying an HTTP-style status code."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class WeatherService:
    """Synchronous AirVisual client."""

    def __init__(
        self,
        api_keys: list[str],
        base_url: str = "https://api.airvisual.com/v2",
        timeout: float = 10.0,
        retry_attempts: int = 3,
        retry_delay: float = 1.0,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not api_keys:
            raise WeatherServiceError(
                500,
                "No AirVisual API keys configured. Set AIRVISUAL_API_KEY or AIRVISUAL_API_KEYS.",
            )
        self._keys = itertools.cycle(api_keys)
        self._key_lock = threading.Lock()
        self.retry_attempts = max(1, retry_attempts)
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_by_city(self, city: str, state: str, country: str) -> WeatherData:
        return self._fetch("/city", {"city": city, "state": state, "country": country})

    def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherData:
        return self._fetch("/nearest_city", {"lat": latitude, "lon": longitude})

    def get_by_ip(self) -> WeatherData:
        """Nearest city to the caller's IP address."""
        return self._fetch("/nearest_city", {})

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_key(self) -> str:
        with self._key_lock:
            return next(self._keys)

    def _fetch(self, path: str, params: dict[str, Any]) -> WeatherData:
        response = self._request_with_retry(path, params)
        try:
            return transform_airvisual_payload(response.json())
        except (KeyError, TypeError, ValueError) as exc:
            # Non-JSON bodies (e.g. an HTML maintenance page) land here too
            logger.error("Unexpected AirVisual payload for %s: %s", path, exc)
            raise WeatherServiceError(502, "Unexpected weather service response") from exc

    def _request_with_retry(self, path: str, params: dict[str, Any]) -> httpx.Response:
        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = self._client.get(path, params={**params, "key": self._next_key()})
                response.raise_for_status()
                return response
            except httpx.HTTPError as exc:
                if attempt >= self.retry_attempts:
                    raise self._to_error(exc) from exc
                delay = self.retry_delay * attempt
                logger.warning(
                    "Weather API request to %s failed (attempt %d/%d), retrying in %.1fs: %s",
                    path, attempt, self.retry_attempts, delay, exc,
                )
                self._sleep(delay)
        # retry_attempts >= 1, so the loop always returns or raises
        raise WeatherServiceError(500, "Weather data retrieval failed")

    @staticmethod
    def _to_error(exc: httpx.HTTPError) -> WeatherServiceError:
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            message = _STATUS_MESSAGES.get(status_code)
            if message is None:
                message = _upstream_message(exc.response) or "Weather data retrieval failed"
        elif isinstance(exc, httpx.TimeoutException):
            status_code, message = 408, "Request timeout"
        elif isinstance(exc, httpx.NetworkError):
            status_code, message = 503, "Network connection error"
        else:
            status_code, message = 500, "Weather data retrieval failed"
        logger.error("Weather service error (%d): %s", status_code, message)
        return WeatherServiceError(status_code, message)


def _upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    data = body.get("data") if isinstance(body, dict) else None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


@lru_cache
def get_weather_client() -> WeatherService:
    """Process-wide client built from settings."""
    return WeatherService(
        api_keys=settings.airvisual_keys,
        base_url=settings.AIRVISUAL_BASE_URL,
        timeout=settings.WEATHER_TIMEOUT_SECONDS,
        retry_attempts=settings.WEATHER_RETRY_ATTEMPTS,
        retry_delay=settings.WEATHER_RETRY_DELAY_SECONDS,
    )

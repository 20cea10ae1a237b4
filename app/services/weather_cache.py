"""
In-memory weather cache.

Entries expire after a TTL; when the cache is full the oldest insertion
is evicted first.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from app.core.config import settings
from app.schemas.weather import CacheStats, WeatherData

logger = logging.getLogger(__name__)


def make_cache_key(
    city: Optional[str] = None,
    state: Optional[str] = None,
    country: Optional[str] = None,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
) -> str:
    """Cache key for a city, a coordinate pair, or the IP lookup."""
    if city and state and country:
        return f"weather:city:{city.lower()}:{state.lower()}:{country.lower()}"
    if lat is not None and lon is not None:
        return f"weather:coords:{lat:.4f}:{lon:.4f}"
    return "weather:ip"


class WeatherCache:
    """Thread-safe TTL cache of :class:`WeatherData` keyed by location."""

    def __init__(
        self,
        ttl_seconds: int = 900,
        max_size: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: OrderedDict[str, tuple[WeatherData, float]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[WeatherData]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                logger.debug("Weather cache miss for %s", key)
                return None
            data, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                self._misses += 1
                logger.debug("Weather cache entry %s expired", key)
                return None
            self._hits += 1
            logger.debug("Weather cache hit for %s", key)
            return data

    def set(self, key: str, data: WeatherData, ttl_seconds: Optional[int] = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self.ttl_seconds
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (data, self._clock() + ttl)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Weather cache evicted %s", evicted)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.info("Weather cache cleared")

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self.max_size,
                ttl_seconds=self.ttl_seconds,
                hits=self._hits,
                misses=self._misses,
                keys=list(self._entries),
            )


weather_cache = WeatherCache(
    ttl_seconds=settings.WEATHER_CACHE_TTL_SECONDS,
    max_size=settings.WEATHER_CACHE_MAX_SIZE,
)

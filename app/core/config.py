"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "SAM Recovery Intelligence"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["SAM Performance"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = "https://github.com/sam-performance/sam-recovery-intelligence"

    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    # Overrides the parts above when set (e.g. sqlite:///./sam.db)
    DATABASE_URL: str = ""

    # Security
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # CORS (comma-separated origins)
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Weather (IQAir / AirVisual)
    AIRVISUAL_API_KEY: str = ""
    AIRVISUAL_API_KEYS: str = ""
    AIRVISUAL_BASE_URL: str = "https://api.airvisual.com/v2"
    WEATHER_TIMEOUT_SECONDS: float = 10.0
    WEATHER_RETRY_ATTEMPTS: int = 3
    WEATHER_RETRY_DELAY_SECONDS: float = 1.0
    WEATHER_CACHE_TTL_SECONDS: int = 15 * 60
    WEATHER_CACHE_MAX_SIZE: int = 1000
    WEATHER_DEFAULT_CITY: str = "Pretoria"
    WEATHER_DEFAULT_STATE: str = "Gauteng"
    WEATHER_DEFAULT_COUNTRY: str = "South Africa"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _assemble_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                                 f":{self.DATABASE_PORT}"
                                 f"/{self.DATABASE_DBNAME}")
        return self

    @property
    def airvisual_keys(self) -> List[str]:
        """Configured AirVisual keys, in rotation order."""
        raw = self.AIRVISUAL_API_KEYS or self.AIRVISUAL_API_KEY
        return [key.strip() for key in raw.split(",") if key.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()

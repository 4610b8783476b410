from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Hair Salon API"
    app_env: str = "development"
    debug: bool = True

    # Database
    database_url: str = "sqlite+aiosqlite:///./salon.db"
    seed_services: bool = True

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Auth
    jwt_secret: str = "local-development-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24

    # Booking rules
    modification_cutoff_hours: int = 48
    suggestion_mode: Literal["block", "advisory"] = "block"
    week_lookup_failure: Literal["fail", "ignore"] = "fail"

    # Logfire (Observability)
    logfire_token: str = ""

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def modification_cutoff(self) -> timedelta:
        return timedelta(hours=self.modification_cutoff_hours)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

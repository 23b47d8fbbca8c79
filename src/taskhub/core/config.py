from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_DRIVERS = ("postgresql+asyncpg://", "sqlite+aiosqlite://")
PLACEHOLDER_SECRET = "change-this-to-a-secure-random-string"


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "TaskHub API"
    app_env: Literal["development", "testing", "production"] = "development"
    debug: bool = False
    enable_openapi: bool = True

    log_level: str | None = None  # Overrides the level implied by debug
    log_user_emails: bool = False  # Keep False in production for GDPR compliance

    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False

    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "taskhub-api"
    jwt_audience: str = "taskhub-clients"
    access_token_expire_minutes: int = 60

    # Argon2id cost; tests lower these to keep hashing fast
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    auth_rate_limit: str = "5/minute"  # slowapi limit string for login and register
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:4200"]
    metrics_api_key: str | None = None  # When set, /metrics requires X-Metrics-Key

    @field_validator("database_url")
    @classmethod
    def require_async_driver(cls, v: str) -> str:
        if not v.startswith(ASYNC_DRIVERS):
            raise ValueError(
                "DATABASE_URL must use an async driver: " + " or ".join(ASYNC_DRIVERS)
            )
        return v

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == PLACEHOLDER_SECRET:
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def reject_wildcard_origin(cls, v: list[str]) -> list[str]:
        # Credentials are allowed, and browsers refuse "*" together with them
        if "*" in v:
            raise ValueError("CORS_ORIGINS cannot contain '*'; list explicit origins")
        return v

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

RDS_HOST_MARKER = "rds.amazonaws.com"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str | None = None  # Full URL, takes precedence over POSTGRES_*
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "postgres"
    TZ: str = "UTC"

    # Connection retries at startup
    DB_CONNECT_RETRIES: int = 10
    DB_CONNECT_RETRY_DELAY: float = 2.0

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Shelfshare Books API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def db_sslmode(self) -> str:
        """SSL mode for the database connection (managed RDS hosts require TLS)."""
        if RDS_HOST_MARKER in self.POSTGRES_HOST:
            return "require"
        return "disable"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy database URL, built from the POSTGRES_* settings unless DATABASE_URL is set."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD or None,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DB,
            query={"sslmode": self.db_sslmode, "options": f"-c timezone={self.TZ}"},
        )
        return url.render_as_string(hide_password=False)

    @field_validator("DB_CONNECT_RETRIES", mode="after")
    @classmethod
    def validate_retries(cls, value: int) -> int:
        """At least one connection attempt is always made."""
        if value < 1:
            msg = "DB_CONNECT_RETRIES must be at least 1"
            raise ValueError(msg)
        return value


LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str = "development") -> None:
    """
    Route stdlib and structlog output through one stdout handler.

    Production emits one JSON object per line; other environments use the
    colored console renderer.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=LOG_LEVELS.get(environment, logging.INFO),
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()

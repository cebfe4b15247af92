from __future__ import annotations

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

DATABASE_URL_ENV = "FIRE_URL"
SERVICE_ACCOUNT_ENV = "FIRE_ACCOUNT"


def require_env(key: str) -> str:
    """Return the value of ``key`` or raise ConfigError naming it."""
    value = os.getenv(key)
    if not value:
        raise ConfigError(f"Environment variable {key} must be set")
    return value


class Settings(BaseModel):
    database_url: str = Field(
        ...,
        description=(
            "Firebase Realtime Database root URL, e.g. "
            "https://<project-id>-default-rtdb.firebaseio.com"
        ),
    )
    service_account_file: str = Field(
        ..., description="Path to Google service account JSON file"
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    @classmethod
    def from_env(cls) -> Settings:
        database_url = require_env(DATABASE_URL_ENV)
        service_account_file = require_env(SERVICE_ACCOUNT_ENV)
        try:
            return cls(
                database_url=database_url,
                service_account_file=service_account_file,
                log_level=os.getenv("LOG_LEVEL", "WARNING"),
            )
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ConfigError(f"Invalid configuration: {messages}") from e

    @field_validator("database_url")
    @classmethod
    def validate_db_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError(f"{DATABASE_URL_ENV} must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "WARNING"

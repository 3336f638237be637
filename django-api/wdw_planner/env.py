"""Environment-backed configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerSettings(BaseSettings):
    """Deployment settings read from WDW_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="WDW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    secret_key: str = Field(default="django-insecure-wdw-planner-dev-key")
    allowed_hosts: list[str] = ["localhost", "127.0.0.1"]

    # Database
    db_engine: str = "django.db.backends.sqlite3"
    db_name: str = "db.sqlite3"
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: str = ""

    # DVC
    planning_timezone: str = "America/New_York"
    contracts_cache_timeout: int = 300

    log_level: str = "INFO"


@lru_cache
def get_settings() -> PlannerSettings:
    return PlannerSettings()

# rosterapp/core/config.py
from __future__ import annotations

from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "PuppyBowlRoster"
    APP_ENV: EnvType = "local"

    # Upstream Puppy Bowl API
    API_BASE: str = "https://fsa-puppy-bowl.herokuapp.com/api"
    COHORT_NAME: str = Field(default="2508-FTB-ET-WEB-FT", description="Cohort segment of the players URL")
    REQUEST_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Seconds before an upstream call is abandoned; unset means wait forever",
    )

    # Populate the lineup when the app boots
    FETCH_ON_STARTUP: bool = True

    # Logging
    LOG_LEVEL: LogLevel = "INFO"
    LOG_DIR: Optional[str] = None

    @property
    def players_url(self) -> str:
        return f"{self.API_BASE.rstrip('/')}/{self.COHORT_NAME.strip('/')}/players"

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    # ---------- Validators ----------

    @field_validator("COHORT_NAME", "API_BASE")
    @classmethod
    def _strip(cls, v: str) -> str:
        # allow quoted values from .env
        return v.strip().strip('"').strip("'")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v).strip().upper() if v is not None else v

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        parsed = urlparse(self.API_BASE)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            problems.append(f"API_BASE must be an http(s) URL, got {self.API_BASE!r}.")

        if not self.COHORT_NAME:
            problems.append("COHORT_NAME is required.")

        if self.REQUEST_TIMEOUT is not None and self.REQUEST_TIMEOUT <= 0:
            problems.append("REQUEST_TIMEOUT must be positive when set.")

        if problems:
            # Collapse to one helpful error line
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()

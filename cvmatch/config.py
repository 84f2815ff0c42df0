"""
Application configuration via environment variables.
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    app_name: str = "CvMatchAPI"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # ── Job search API ───────────────────────────────────
    job_api_base_url: str = "https://jobsearch.api.jobtechdev.se"
    job_api_timeout: float = 15.0
    default_search_query: str = "developer"

    # ── Matching ─────────────────────────────────────────
    # Picked once when the service graph is built, never per request
    matching_strategy: Literal["skill_based", "keyword"] = "skill_based"
    match_max_workers: int = Field(default=8, ge=1)

    # ── CORS ─────────────────────────────────────────────
    cors_origins: str = "http://localhost:3000"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()

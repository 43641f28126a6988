from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# services/api/app/core/config.py -> BASE_DIR == services/api
BASE_DIR = Path(__file__).resolve().parents[2]
APP_DIR = BASE_DIR / "app"
DEFAULT_FIXTURE_CATALOG_PATH = APP_DIR / "fixtures" / "catalog_fixture.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="production", validation_alias="ENV")

    # Application
    api_name: str = Field(default="booking-api", validation_alias="API_NAME")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Cache / rate limiting backend
    redis_url: str = Field(
        default="redis://localhost:6379/0", validation_alias="REDIS_URL"
    )

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """
        Supported env formats:
          - JSON list: '["http://localhost:3000"]'
          - Bracket list (no quotes): '[http://localhost:3000, http://localhost:5173]'
          - Comma-separated: 'http://localhost:3000, http://localhost:5173'
          - '*' wildcard
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if not isinstance(v, str):
            raise TypeError("cors_origins must be a string or list of strings")

        s = v.strip()
        if not s:
            return []
        if s == "*":
            return ["*"]

        if s.startswith("[") and s.endswith("]"):
            try:
                parsed = json.loads(s)
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
            except json.JSONDecodeError:
                inner = s[1:-1].strip()
                if not inner:
                    return []
                parts = [p.strip().strip('"').strip("'") for p in inner.split(",")]
                return [p for p in parts if p]

        parts = [p.strip() for p in s.split(",")]
        return [p for p in parts if p]

    # Catalog provider
    catalog_provider: str = Field(default="seed", validation_alias="CATALOG_PROVIDER")
    fixture_catalog_path: str = Field(
        default=str(DEFAULT_FIXTURE_CATALOG_PATH),
        validation_alias="FIXTURE_CATALOG_PATH",
    )

    # Synthetic catalog seeding
    seed_generate_count: int = Field(
        default=2000, ge=0, validation_alias="SEED_GENERATE_COUNT"
    )
    seed_random_seed: int | None = Field(
        default=None, validation_alias="SEED_RANDOM_SEED"
    )
    seed_start: date = Field(default=date(2025, 7, 1), validation_alias="SEED_START")
    seed_end: date = Field(default=date(2025, 9, 30), validation_alias="SEED_END")
    seed_blocks_min: int = Field(default=1, ge=0, validation_alias="SEED_BLOCKS_MIN")
    seed_blocks_max: int = Field(default=4, ge=0, validation_alias="SEED_BLOCKS_MAX")
    seed_block_nights_min: int = Field(
        default=1, ge=1, validation_alias="SEED_BLOCK_NIGHTS_MIN"
    )
    seed_block_nights_max: int = Field(
        default=5, ge=1, validation_alias="SEED_BLOCK_NIGHTS_MAX"
    )
    seed_gap_days_min: int = Field(default=0, ge=0, validation_alias="SEED_GAP_DAYS_MIN")
    seed_gap_days_max: int = Field(default=2, ge=0, validation_alias="SEED_GAP_DAYS_MAX")

    @model_validator(mode="after")
    def check_seed_bounds(self) -> "Settings":
        for name in ("blocks", "block_nights", "gap_days"):
            lo = getattr(self, f"seed_{name}_min")
            hi = getattr(self, f"seed_{name}_max")
            if lo > hi:
                raise ValueError(
                    f"SEED_{name.upper()}_MIN must not exceed SEED_{name.upper()}_MAX"
                )
        return self

    # Availability query
    availability_max_range_days: int = Field(
        default=60, ge=0, validation_alias="AVAILABILITY_MAX_RANGE_DAYS"
    )
    availability_cancel_check_every: int = Field(
        default=1, ge=1, validation_alias="AVAILABILITY_CANCEL_CHECK_EVERY"
    )
    disconnect_poll_interval_secs: float = Field(
        default=0.1, gt=0, validation_alias="DISCONNECT_POLL_INTERVAL_SECS"
    )

    # Rate limiting
    rate_limit_window_seconds: int = Field(
        default=60, ge=1, validation_alias="RATE_LIMIT_WINDOW_SECONDS"
    )
    rate_limit_availability_per_window: int = Field(
        default=120, ge=1, validation_alias="RATE_LIMIT_AVAILABILITY_PER_WINDOW"
    )

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_otlp_endpoint: str = Field(
        default="http://localhost:4317",
        validation_alias="OTEL_OTLP_ENDPOINT",
    )

    @property
    def is_dev(self) -> bool:
        return self.env.strip().lower() in {"dev", "development", "local"}


settings = Settings()

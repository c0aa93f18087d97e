from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TariffSettings(BaseSettings):
    timezone: str = "Europe/Oslo"
    max_trip_minutes: int = Field(default=10080, ge=1, le=100000)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Preview trip used by the tariff editor
    preview_km: float = Field(default=15.04, ge=0)
    preview_minutes: int = Field(default=22, ge=0)

    model_config = SettingsConfigDict(env_prefix="TAXI_")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> TariffSettings:
    """Load and validate settings from environment variables."""
    return TariffSettings()

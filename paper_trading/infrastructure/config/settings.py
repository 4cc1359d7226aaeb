"""
Runtime settings read from the process environment.

The FastAPI composition root calls load_dotenv() first, so a local .env file
feeds the same variables.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAPER_TRADING_",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    simulation_interval_seconds: float = Field(default=5.0, gt=0)
    simulation_enabled: bool = True
    max_price_change: float = Field(default=0.015, gt=0, lt=1)
    history_limit: int = Field(default=100, ge=1)
    initial_cash: float = Field(default=100_000.0, ge=0)
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    log_file: Optional[str] = Field(default=None, validation_alias=AliasChoices("LOG_FILE", "log_file"))

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_file")
    @classmethod
    def _blank_file_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

"""Ranking engine configuration with validation."""
from typing import Dict, Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ranking_service.models.enumerations import PrestigeTier


class Settings(BaseSettings):
    """Ranking engine settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Script Manifest Ranking Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Prestige multipliers per competition tier
    PRESTIGE_STANDARD: float = Field(default=1.0, ge=0)
    PRESTIGE_NOTABLE: float = Field(default=1.5, ge=0)
    PRESTIGE_ELITE: float = Field(default=2.0, ge=0)
    PRESTIGE_PREMIER: float = Field(default=3.0, ge=0)

    # Used for competitions with no prestige configuration
    DEFAULT_PRESTIGE_MULTIPLIER: float = Field(default=1.0, ge=0)

    @model_validator(mode="after")
    def validate_prestige_order(self):
        """Prestige multipliers must increase with tier significance."""
        ordered = [
            self.PRESTIGE_STANDARD, self.PRESTIGE_NOTABLE,
            self.PRESTIGE_ELITE, self.PRESTIGE_PREMIER,
        ]
        if any(lower >= higher for lower, higher in zip(ordered, ordered[1:])):
            raise ValueError(
                f"Prestige multipliers must be strictly increasing, got {ordered}"
            )
        return self

    @property
    def prestige_multipliers(self) -> Dict[PrestigeTier, float]:
        """Get prestige multipliers keyed by tier."""
        return {
            PrestigeTier.STANDARD: self.PRESTIGE_STANDARD,
            PrestigeTier.NOTABLE: self.PRESTIGE_NOTABLE,
            PrestigeTier.ELITE: self.PRESTIGE_ELITE,
            PrestigeTier.PREMIER: self.PRESTIGE_PREMIER,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()

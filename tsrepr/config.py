"""
Library Configuration — Pydantic Settings

Default representation parameters, overridable through environment
variables (prefix TSREPR_) or a .env file.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tsrepr.aggregation import AGGREGATIONS


class Settings(BaseSettings):
    """
    Representation defaults loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === FeaTrend Defaults ===
    DEFAULT_PIECES: int = 2
    DEFAULT_ORDER: int = 4
    DEFAULT_AGGREGATE: str = "max"

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_prefix="TSREPR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_PIECES", "DEFAULT_ORDER")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("DEFAULT_AGGREGATE")
    @classmethod
    def validate_aggregate(cls, v: str) -> str:
        if v not in AGGREGATIONS:
            raise ValueError(f"must be one of {sorted(AGGREGATIONS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


# Singleton instance
settings = Settings()

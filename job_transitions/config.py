"""
Configuration for the transition explorer, loaded from environment variables.
"""

from functools import lru_cache
import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LABEL_COLUMN = "SOURCE GROUP /// TARGET GROUP -->"


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(validate_default=True)

    data_dir: str = os.getenv("TRANSITIONS_DATA_DIR", "data")
    label_column: str = os.getenv("TRANSITIONS_LABEL_COLUMN", DEFAULT_LABEL_COLUMN)
    default_threshold: float = Field(
        default=float(os.getenv("TRANSITIONS_DEFAULT_THRESHOLD", "0.3")),
        ge=0.0,
        le=1.0,
    )
    # What the API does when every weight is zero: refuse, or fall back to 1/5 each.
    zero_weight_policy: Literal["reject", "uniform"] = os.getenv(
        "TRANSITIONS_ZERO_WEIGHT_POLICY", "reject"
    )
    combine_cache_size: int = Field(
        default=int(os.getenv("TRANSITIONS_COMBINE_CACHE_SIZE", "32")),
        ge=0,
    )
    log_level: str = os.getenv("TRANSITIONS_LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()

"""Library configuration and constants."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RANDOM_OO_", extra="ignore")

    # Seed for the shared uniform source at import time (None = OS entropy)
    default_seed: int | None = None

    # Stand-in for a uniform draw of exactly 0.0 in the normal transform
    zero_probability_substitute: float = Field(1e-254, gt=0.0, lt=0.5)

    # Upper bound for Generator.sample()
    max_sample_size: int = 10_000_000


settings = Settings()

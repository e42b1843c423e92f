from __future__ import annotations
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://data.police.uk/api"


class Settings(BaseSettings):
    # ----------------
    # Police API
    # ----------------
    base_url: str = Field(DEFAULT_BASE_URL, alias="POLICE_API_BASE_URL")
    # seconds; unset leaves the transport's own default in place
    timeout: Optional[float] = Field(None, alias="POLICE_API_TIMEOUT")

    # ----------------
    # Logging
    # ----------------
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # ----------------
    # Pydantic settings
    # ----------------
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings() -> Settings:
    return Settings()

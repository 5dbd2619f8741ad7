"""Runtime settings, read from RTASKS_* environment variables or a .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "RTASKS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    log_level: str = "WARNING"
    hash_chunk_size: int = 64 * 1024
    xml_indent: str = "  "
    default_encoding: str = "utf-8"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("hash_chunk_size")
    @classmethod
    def positive_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("hash_chunk_size must be positive")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

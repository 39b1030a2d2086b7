from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = True
    log_level: str = "INFO"

    cors_origins: List[str] = ["*"]

    rate_limit_enabled: bool = True
    default_rate_limit: str = "60/minute"
    analyze_rate_limit: str = "30/minute"
    upload_rate_limit: str = "10/minute"

    pareto_keywords: List[str] = ["good", "bad", "improve", "issue", "problem"]
    sample_size: int = 5


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

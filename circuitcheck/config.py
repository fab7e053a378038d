from pydantic_settings import BaseSettings
from functools import lru_cache
from pydantic import Field


class Settings(BaseSettings):
    # Feedback text
    language: str = "fr"

    # Loop search
    max_search_steps: int = Field(default=100_000, gt=0)

    # Wire expansion
    max_unit_segments: int = Field(default=100_000, gt=0)

    # Logging (CLI only, the library never configures handlers)
    log_level: str = "WARNING"

    class Config:
        env_prefix = "CIRCUITCHECK_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()

"""
Client configuration.

Values come from keyword arguments, then ``TGBOT_*`` environment variables,
then an optional ``.env`` file.  A settings object is frozen: a client
reads it once at construction and it never changes afterwards.

    settings = BotSettings(api_root="http://localhost:9654")
    bot = Bot(token, settings=settings)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_ROOT = "https://api.telegram.org"


class BotSettings(BaseSettings):
    api_root: str = DEFAULT_API_ROOT
    timeout: float = 30.0      # seconds, applied to every request
    max_workers: int = 4       # thread pool size for in-flight calls

    model_config = SettingsConfigDict(
        env_prefix="TGBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("api_root")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be a positive number")
        return v

    @field_validator("max_workers")
    @classmethod
    def positive_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_workers must be >= 1")
        return v


@lru_cache(maxsize=1)
def get_settings() -> BotSettings:
    return BotSettings()

import secrets
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ACCESS_CODE: str = "FETHINK-ETHICS1"

    # Falls back to a per-process secret; sessions then reset on restart.
    COOKIE_SECRET: str = Field(default_factory=lambda: secrets.token_hex(32))
    COOKIE_SECURE: bool = True
    SESSION_MINUTES: int = Field(default=120, gt=0)

    COURSE_BACK_URL: str = ""
    NEXT_LESSON_URL: str = ""

    MAX_ANSWER_CHARS: int = Field(default=6000, gt=0)

    CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: str = "public"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def SESSION_SECONDS(self) -> int:
        return self.SESSION_MINUTES * 60


settings = Settings()

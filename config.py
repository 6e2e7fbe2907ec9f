"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks RPN_CALC_ (np. RPN_CALC_LOG_LEVEL=DEBUG).
"""
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # Logging (stderr; WARNING nie zaśmieca sesji interaktywnej)
    log_level: LogLevel = "WARNING"

    # REPL
    prompt: str = "> "
    show_help_on_start: bool = True

    model_config = SettingsConfigDict(env_prefix="RPN_CALC_", env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from langhost.domain.models import LANGUAGE_SETTING


class TranslationSettings(BaseModel):
    directory: Path = Field(
        default=Path("translation"),
        description="Pack directory, relative to the host data path unless absolute.",
    )
    file_extension: str = Field(default="json", min_length=1)
    fallback_language: str = "en"
    lookup_mode: Literal["message_key", "legacy"] = "message_key"

    @field_validator("fallback_language", mode="before")
    @classmethod
    def _normalise_language(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if not value:
                raise ValueError("fallback_language must not be blank")
        return value

    @field_validator("file_extension", mode="before")
    @classmethod
    def _strip_dot(cls, value):
        if isinstance(value, str):
            return value.strip().lstrip(".")
        return value


class ClientLocaleSettings(BaseModel):
    setting_name: str = Field(default=LANGUAGE_SETTING, min_length=1)
    evict_on_disconnect: bool = True


class HostSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LANGHOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    sharp_path: Path = Path(".")

    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    client_locale: ClientLocaleSettings = Field(default_factory=ClientLocaleSettings)

    @property
    def translation_root(self) -> Path:
        directory = self.translation.directory
        if directory.is_absolute():
            return directory
        return self.sharp_path / directory


@lru_cache
def get_settings() -> HostSettings:
    """Return cached settings instance."""

    return HostSettings()


__all__ = [
    "ClientLocaleSettings",
    "HostSettings",
    "TranslationSettings",
    "get_settings",
]

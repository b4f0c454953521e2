"""Configuration objects and helpers."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(slots=True, frozen=True)
class CatalogConfig:
    """Translation catalog options."""

    locale_dir: Path | None
    domain: str
    languages: tuple[str, ...]
    format: Literal["mo", "json"]


@dataclass(slots=True, frozen=True)
class DatetimeConfig:
    """Datetime rendering options."""

    timezone: str | None


@dataclass(slots=True, frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: int


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Aggregate application configuration dataclass."""

    catalog: CatalogConfig
    datetime: DatetimeConfig
    logging: LoggingConfig


class Settings(BaseSettings):
    """Runtime configuration parsed from environment variables."""

    locale_dir: Path | None = Field(default=None, alias="LOCALE_DIR")
    domain: str = Field("messages", alias="GETTEXT_DOMAIN", min_length=1)
    languages_raw: object = Field(default=None, alias="LANGUAGES")
    catalog_format: Literal["mo", "json"] = Field("mo", alias="CATALOG_FORMAT")
    timezone: str | None = Field(default=None, alias="TIMEZONE")
    log_level: str | int = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_json_loads=lambda value: value,
    )

    @field_validator("locale_dir", mode="before")
    @classmethod
    def _expand_locale_dir(cls, value: object) -> Path | None:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("catalog_format", mode="before")
    @classmethod
    def _normalize_catalog_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("timezone", mode="before")
    @classmethod
    def _blank_timezone(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str | int) -> int:
        if isinstance(value, int):
            return value
        name = value.upper().strip()
        if name not in logging._nameToLevel:  # noqa: SLF001 - accessing mapping for conversion only
            raise ValueError(f"Unknown log level: {value}")
        return logging._nameToLevel[name]

    def to_dataclass(self) -> AppConfig:
        """Transform runtime settings into frozen dataclasses."""

        catalog_config = CatalogConfig(
            locale_dir=self.locale_dir,
            domain=self.domain,
            languages=self._parse_languages(self.languages_raw),
            format=self.catalog_format,
        )
        datetime_config = DatetimeConfig(timezone=self.timezone)
        logging_config = LoggingConfig(level=self.log_level)
        return AppConfig(
            catalog=catalog_config,
            datetime=datetime_config,
            logging=logging_config,
        )

    @staticmethod
    def _parse_languages(value: object) -> tuple[str, ...]:
        if value in (None, ""):
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(str(item).strip() for item in value if str(item).strip())
        if isinstance(value, str):
            parts = [chunk.strip() for chunk in value.replace(":", ",").split(",")]
            return tuple(chunk for chunk in parts if chunk)
        raise TypeError("LANGUAGES must be a comma separated string or iterable of language codes")


def load_settings() -> AppConfig:
    """Load settings from the environment and return dataclasses."""

    return Settings().to_dataclass()


__all__ = [
    "AppConfig",
    "CatalogConfig",
    "DatetimeConfig",
    "LoggingConfig",
    "Settings",
    "load_settings",
]

"""
Working Days Configuration

Settings are read from WD_* environment variables:

    WD_HOLIDAY_SOURCE        remote | file | computed   (default: remote)
    WD_HOLIDAYS_URL          holiday list endpoint for "remote"
    WD_HOLIDAYS_FILE         YAML/JSON holiday file for "file"
    WD_HTTP_TIMEOUT_SECONDS  holiday fetch timeout      (default: 10)
    WD_LOG_LEVEL             logging level              (default: INFO)
    WD_DOCS_ENABLED          expose /docs               (default: true)
    PORT                     HTTP port                  (default: 3000)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .holidays import (
    DEFAULT_HOLIDAYS_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ComputedHolidaySource,
    FileHolidaySource,
    HolidaySource,
    RemoteHolidaySource,
)

HOLIDAY_SOURCE_KINDS = ("remote", "file", "computed")


@dataclass(frozen=True)
class Settings:
    """Service configuration."""
    holiday_source: str = "remote"
    holidays_url: str = DEFAULT_HOLIDAYS_URL
    holidays_file: Optional[str] = None
    http_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"
    docs_enabled: bool = True
    port: int = 3000

    def __post_init__(self) -> None:
        if self.holiday_source not in HOLIDAY_SOURCE_KINDS:
            raise ValueError(
                f"WD_HOLIDAY_SOURCE must be one of {HOLIDAY_SOURCE_KINDS}, got '{self.holiday_source}'"
            )
        if self.holiday_source == "file" and not self.holidays_file:
            raise ValueError("WD_HOLIDAYS_FILE is required when WD_HOLIDAY_SOURCE=file")
        if self.http_timeout_seconds <= 0:
            raise ValueError("WD_HTTP_TIMEOUT_SECONDS must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            holiday_source=env.get("WD_HOLIDAY_SOURCE", "remote").lower(),
            holidays_url=env.get("WD_HOLIDAYS_URL", DEFAULT_HOLIDAYS_URL),
            holidays_file=env.get("WD_HOLIDAYS_FILE") or None,
            http_timeout_seconds=float(env.get("WD_HTTP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
            log_level=env.get("WD_LOG_LEVEL", "INFO").upper(),
            docs_enabled=env.get("WD_DOCS_ENABLED", "true").lower() == "true",
            port=int(env.get("PORT", "3000")),
        )


def build_holiday_source(settings: Settings) -> HolidaySource:
    """Holiday source selected by the settings."""
    if settings.holiday_source == "file":
        return FileHolidaySource(settings.holidays_file)
    if settings.holiday_source == "computed":
        return ComputedHolidaySource()
    return RemoteHolidaySource(
        url=settings.holidays_url,
        timeout=settings.http_timeout_seconds,
    )

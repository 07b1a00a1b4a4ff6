# mediaprobe/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediaprobe.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class FFProbeConfig(BaseModel):
    bin: str = "ffprobe"
    timeout_sec: int = Field(30, ge=1)
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    count_frames: bool = False
    extra_args: str = ""  # comma separated, inserted before the input path

    @field_validator("count_frames", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @property
    def extra_arg_list(self) -> List[str]:
        return csv_to_list(self.extra_args)


class FeatureFlags(BaseModel):
    """Which report sections are requested from ffprobe and decoded."""
    streams: bool = True
    format: bool = True
    chapters: bool = True

    @field_validator("*", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mediaprobe"
    app_env: str = "development"  # development|test|production
    log_level: str = "WARNING"

    # -------- Sub-configs --------
    ffprobe: FFProbeConfig = FFProbeConfig()
    features: FeatureFlags = FeatureFlags()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediaprobe.common.settings import get_settings
        cfg = get_settings()
    Nested values come from the environment as FFPROBE__BIN, FEATURES__CHAPTERS, ...
    """
    return Settings()

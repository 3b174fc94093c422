from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator


OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
IP_LOOKUP_URL = "http://ipapi.co/json/"


class LocationSource(StrEnum):
    IP = "ip"
    FIXED = "fixed"


class WeatherConfig(BaseModel):
    """Configuration for the weather endpoint"""

    base_url: str = OPENWEATHER_CURRENT_URL
    timeout_seconds: float = Field(10.0, gt=0.0)


class LocationConfig(BaseModel):
    """Configuration for location acquisition"""

    source: LocationSource = LocationSource.IP
    latitude: Optional[float] = Field(None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(None, ge=-180.0, le=180.0)
    timeout_seconds: float = Field(15.0, gt=0.0)
    ip_lookup_url: str = IP_LOOKUP_URL

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, v: Any) -> Any:
        if isinstance(v, LocationSource) or v is None:
            return v
        if isinstance(v, str):
            try:
                return LocationSource(v.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid location source: {v!r}")

    @model_validator(mode="after")
    def _require_coordinates_for_fixed(self) -> "LocationConfig":
        if self.source is LocationSource.FIXED and (
            self.latitude is None or self.longitude is None
        ):
            raise ValueError("A fixed location needs both latitude and longitude")
        return self


class AppConfig(BaseModel):
    """Main application configuration"""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)


def load_config(path: str | Path) -> AppConfig:
    """
    Load and validate hierarchical YAML config.

    Raises:
        FileNotFoundError: if the file does not exist
        RuntimeError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Invalid YAML in {p}: {e}") from e

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config values in {p}:\n{e}") from e

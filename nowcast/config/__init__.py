from .env import NowcastEnv, load_environment
from .loader import (
    AppConfig,
    LocationConfig,
    LocationSource,
    WeatherConfig,
    load_config,
)

__all__ = [
    "NowcastEnv",
    "load_environment",
    "AppConfig",
    "LocationConfig",
    "LocationSource",
    "WeatherConfig",
    "load_config",
]

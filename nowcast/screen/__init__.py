from .base import WeatherView
from .console import ConsoleWeatherView

__all__ = ["WeatherView", "ConsoleWeatherView"]

"""Weather module for fetching and formatting current conditions."""

from .formatting import format_weather_display, transform_api_response
from .service import OpenWeatherClient
from .views import WeatherCondition, WeatherDisplay, WeatherObservation

__all__ = [
    "format_weather_display",
    "transform_api_response",
    "OpenWeatherClient",
    "WeatherCondition",
    "WeatherDisplay",
    "WeatherObservation",
]

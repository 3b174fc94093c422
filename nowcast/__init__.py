from nowcast.exceptions import (
    LocationUnavailable,
    NetworkError,
    NowcastError,
    ParseError,
    PermissionDenied,
)
from nowcast.factory import ScreenFactory
from nowcast.location import Coordinate, LocationAcquirer
from nowcast.state import WeatherScreenContext
from nowcast.weather import OpenWeatherClient, WeatherObservation

__all__ = [
    "LocationUnavailable",
    "NetworkError",
    "NowcastError",
    "ParseError",
    "PermissionDenied",
    "ScreenFactory",
    "Coordinate",
    "LocationAcquirer",
    "WeatherScreenContext",
    "OpenWeatherClient",
    "WeatherObservation",
]

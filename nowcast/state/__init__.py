from .base import AwaitingState, StateType, WeatherScreenEvent, WeatherScreenState
from .context import WeatherScreenContext

from .awaiting_location import AwaitingLocationState
from .awaiting_permission import AwaitingPermissionState
from .awaiting_weather import AwaitingWeatherState
from .displaying import DisplayingState
from .idle import IdleState

__all__ = [
    "AwaitingState",
    "StateType",
    "WeatherScreenEvent",
    "WeatherScreenState",
    "WeatherScreenContext",
    "AwaitingLocationState",
    "AwaitingPermissionState",
    "AwaitingWeatherState",
    "DisplayingState",
    "IdleState",
]

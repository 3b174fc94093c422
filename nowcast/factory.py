from typing import Optional

from nowcast.config.loader import AppConfig, LocationSource
from nowcast.location.acquirer import LocationAcquirer
from nowcast.location.permissions import PermissionGate
from nowcast.location.providers import (
    FixedLocationProvider,
    IpGeolocationProvider,
    LocationProvider,
)
from nowcast.location.views import Coordinate
from nowcast.screen.base import WeatherView
from nowcast.state.context import WeatherScreenContext
from nowcast.weather.service import OpenWeatherClient


class ScreenFactory:
    """Wires the weather screen's collaborators from configuration."""

    def __init__(self, config: AppConfig, api_key: str):
        self.config = config
        self.api_key = api_key

    def create_context(
        self,
        view: WeatherView,
        permission_gate: PermissionGate,
        location_provider: Optional[LocationProvider] = None,
    ) -> WeatherScreenContext:
        acquirer = LocationAcquirer(
            permission_gate=permission_gate,
            provider=location_provider or self._create_location_provider(),
            timeout_seconds=self.config.location.timeout_seconds,
        )
        return WeatherScreenContext(
            location_acquirer=acquirer,
            weather_client=self._create_weather_client(),
            view=view,
        )

    def _create_location_provider(self) -> LocationProvider:
        location = self.config.location
        if location.source is LocationSource.FIXED:
            return FixedLocationProvider(
                Coordinate(latitude=location.latitude, longitude=location.longitude)
            )
        return IpGeolocationProvider(url=location.ip_lookup_url)

    def _create_weather_client(self) -> OpenWeatherClient:
        return OpenWeatherClient(
            api_key=self.api_key,
            base_url=self.config.weather.base_url,
            timeout_seconds=self.config.weather.timeout_seconds,
        )

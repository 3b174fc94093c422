from __future__ import annotations

import asyncio
import copy
import logging
from typing import Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from nowcast.exceptions import LocationProviderError
from nowcast.location.acquirer import LocationAcquirer
from nowcast.location.permissions import StaticPermissionGate
from nowcast.location.providers import LocationProvider
from nowcast.location.views import Coordinate, LocationPriority
from nowcast.screen.base import WeatherView
from nowcast.state.context import WeatherScreenContext
from nowcast.weather.service import OpenWeatherClient
from nowcast.weather.views import WeatherDisplay


BERLIN = Coordinate(latitude=52.52, longitude=13.405)

BERLIN_PAYLOAD = {
    "name": "Berlin",
    "main": {"temp": 18.4, "humidity": 60, "pressure": 1012},
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
    ],
    "wind": {"speed": 3.1, "deg": 200},
    "sys": {"country": "DE"},
}


class RecordingView(WeatherView):
    """Captures everything the pipeline writes to the screen."""

    def __init__(self):
        self.busy = False
        self.refresh_enabled = True
        self.busy_changes: list[bool] = []
        self.notices: list[str] = []
        self.busy_during_notices: list[bool] = []
        self.displays: list[WeatherDisplay] = []
        self.busy_during_renders: list[bool] = []

    def set_busy(self, busy: bool) -> None:
        if busy != self.busy:
            self.busy_changes.append(busy)
        self.busy = busy

    def set_refresh_enabled(self, enabled: bool) -> None:
        self.refresh_enabled = enabled

    def show_notice(self, message: str) -> None:
        self.notices.append(message)
        self.busy_during_notices.append(self.busy)

    def render(self, display: WeatherDisplay) -> None:
        self.displays.append(display)
        self.busy_during_renders.append(self.busy)


class StubLocationProvider(LocationProvider):
    """Returns a canned fix, None, or raises; optionally waits on a gate first."""

    def __init__(
        self,
        coordinate: Optional[Coordinate] = BERLIN,
        error: Optional[Exception] = None,
        release: Optional[asyncio.Event] = None,
    ):
        self.coordinate = coordinate
        self.error = error
        self.release = release
        self.started = asyncio.Event()
        self.calls: list[LocationPriority] = []

    async def current_location(
        self, priority: LocationPriority = LocationPriority.HIGH_ACCURACY
    ) -> Optional[Coordinate]:
        self.calls.append(priority)
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.coordinate


class FakeWeatherApi:
    """Serves the OpenWeatherMap current weather endpoint locally."""

    def __init__(self):
        self.url = ""
        self.requests: list[dict[str, str]] = []
        self.status = 200
        self.payload: object = copy.deepcopy(BERLIN_PAYLOAD)
        self.body: Optional[str] = None
        self.delay = 0.0

    async def handle(self, request: web.Request) -> web.StreamResponse:
        self.requests.append(dict(request.query))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.body is not None:
            return web.Response(status=self.status, text=self.body)
        return web.json_response(self.payload, status=self.status)


@pytest.fixture(autouse=True)
def restore_library_logging():
    lib_logger = logging.getLogger("nowcast")
    handlers = list(lib_logger.handlers)
    level = lib_logger.level
    yield
    lib_logger.handlers[:] = handlers
    lib_logger.setLevel(level)


@pytest.fixture
async def weather_api():
    api = FakeWeatherApi()
    app = web.Application()
    app.router.add_get("/data/2.5/weather", api.handle)

    server = TestServer(app)
    await server.start_server()
    api.url = str(server.make_url("/data/2.5/weather"))
    yield api
    await server.close()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def provider() -> StubLocationProvider:
    return StubLocationProvider()


@pytest.fixture
def granting_gate() -> StaticPermissionGate:
    return StaticPermissionGate.granting()


@pytest.fixture
def make_context(view, provider, granting_gate, weather_api):
    def _make(
        gate=None,
        location_provider=None,
        weather_client=None,
        location_timeout: float = 5.0,
    ) -> WeatherScreenContext:
        acquirer = LocationAcquirer(
            permission_gate=gate or granting_gate,
            provider=location_provider or provider,
            timeout_seconds=location_timeout,
        )
        client = weather_client or OpenWeatherClient(
            api_key="test-key", base_url=weather_api.url
        )
        return WeatherScreenContext(
            location_acquirer=acquirer, weather_client=client, view=view
        )

    return _make

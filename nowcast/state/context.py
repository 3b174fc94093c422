from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

from nowcast.exceptions import NowcastError
from nowcast.location.acquirer import LocationAcquirer
from nowcast.location.views import Coordinate
from nowcast.screen.base import WeatherView
from nowcast.shared.logging_mixin import LoggingMixin
from nowcast.state.base import WeatherScreenEvent
from nowcast.weather.service import OpenWeatherClient
from nowcast.weather.views import WeatherObservation

if TYPE_CHECKING:
    from nowcast.state.base import WeatherScreenState


class WeatherScreenContext(LoggingMixin):
    """Owns the refresh state machine for one weather screen.

    At most one refresh runs at a time; requests made while busy are ignored,
    the same as tapping a disabled button. Closing the screen cancels whatever
    is in flight.
    """

    def __init__(
        self,
        location_acquirer: LocationAcquirer,
        weather_client: OpenWeatherClient,
        view: WeatherView,
    ):
        from nowcast.state.idle import IdleState

        self.state: WeatherScreenState = IdleState()
        self.location_acquirer = location_acquirer
        self.weather_client = weather_client
        self.view = view

        self.coordinate: Optional[Coordinate] = None
        self.observation: Optional[WeatherObservation] = None
        self.error: Optional[NowcastError] = None

        self._busy = False
        self._closed = False
        self._refresh_task: Optional[asyncio.Task] = None

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def closed(self) -> bool:
        return self._closed

    def set_busy(self, busy: bool) -> None:
        """Toggle the busy indicator and the refresh control together"""
        self._busy = busy
        self.view.set_busy(busy)
        self.view.set_refresh_enabled(not busy)

    async def start(self) -> None:
        """Enter the initial state and perform the initial load"""
        await self.state.on_enter(self)
        await self.refresh()

    def request_refresh(self) -> Optional[asyncio.Task]:
        """Start a refresh in the background unless one is already running"""
        if self._closed:
            self.logger.warning("Screen is closed, ignoring refresh")
            return None

        if self._busy or self._is_refresh_running():
            self.logger.debug("Refresh already in progress, ignoring request")
            return None

        self._refresh_task = asyncio.create_task(
            self._run_refresh(), name="weather_refresh"
        )
        return self._refresh_task

    async def refresh(self) -> None:
        """Start a refresh and wait for it to settle back in Idle"""
        task = self.request_refresh()
        if task is not None:
            await task

    async def handle_event(self, event: WeatherScreenEvent) -> None:
        """Delegate an event to the current state"""
        self.logger.debug("Handling event %s in %s", event, self.state.state_type)
        await self.state.handle(event, self)

    async def close(self) -> None:
        """Tear the screen down, cancelling any refresh in flight"""
        if self._closed:
            return

        self._closed = True
        task = self._refresh_task
        self._refresh_task = None

        if task is not None and not task.done():
            self.logger.info("Cancelling refresh in %s", self.state.state_type)
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:  # NOSONAR
                # Intentional cleanup - the refresh task was cancelled by us
                pass

        await self._reset_to_idle()

    async def _run_refresh(self) -> None:
        try:
            await self.handle_event(WeatherScreenEvent.REFRESH_REQUESTED)
        except asyncio.CancelledError:
            self.logger.debug("Refresh cancelled")
            raise
        except Exception as e:
            self.logger.exception("Unexpected error during refresh")
            self.view.show_notice(f"Error fetching weather: {e}")
            await self._reset_to_idle()

    async def _reset_to_idle(self) -> None:
        from nowcast.state.idle import IdleState

        self.state = IdleState()
        await self.state.on_enter(self)

    def _is_refresh_running(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

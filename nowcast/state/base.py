"""
State machine for the weather screen - base classes and enums
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from nowcast.shared.logging_mixin import LoggingMixin

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext


class WeatherScreenEvent(Enum):
    """Events that can trigger state transitions"""

    REFRESH_REQUESTED = "refresh_requested"

    PERMISSION_GRANTED = "permission_granted"
    PERMISSION_DENIED = "permission_denied"

    LOCATION_ACQUIRED = "location_acquired"
    LOCATION_FAILED = "location_failed"

    WEATHER_RECEIVED = "weather_received"
    WEATHER_FAILED = "weather_failed"

    DISPLAY_COMPLETED = "display_completed"

    def __str__(self) -> str:
        return self.value


class StateType(Enum):
    """Enum for different state types"""

    IDLE = "idle"
    AWAITING_PERMISSION = "awaiting_permission"
    AWAITING_LOCATION = "awaiting_location"
    AWAITING_WEATHER = "awaiting_weather"
    DISPLAYING = "displaying"

    def __str__(self) -> str:
        return self.value


class WeatherScreenState(ABC, LoggingMixin):
    """Base class for all states"""

    def __init__(self, state_type: StateType):
        super().__init__()
        self._state_type = state_type

    @property
    def state_type(self) -> StateType:
        """Read-only property that returns the state type"""
        return self._state_type

    @abstractmethod
    async def on_enter(self, context: WeatherScreenContext) -> None:
        """Called when entering this state"""
        ...

    async def on_exit(self, context: WeatherScreenContext) -> None:
        """Called when exiting this state"""
        pass

    @abstractmethod
    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        """Handle an event in this state"""
        ...

    async def _transition_to_idle(self, context: WeatherScreenContext) -> None:
        from nowcast.state.idle import IdleState

        await self._transition_to(IdleState(), context)

    async def _transition_to_awaiting_permission(
        self, context: WeatherScreenContext
    ) -> None:
        from nowcast.state.awaiting_permission import AwaitingPermissionState

        await self._transition_to(AwaitingPermissionState(), context)

    async def _transition_to_awaiting_location(
        self, context: WeatherScreenContext
    ) -> None:
        from nowcast.state.awaiting_location import AwaitingLocationState

        await self._transition_to(AwaitingLocationState(), context)

    async def _transition_to_awaiting_weather(
        self, context: WeatherScreenContext
    ) -> None:
        from nowcast.state.awaiting_weather import AwaitingWeatherState

        await self._transition_to(AwaitingWeatherState(), context)

    async def _transition_to_displaying(self, context: WeatherScreenContext) -> None:
        from nowcast.state.displaying import DisplayingState

        await self._transition_to(DisplayingState(), context)

    async def _transition_to(
        self, new_state: WeatherScreenState, context: WeatherScreenContext
    ) -> None:
        """Transition to a new state"""
        self.logger.info(
            "Transitioning from %s to %s",
            self.__class__.__name__,
            new_state.__class__.__name__,
        )
        context.state = new_state

        await self.on_exit(context)
        await context.state.on_enter(context)


class AwaitingState(WeatherScreenState):
    """A state that suspends the refresh on one asynchronous result.

    The busy indicator stays on and the refresh control stays disabled for as
    long as the screen is in any awaiting state.
    """

    async def on_enter(self, context: WeatherScreenContext) -> None:
        context.set_busy(True)
        await self.await_result(context)

    @abstractmethod
    async def await_result(self, context: WeatherScreenContext) -> None:
        """Run the operation and publish its outcome as an event"""
        ...

    async def _fail(self, context: WeatherScreenContext, message: str) -> None:
        """Tell the user and return to idle"""
        context.view.show_notice(message)
        await self._transition_to_idle(context)

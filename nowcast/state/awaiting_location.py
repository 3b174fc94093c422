from __future__ import annotations

from typing import TYPE_CHECKING

from nowcast.exceptions import LocationUnavailable
from nowcast.state.base import AwaitingState, StateType, WeatherScreenEvent

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext


class AwaitingLocationState(AwaitingState):
    """Waiting for a single location fix"""

    def __init__(self):
        super().__init__(StateType.AWAITING_LOCATION)

    async def await_result(self, context: WeatherScreenContext) -> None:
        try:
            context.coordinate = await context.location_acquirer.request_fix()
        except LocationUnavailable as e:
            context.error = e
            await context.handle_event(WeatherScreenEvent.LOCATION_FAILED)
            return

        await context.handle_event(WeatherScreenEvent.LOCATION_ACQUIRED)

    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        match event:
            case WeatherScreenEvent.LOCATION_ACQUIRED:
                await self._transition_to_awaiting_weather(context)
            case WeatherScreenEvent.LOCATION_FAILED:
                await self._fail(context, str(context.error))
            case _:
                self.logger.debug(
                    "Ignoring event %s in AwaitingLocation state", event.value
                )

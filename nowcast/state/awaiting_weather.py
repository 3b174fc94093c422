from __future__ import annotations

from typing import TYPE_CHECKING

from nowcast.exceptions import NetworkError, ParseError
from nowcast.state.base import AwaitingState, StateType, WeatherScreenEvent

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext


class AwaitingWeatherState(AwaitingState):
    """Waiting for the weather API response"""

    def __init__(self):
        super().__init__(StateType.AWAITING_WEATHER)

    async def await_result(self, context: WeatherScreenContext) -> None:
        try:
            context.observation = await context.weather_client.fetch_weather(
                context.coordinate
            )
        except (NetworkError, ParseError) as e:
            context.error = e
            await context.handle_event(WeatherScreenEvent.WEATHER_FAILED)
            return

        await context.handle_event(WeatherScreenEvent.WEATHER_RECEIVED)

    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        match event:
            case WeatherScreenEvent.WEATHER_RECEIVED:
                await self._transition_to_displaying(context)
            case WeatherScreenEvent.WEATHER_FAILED:
                await self._fail(context, f"Error fetching weather: {context.error}")
            case _:
                self.logger.debug(
                    "Ignoring event %s in AwaitingWeather state", event.value
                )

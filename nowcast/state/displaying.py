from __future__ import annotations

from typing import TYPE_CHECKING

from nowcast.state.base import StateType, WeatherScreenEvent, WeatherScreenState
from nowcast.weather.formatting import format_weather_display

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext


class DisplayingState(WeatherScreenState):
    """Binds the latest observation to the view, then re-arms"""

    def __init__(self):
        super().__init__(StateType.DISPLAYING)

    async def on_enter(self, context: WeatherScreenContext) -> None:
        display = format_weather_display(context.observation)
        self.logger.info(
            "Displaying %s: %s, %s",
            display.location,
            display.temperature,
            display.description,
        )
        context.view.render(display)

        await context.handle_event(WeatherScreenEvent.DISPLAY_COMPLETED)

    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        match event:
            case WeatherScreenEvent.DISPLAY_COMPLETED:
                await self._transition_to_idle(context)
            case _:
                self.logger.debug("Ignoring event %s in Displaying state", event.value)

from __future__ import annotations

from typing import TYPE_CHECKING

from nowcast.state.base import StateType, WeatherScreenEvent, WeatherScreenState

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext


class IdleState(WeatherScreenState):
    """Initial state - refresh control armed, nothing in flight"""

    def __init__(self):
        super().__init__(StateType.IDLE)

    async def on_enter(self, context: WeatherScreenContext) -> None:
        self.logger.info("Entering Idle state - refresh control armed")
        context.coordinate = None
        context.error = None
        context.set_busy(False)

    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        match event:
            case WeatherScreenEvent.REFRESH_REQUESTED:
                await self._transition_to_awaiting_permission(context)
            case _:
                self.logger.debug("Ignoring event %s in Idle state", event.value)

from __future__ import annotations

from typing import TYPE_CHECKING

from nowcast.exceptions import PermissionDenied
from nowcast.state.base import AwaitingState, StateType, WeatherScreenEvent

if TYPE_CHECKING:
    from nowcast.state.context import WeatherScreenContext

PERMISSION_RATIONALE = "Location permission is needed to show weather for your location"


class AwaitingPermissionState(AwaitingState):
    """Waiting for the user to answer the location permission prompt"""

    def __init__(self):
        super().__init__(StateType.AWAITING_PERMISSION)

    async def await_result(self, context: WeatherScreenContext) -> None:
        acquirer = context.location_acquirer

        if not acquirer.has_permission() and acquirer.should_show_rationale():
            context.view.show_notice(PERMISSION_RATIONALE)

        try:
            await acquirer.ensure_permission()
        except PermissionDenied as e:
            context.error = e
            await context.handle_event(WeatherScreenEvent.PERMISSION_DENIED)
            return

        await context.handle_event(WeatherScreenEvent.PERMISSION_GRANTED)

    async def handle(
        self, event: WeatherScreenEvent, context: WeatherScreenContext
    ) -> None:
        match event:
            case WeatherScreenEvent.PERMISSION_GRANTED:
                await self._transition_to_awaiting_location(context)
            case WeatherScreenEvent.PERMISSION_DENIED:
                await self._fail(context, str(context.error))
            case _:
                self.logger.debug(
                    "Ignoring event %s in AwaitingPermission state", event.value
                )

from __future__ import annotations

import asyncio

from nowcast.exceptions import (
    LocationProviderError,
    LocationUnavailable,
    PermissionDenied,
)
from nowcast.location.permissions import PermissionGate
from nowcast.location.providers import LocationProvider
from nowcast.location.views import (
    Coordinate,
    LocationPriority,
    Permission,
    PermissionState,
)
from nowcast.shared.logging_mixin import LoggingMixin

LOCATION_PERMISSIONS = (Permission.FINE_LOCATION, Permission.COARSE_LOCATION)


class LocationAcquirer(LoggingMixin):
    """Resolves one current coordinate behind a permission check."""

    def __init__(
        self,
        permission_gate: PermissionGate,
        provider: LocationProvider,
        timeout_seconds: float = 15.0,
    ):
        self.permission_gate = permission_gate
        self.provider = provider
        self.timeout_seconds = timeout_seconds

    async def acquire_location(self) -> Coordinate:
        """Permission check followed by a single fix"""
        await self.ensure_permission()
        return await self.request_fix()

    def has_permission(self) -> bool:
        """Either fine or coarse access is enough"""
        return any(
            self.permission_gate.check(permission) == PermissionState.GRANTED
            for permission in LOCATION_PERMISSIONS
        )

    def should_show_rationale(self) -> bool:
        return self.permission_gate.should_show_rationale(Permission.FINE_LOCATION)

    async def ensure_permission(self) -> None:
        """
        Prompt for both location permissions at once unless one is already granted.

        Raises:
            PermissionDenied: if the user grants neither
        """
        if self.has_permission():
            self.logger.debug("Location permission already granted")
            return

        self.logger.info("Requesting location permission")
        answers = await self.permission_gate.request(LOCATION_PERMISSIONS)

        if not any(answers.get(permission, False) for permission in LOCATION_PERMISSIONS):
            self.logger.warning("Location permission denied")
            raise PermissionDenied("Location permission is required for this app")

        granted = [str(p) for p in LOCATION_PERMISSIONS if answers.get(p, False)]
        self.logger.info("Location permission granted: %s", ", ".join(granted))

    async def request_fix(self) -> Coordinate:
        """
        Request one fresh high-accuracy fix, with no last-known fallback.

        Raises:
            LocationUnavailable: if there is no fix, the provider fails or times out
        """
        try:
            coordinate = await asyncio.wait_for(
                self.provider.current_location(LocationPriority.HIGH_ACCURACY),
                timeout=self.timeout_seconds,
            )
        except LocationProviderError as e:
            self.logger.warning("Location provider failed: %s", e)
            raise LocationUnavailable(f"Error getting location: {e}") from e
        except asyncio.TimeoutError as e:
            self.logger.warning(
                "Location fix timed out after %.1f seconds", self.timeout_seconds
            )
            raise LocationUnavailable(
                f"Error getting location: timed out after {self.timeout_seconds:g} seconds"
            ) from e

        if coordinate is None:
            self.logger.warning("Location provider returned no fix")
            raise LocationUnavailable("Unable to get location")

        return coordinate

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import aiohttp
from pydantic import ValidationError

from nowcast.config.loader import IP_LOOKUP_URL
from nowcast.exceptions import LocationProviderError
from nowcast.location.views import Coordinate, IpLocationResponse, LocationPriority
from nowcast.shared.logging_mixin import LoggingMixin


class LocationProvider(ABC):
    """Stand-in for the operating system's location service."""

    @abstractmethod
    async def current_location(
        self, priority: LocationPriority = LocationPriority.HIGH_ACCURACY
    ) -> Optional[Coordinate]:
        """
        Request one fresh fix. Returns None when the provider has no position.

        Raises:
            LocationProviderError: if the provider itself fails
        """
        ...


class FixedLocationProvider(LocationProvider):
    """Always reports the same configured position."""

    def __init__(self, coordinate: Coordinate):
        self.coordinate = coordinate

    async def current_location(
        self, priority: LocationPriority = LocationPriority.HIGH_ACCURACY
    ) -> Optional[Coordinate]:
        return self.coordinate


class IpGeolocationProvider(LocationProvider, LoggingMixin):
    """Determines the current position via IP geolocation."""

    def __init__(
        self,
        url: str = IP_LOOKUP_URL,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.url = url
        self._session = session

    async def current_location(
        self, priority: LocationPriority = LocationPriority.HIGH_ACCURACY
    ) -> Optional[Coordinate]:
        self.logger.debug("IP geolocation is city-level; %s hint ignored", priority)

        try:
            if self._session is not None:
                data = await self._lookup(self._session)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._lookup(session)
        except (aiohttp.ClientError, ValueError) as e:
            raise LocationProviderError(str(e) or e.__class__.__name__) from e

        try:
            location = IpLocationResponse.model_validate(data)
        except ValidationError as e:
            raise LocationProviderError(f"Unexpected geolocation payload: {e}") from e

        if location.latitude is None or location.longitude is None:
            self.logger.warning("Geolocation response carried no coordinates")
            return None

        self.logger.info(
            "Resolved location %s, %s (%.2f, %.2f)",
            location.city,
            location.country,
            location.latitude,
            location.longitude,
        )
        try:
            return Coordinate(latitude=location.latitude, longitude=location.longitude)
        except ValidationError as e:
            raise LocationProviderError(f"Coordinate out of range: {e}") from e

    async def _lookup(self, session: aiohttp.ClientSession) -> dict:
        async with session.get(self.url) as response:
            if response.status != 200:
                raise LocationProviderError(
                    f"API request failed with status {response.status}"
                )
            return await response.json(content_type=None)

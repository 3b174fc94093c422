import asyncio
import json
from typing import Optional

import aiohttp
from pydantic import ValidationError

from nowcast.config.loader import OPENWEATHER_CURRENT_URL
from nowcast.exceptions import NetworkError, ParseError
from nowcast.location.views import Coordinate
from nowcast.shared.logging_mixin import LoggingMixin
from nowcast.weather.formatting import transform_api_response
from nowcast.weather.views import OpenWeatherApiResponse, WeatherObservation

UNITS = "metric"


class OpenWeatherClient(LoggingMixin):
    """Fetches current conditions from the OpenWeatherMap API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_CURRENT_URL,
        timeout_seconds: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session

    async def fetch_weather(self, coordinate: Coordinate) -> WeatherObservation:
        """
        Issue one GET for the given coordinate and parse the result.

        Raises:
            NetworkError: on transport failure, timeout or a non-2xx status
            ParseError: if the body does not match the expected shape
        """
        params = {
            "lat": str(coordinate.latitude),
            "lon": str(coordinate.longitude),
            "appid": self.api_key,
            "units": UNITS,
        }

        try:
            if self._session is not None:
                raw_data = await self._get(self._session, params)
            else:
                async with aiohttp.ClientSession() as session:
                    raw_data = await self._get(session, params)
        except aiohttp.ClientResponseError as e:
            self.logger.warning("Weather API returned %s: %s", e.status, e.message)
            raise NetworkError(f"HTTP {e.status} {e.message}".strip(), e.status) from e
        except asyncio.TimeoutError as e:
            self.logger.warning("Weather request timed out")
            raise NetworkError(
                f"Request timed out after {self.timeout.total:g} seconds"
            ) from e
        except aiohttp.ClientError as e:
            self.logger.warning("Weather request failed: %s", e)
            raise NetworkError(str(e) or e.__class__.__name__) from e

        try:
            api_response = OpenWeatherApiResponse.model_validate(raw_data)
        except ValidationError as e:
            self.logger.warning("Unexpected weather payload: %s", e)
            raise ParseError(f"Unexpected weather response: {e}") from e

        return transform_api_response(api_response)

    async def _get(self, session: aiohttp.ClientSession, params: dict) -> object:
        async with session.get(
            self.base_url, params=params, timeout=self.timeout
        ) as response:
            self.logger.debug("GET %s -> %s", response.url, response.status)
            response.raise_for_status()

            try:
                return await response.json(content_type=None)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ParseError(f"Weather response is not valid JSON: {e}") from e

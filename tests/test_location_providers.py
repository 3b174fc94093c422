from __future__ import annotations

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from nowcast.exceptions import LocationProviderError
from nowcast.location.providers import FixedLocationProvider, IpGeolocationProvider

from .conftest import BERLIN


@pytest.fixture
async def ip_api():
    state = {"status": 200, "payload": {}}

    async def handle(request: web.Request) -> web.Response:
        return web.json_response(state["payload"], status=state["status"])

    app = web.Application()
    app.router.add_get("/json/", handle)
    server = TestServer(app)
    await server.start_server()
    state["url"] = str(server.make_url("/json/"))
    yield state
    await server.close()


async def test_fixed_provider_returns_configured_coordinate():
    assert await FixedLocationProvider(BERLIN).current_location() == BERLIN


async def test_ip_provider_parses_coordinates(ip_api):
    ip_api["payload"] = {
        "city": "Berlin",
        "region": "Land Berlin",
        "country": "DE",
        "latitude": 52.52,
        "longitude": 13.405,
    }

    coordinate = await IpGeolocationProvider(url=ip_api["url"]).current_location()

    assert coordinate == BERLIN


async def test_ip_provider_without_coordinates_returns_none(ip_api):
    ip_api["payload"] = {"error": True, "reason": "RateLimited"}

    assert await IpGeolocationProvider(url=ip_api["url"]).current_location() is None


async def test_ip_provider_error_status_raises(ip_api):
    ip_api["status"] = 429

    with pytest.raises(LocationProviderError, match="429"):
        await IpGeolocationProvider(url=ip_api["url"]).current_location()

from __future__ import annotations

import asyncio

import click
import pytest
from pydantic import ValidationError

from nowcast.exceptions import LocationProviderError, LocationUnavailable, PermissionDenied
from nowcast.location.acquirer import LocationAcquirer
from nowcast.location.permissions import ConsolePermissionGate, StaticPermissionGate
from nowcast.location.views import (
    Coordinate,
    LocationPriority,
    Permission,
    PermissionState,
)

from .conftest import BERLIN, StubLocationProvider


async def test_acquire_location_prompts_once_then_returns_fix(provider):
    gate = StaticPermissionGate.granting()
    acquirer = LocationAcquirer(gate, provider)

    assert await acquirer.acquire_location() == BERLIN
    assert gate.request_count == 1
    assert provider.calls == [LocationPriority.HIGH_ACCURACY]


async def test_already_granted_permission_skips_prompt(provider):
    gate = StaticPermissionGate.granting()
    acquirer = LocationAcquirer(gate, provider)
    await acquirer.ensure_permission()

    await acquirer.acquire_location()

    assert gate.request_count == 1


async def test_coarse_only_grant_proceeds(provider):
    gate = StaticPermissionGate(
        {Permission.FINE_LOCATION: False, Permission.COARSE_LOCATION: True}
    )
    acquirer = LocationAcquirer(gate, provider)

    assert await acquirer.acquire_location() == BERLIN
    assert gate.check(Permission.FINE_LOCATION) == PermissionState.DENIED
    assert acquirer.has_permission()


async def test_denied_permission_never_requests_a_fix(provider):
    gate = StaticPermissionGate.denying()
    acquirer = LocationAcquirer(gate, provider)

    with pytest.raises(PermissionDenied, match="required for this app"):
        await acquirer.acquire_location()

    assert provider.calls == []
    assert acquirer.should_show_rationale()


async def test_no_fix_raises_location_unavailable():
    acquirer = LocationAcquirer(
        StaticPermissionGate.granting(), StubLocationProvider(coordinate=None)
    )

    with pytest.raises(LocationUnavailable, match="Unable to get location"):
        await acquirer.acquire_location()


async def test_provider_error_carries_message():
    acquirer = LocationAcquirer(
        StaticPermissionGate.granting(),
        StubLocationProvider(error=LocationProviderError("GPS off")),
    )

    with pytest.raises(LocationUnavailable, match="Error getting location: GPS off"):
        await acquirer.acquire_location()


async def test_slow_fix_times_out():
    provider = StubLocationProvider(release=asyncio.Event())
    acquirer = LocationAcquirer(
        StaticPermissionGate.granting(), provider, timeout_seconds=0.05
    )

    with pytest.raises(LocationUnavailable, match="timed out"):
        await acquirer.acquire_location()


def test_coordinate_rejects_out_of_range_values():
    with pytest.raises(ValidationError):
        Coordinate(latitude=91.0, longitude=0.0)
    with pytest.raises(ValidationError):
        Coordinate(latitude=0.0, longitude=-180.5)


def test_coordinate_is_immutable():
    with pytest.raises(ValidationError):
        BERLIN.latitude = 0.0


async def test_console_gate_approximate_answer_grants_coarse_only(monkeypatch, provider):
    monkeypatch.setattr(click, "prompt", lambda *args, **kwargs: "approximate")
    gate = ConsolePermissionGate()
    acquirer = LocationAcquirer(gate, provider)

    assert await acquirer.acquire_location() == BERLIN
    assert gate.check(Permission.COARSE_LOCATION) == PermissionState.GRANTED
    assert gate.check(Permission.FINE_LOCATION) == PermissionState.DENIED


async def test_console_gate_deny_enables_rationale(monkeypatch, provider):
    monkeypatch.setattr(click, "prompt", lambda *args, **kwargs: "deny")
    gate = ConsolePermissionGate()
    acquirer = LocationAcquirer(gate, provider)

    assert not acquirer.should_show_rationale()
    with pytest.raises(PermissionDenied):
        await acquirer.ensure_permission()
    assert acquirer.should_show_rationale()

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

import click

from nowcast.location.views import Permission, PermissionState
from nowcast.shared.logging_mixin import LoggingMixin


class PermissionGate(ABC):
    """Stand-in for the operating system's runtime permission API."""

    @abstractmethod
    def check(self, permission: Permission) -> PermissionState:
        """Current state of a single permission"""
        ...

    @abstractmethod
    def should_show_rationale(self, permission: Permission) -> bool:
        """True when the user already declined once and deserves an explanation"""
        ...

    @abstractmethod
    async def request(self, permissions: Iterable[Permission]) -> dict[Permission, bool]:
        """Ask for all permissions in one prompt, returning grant/deny per permission"""
        ...


class StaticPermissionGate(PermissionGate, LoggingMixin):
    """Answers every prompt the same way. Used for unattended runs."""

    def __init__(self, answers: Mapping[Permission, bool]):
        self._answers = dict(answers)
        self._states: dict[Permission, PermissionState] = {
            permission: PermissionState.UNKNOWN for permission in Permission
        }
        self.request_count = 0

    @classmethod
    def granting(cls) -> StaticPermissionGate:
        return cls({permission: True for permission in Permission})

    @classmethod
    def denying(cls) -> StaticPermissionGate:
        return cls({permission: False for permission in Permission})

    def check(self, permission: Permission) -> PermissionState:
        return self._states[permission]

    def should_show_rationale(self, permission: Permission) -> bool:
        return self._states[permission] == PermissionState.DENIED

    async def request(self, permissions: Iterable[Permission]) -> dict[Permission, bool]:
        self.request_count += 1
        result = {}
        for permission in permissions:
            granted = self._answers.get(permission, False)
            self._states[permission] = (
                PermissionState.GRANTED if granted else PermissionState.DENIED
            )
            result[permission] = granted

        self.logger.debug("Static permission answers: %s", result)
        return result


class ConsolePermissionGate(PermissionGate, LoggingMixin):
    """Asks the user on the terminal, once per request."""

    _CHOICES = {
        "precise": {Permission.FINE_LOCATION, Permission.COARSE_LOCATION},
        "approximate": {Permission.COARSE_LOCATION},
        "deny": set(),
    }

    def __init__(self):
        self._states: dict[Permission, PermissionState] = {
            permission: PermissionState.UNKNOWN for permission in Permission
        }

    def check(self, permission: Permission) -> PermissionState:
        return self._states[permission]

    def should_show_rationale(self, permission: Permission) -> bool:
        return self._states[permission] == PermissionState.DENIED

    async def request(self, permissions: Iterable[Permission]) -> dict[Permission, bool]:
        requested = list(permissions)
        answer = click.prompt(
            click.style("Allow nowcast to access this device's location?", bold=True),
            type=click.Choice(list(self._CHOICES), case_sensitive=False),
            default="precise",
        )
        granted = self._CHOICES[answer.lower()]

        result = {}
        for permission in requested:
            result[permission] = permission in granted
            self._states[permission] = (
                PermissionState.GRANTED
                if result[permission]
                else PermissionState.DENIED
            )

        self.logger.info("Location permission answer: %s", answer)
        return result

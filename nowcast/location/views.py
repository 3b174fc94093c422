from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A single resolved geographic position."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class Permission(Enum):
    FINE_LOCATION = "fine_location"
    COARSE_LOCATION = "coarse_location"

    def __str__(self) -> str:
        return self.value


class PermissionState(Enum):
    UNKNOWN = "unknown"
    GRANTED = "granted"
    DENIED = "denied"

    def __str__(self) -> str:
        return self.value


class LocationPriority(Enum):
    HIGH_ACCURACY = "high_accuracy"

    def __str__(self) -> str:
        return self.value


class IpLocationResponse(BaseModel):
    """Subset of the ipapi.co JSON payload."""

    city: str | None = None
    region: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None

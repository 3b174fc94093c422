from .acquirer import LocationAcquirer
from .permissions import ConsolePermissionGate, PermissionGate, StaticPermissionGate
from .providers import FixedLocationProvider, IpGeolocationProvider, LocationProvider
from .views import Coordinate, LocationPriority, Permission, PermissionState

__all__ = [
    "LocationAcquirer",
    "ConsolePermissionGate",
    "PermissionGate",
    "StaticPermissionGate",
    "FixedLocationProvider",
    "IpGeolocationProvider",
    "LocationProvider",
    "Coordinate",
    "LocationPriority",
    "Permission",
    "PermissionState",
]

from .geo import distance_m
from .models import IpLocation, Position
from .ports import LocationListener, LocationProvider
from .providers import FixedLocationProvider, IpGeolocationProvider
from .source import LocationSource, LocationSourceState

__all__ = [
    "FixedLocationProvider",
    "IpGeolocationProvider",
    "IpLocation",
    "LocationListener",
    "LocationProvider",
    "LocationSource",
    "LocationSourceState",
    "Position",
    "distance_m",
]

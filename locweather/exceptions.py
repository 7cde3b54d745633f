"""Error taxonomy for the location-to-weather pipeline."""


class WeatherAppError(Exception):
    """Base class for all errors raised by locweather."""


class PermissionDeniedError(WeatherAppError):
    """The user declined the location permission request."""


class LocationSubscriptionError(WeatherAppError):
    """The platform rejected a location update subscription."""


class WeatherFetchError(WeatherAppError):
    """The weather request failed: I/O error, timeout or missing body."""


class WeatherParseError(WeatherAppError):
    """The weather payload was malformed or incomplete."""

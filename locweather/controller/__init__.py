from .controller import WeatherController

__all__ = ["WeatherController"]

from pydantic import ValidationError

from locweather.exceptions import WeatherParseError
from locweather.weather.views import OpenWeatherResponse, WeatherSummary

KELVIN_OFFSET = 273.15


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def parse_weather_payload(payload: str) -> WeatherSummary:
    """Turn a raw OpenWeather JSON body into a summary.

    Raises:
        WeatherParseError: malformed JSON, a missing field or a wrong type
    """
    try:
        response = OpenWeatherResponse.model_validate_json(payload)
    except ValidationError as e:
        raise WeatherParseError(f"Invalid weather payload: {e}") from e

    return transform_api_response(response)


def transform_api_response(response: OpenWeatherResponse) -> WeatherSummary:
    return WeatherSummary(
        city_name=response.name,
        description=response.weather[0].description,
        temperature_celsius=kelvin_to_celsius(response.main.temp),
    )


def format_weather_summary(summary: WeatherSummary) -> str:
    return (
        f"Location: {summary.city_name}\n"
        f"Weather: {summary.description}\n"
        f"Temperature: {summary.temperature_celsius:.1f}°C"
    )

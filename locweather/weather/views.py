from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (OpenWeather current weather mapping)
# =============================================================================


class WeatherCondition(BaseModel):
    """One entry of the ``weather`` array."""

    description: str


class MainReadings(BaseModel):
    """The ``main`` block; temperatures are in Kelvin."""

    temp: float


class OpenWeatherResponse(BaseModel):
    """The fields of the current weather response the summary needs."""

    name: str
    weather: list[WeatherCondition] = Field(min_length=1)
    main: MainReadings


# =============================================================================
# Domain Models
# =============================================================================


class WeatherSummary(BaseModel):
    """What the screen shows. Lives only as long as it takes to render."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    description: str
    temperature_celsius: float

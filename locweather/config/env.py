from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweather_api_key: str
    locweather_log_level: str = "WARNING"

import logging
from typing import ClassVar

from pydantic import ValidationError

from locweather.config import WeatherEnv

LIBRARY_NAME = "locweather"

logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING") -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers.clear()
    lib_logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    lib_logger.addHandler(handler)


try:
    configure_logging(WeatherEnv().locweather_log_level)
except ValidationError:
    # No API key in the environment yet; the CLI reconfigures once it has one.
    configure_logging("WARNING")


class LoggingMixin:
    logger: ClassVar[logging.Logger]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(f"{LIBRARY_NAME}.{cls.__name__}")

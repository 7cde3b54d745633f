from .liveness import LivenessToken
from .logging_mixin import LoggingMixin, configure_logging
from .worker import BackgroundWorker

__all__ = [
    "BackgroundWorker",
    "LivenessToken",
    "LoggingMixin",
    "configure_logging",
]

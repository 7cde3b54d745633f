from typing import Protocol


class Display(Protocol):
    def set_text(self, text: str) -> None: ...


class Notifier(Protocol):
    """Short-lived, user-visible notices."""

    def notify(self, message: str) -> None: ...

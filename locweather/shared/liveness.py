import threading


class LivenessToken:
    """Shared flag telling background continuations whether their owner still exists.

    Continuations hold the token instead of the owner and check ``is_alive``
    before touching any owner state.
    """

    def __init__(self):
        self._alive = threading.Event()
        self._alive.set()

    @property
    def is_alive(self) -> bool:
        return self._alive.is_set()

    def invalidate(self) -> None:
        self._alive.clear()

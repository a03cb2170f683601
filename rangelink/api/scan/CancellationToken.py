import threading


class CancellationToken:
    """Cooperative cancellation flag for long scans.

    ``cancel()`` may be called from any thread; the scanner checks the flag
    before each candidate and stops, keeping what it already yielded.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

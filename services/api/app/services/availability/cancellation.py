from __future__ import annotations

import threading

from app.services.availability.errors import QueryCancelled


class CancellationToken:
    """Thread-safe cancellation flag shared between a caller and a running query."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise QueryCancelled()

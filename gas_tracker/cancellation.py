"""Cooperative cancellation for gas cost runs"""
import threading
from typing import Optional

from gas_tracker.errors import CancelledError

class CancellationToken:
    """
    Flag a caller can trip, from any thread, to abort a run.

    The pipeline checks it between history pages and between transactions,
    so an in-flight HTTP request always completes before the abort is seen.
    """

    def __init__(self):
        self._event = threading.Event()
        self.reason: Optional[str] = None

    def cancel(self, reason: str = "Operation cancelled") -> None:
        """Request cancellation"""
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise CancelledError if cancellation was requested"""
        if self._event.is_set():
            raise CancelledError(self.reason or "Operation cancelled")

def check_cancelled(token: Optional[CancellationToken]) -> None:
    """Raise CancelledError if an optional token has been tripped"""
    if token is not None:
        token.raise_if_cancelled()

"""Progress reporting side channel"""
import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

class ProgressSink(Protocol):
    """Anything callable with a single human-readable status message"""

    def __call__(self, message: str) -> None:
        ...

def emit(sink: Optional[ProgressSink], message: str) -> None:
    """
    Deliver a progress message without letting the sink affect the run.

    Exceptions raised by the sink are logged and dropped.
    """
    if sink is None:
        return
    try:
        sink(message)
    except Exception as e:
        logger.warning(f"Progress sink failed on {message!r}: {e}")

"""Ordered callback lists, one per stream event kind."""

from enum import Enum
from typing import Any, Callable, List


class StreamEvent(Enum):
    """Events a stream publishes."""
    DATA = "data"
    END = "end"


class Emitter:
    """Synchronous publisher for a single event kind.
    
    Callbacks run in registration order. An exception raised by a callback
    propagates to the caller of ``emit`` and the remaining callbacks are
    not invoked for that call.
    """
    
    def __init__(self):
        self._callbacks: List[Callable[..., Any]] = []
    
    def add(self, callback: Callable[..., Any]) -> None:
        """Register a callback. Registering the same callback twice runs it twice."""
        self._callbacks.append(callback)
    
    def emit(self, *args: Any) -> None:
        """Invoke every registered callback with ``args``."""
        # Snapshot so callbacks added during dispatch wait for the next emit
        for callback in tuple(self._callbacks):
            callback(*args)
    
    def __len__(self) -> int:
        return len(self._callbacks)

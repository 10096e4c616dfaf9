"""
In-memory trace of decoder events.

The decoder logs each packet as a named event with a ``details`` dict passed
through ``extra``. A ``RingBufferHandler`` keeps the most recent events so
the command line can replay them after a decode, successful or not.
"""
import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List

TraceEvent = Dict[str, Any]


class RingBufferHandler(logging.Handler):
    """Keeps the last ``max_entries`` records as plain event dicts."""

    def __init__(self, max_entries: int = 200) -> None:
        super().__init__()
        self._events: Deque[TraceEvent] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._events.maxlen

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": dict(getattr(record, "details", {})),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[TraceEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: int = logging.DEBUG) -> logging.Logger:
    """
    Return logger ``name`` recording into its own ring buffer.

    The first call attaches the handler; later calls for the same name
    return the logger unchanged, ``ring_size`` and ``level`` included.
    Records do not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    if any(isinstance(handler, RingBufferHandler) for handler in logger.handlers):
        return logger
    logger.addHandler(RingBufferHandler(max_entries=ring_size))
    logger.setLevel(level)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> RingBufferHandler:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    raise LookupError(f"logger {logger.name!r} has no ring buffer handler")


def format_event(event: TraceEvent) -> str:
    details = " ".join(f"{key}={value}" for key, value in event.get("details", {}).items())
    line = f"{event['level']} {event['event']}"
    return f"{line} {details}" if details else line

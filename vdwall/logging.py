import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, TextIO


class RingBufferHandler(logging.Handler):
    """Keeps the most recent log events in memory as plain dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class DetailsFormatter(logging.Formatter):
    """Appends the ``details`` extra as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None)
        if details:
            line += " " + " ".join(f"{key}={value}" for key, value in details.items())
        return line


def create_logger(
    name: str = "vdwall",
    ring_size: int = 200,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Build the logger handed to transports and devices.

    Repeated calls with the same ``name`` return the already-configured
    logger unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    formatter = DetailsFormatter("%(asctime)s %(levelname)s %(message)s")
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if stream is not None:
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    logger.propagate = False
    return logger


def get_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None

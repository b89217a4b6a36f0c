from __future__ import annotations

import logging
import threading
from collections import deque

logger = logging.getLogger(__name__)


class Notifier:
    """Sink for user-facing alerts. The base class only logs them."""

    def error(self, message: str) -> None:
        logger.warning("user alert: %s", message)


class BufferedNotifier(Notifier):
    """Keeps the most recent alerts until a client drains them."""

    def __init__(self, maxlen: int = 100):
        self._messages: deque[str] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def error(self, message: str) -> None:
        super().error(message)
        with self._lock:
            self._messages.append(message)

    def peek(self) -> list[str]:
        with self._lock:
            return list(self._messages)

    def drain(self) -> list[str]:
        with self._lock:
            out = list(self._messages)
            self._messages.clear()
        return out

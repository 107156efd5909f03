"""Notification sinks.

The registry reports every operation outcome as a human-readable line through
one or more sinks. A sink cannot reject a message and performs no validation.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional, Protocol, TextIO


class NotificationSink(Protocol):
    def notify(self, message: str) -> None:
        """Receive one outcome message."""


class ConsoleSink:
    """Print each message on its own line (stdout unless a stream is given)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(message, file=stream)


class CollectingSink:
    """Keep messages in memory; used by tests and by embedding callers."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.messages.clear()


class LoggingSink:
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("dayplan.notify")
        self._level = level

    def notify(self, message: str) -> None:
        self._logger.log(self._level, "%s", message)


class Notifier:
    """Ordered fan-out to registered sinks (registration order)."""

    def __init__(self, sinks: Iterable[NotificationSink] = ()):
        self._sinks: List[NotificationSink] = list(sinks)

    def add(self, sink: NotificationSink) -> None:
        self._sinks.append(sink)

    def remove(self, sink: NotificationSink) -> bool:
        for i, s in enumerate(self._sinks):
            if s is sink:
                del self._sinks[i]
                return True
        return False

    @property
    def sinks(self) -> tuple[NotificationSink, ...]:
        return tuple(self._sinks)

    def emit(self, message: str) -> None:
        for sink in tuple(self._sinks):
            sink.notify(message)


__all__ = [
    "CollectingSink",
    "ConsoleSink",
    "LoggingSink",
    "NotificationSink",
    "Notifier",
]

"""In-process publish/subscribe bus connecting the sensor components."""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import Any, Callable

Callback = Callable[[Any], Any]


class ParameterError(ValueError):
    """A component was configured with an invalid parameter."""


class Bus:
    """Delivers each published message synchronously to the topic's subscribers."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[Callback]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, topic: str, callback: Callback) -> None:
        """Register a callback for messages on a topic."""
        with self._lock:
            self._subscribers[topic].append(callback)

    def unsubscribe(self, topic: str, callback: Callback) -> None:
        """Remove a callback; raise ValueError if it is not subscribed."""
        with self._lock:
            callbacks = self._subscribers.get(topic, [])
            if callback not in callbacks:
                raise ValueError(f"callback is not subscribed to {topic!r}")
            callbacks.remove(callback)
            if not callbacks:
                del self._subscribers[topic]

    def publish(self, topic: str, message: Any) -> int:
        """Send a message to every subscriber of a topic; return how many got it."""
        with self._lock:
            callbacks = list(self._subscribers.get(topic, ()))
        for callback in callbacks:
            callback(message)
        return len(callbacks)
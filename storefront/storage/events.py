"""In-process event channel for views mounted in one client context"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Broadcast after any cart mutation, no payload
CART_UPDATED = "cart:updated"


class EventChannel:
    """
    Named signals with synchronous delivery.

    Subscribers are kept per event name in subscription order. A subscriber
    that raises is logged and the remaining subscribers still run.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable[[], None]]] = {}

    def subscribe(self, name: str, callback: Callable[[], None]) -> Callable[[], None]:
        """Subscribe to a signal. Returns a function that unsubscribes."""
        callbacks = self._subscribers.setdefault(name, [])
        if callback not in callbacks:
            callbacks.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(name, callback)

        return unsubscribe

    def unsubscribe(self, name: str, callback: Callable[[], None]) -> None:
        """Remove a subscriber, if present"""
        callbacks = self._subscribers.get(name)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def publish(self, name: str) -> int:
        """
        Deliver a signal to its current subscribers.

        Returns:
            Number of subscribers notified
        """
        # Copy so a subscriber may unsubscribe while being notified
        callbacks = list(self._subscribers.get(name, []))
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception(f"Subscriber for '{name}' failed")
        return len(callbacks)

    def subscriber_count(self, name: str) -> int:
        return len(self._subscribers.get(name, []))

    def clear(self) -> None:
        """Drop every subscriber"""
        self._subscribers.clear()

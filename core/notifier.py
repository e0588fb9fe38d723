# -*- coding: utf-8 -*-
"""
Locale Change Notifier

Synchronous pub/sub for active-locale changes. Subscribers are called
in subscription order on the thread that triggered the change, before
the triggering call returns. Every notification is delivered; nothing
is coalesced.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from qcatalog_logger import get_logger

logger = get_logger("core.notifier")


@dataclass(frozen=True)
class LocaleChangedEvent:
    """The active locale moved from `previous` (None at first activation) to `current`."""
    previous: Optional[str]
    current: str


# Type alias for subscriber callbacks
LocaleCallback = Callable[[LocaleChangedEvent], None]


class ChangeNotifier:
    """
    Delivers LocaleChangedEvent to subscribers.

    Usage:
        notifier = ChangeNotifier()
        token = notifier.subscribe(lambda event: refresh_ui())
        ...
        notifier.unsubscribe(token)
    """

    def __init__(self):
        # dicts keep insertion order, which is the delivery order
        self._subscribers: Dict[int, LocaleCallback] = {}
        self._tokens = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(self, callback: LocaleCallback) -> int:
        """
        Register a callback.

        Args:
            callback: Called with a LocaleChangedEvent on every locale change

        Returns:
            Token to pass to unsubscribe()
        """
        if not callable(callback):
            raise TypeError("Locale change callback must be callable")
        with self._lock:
            token = next(self._tokens)
            self._subscribers[token] = callback
        logger.debug(f"Subscriber #{token} added")
        return token

    def unsubscribe(self, token: int) -> bool:
        """
        Remove a callback.

        Returns:
            True if the token was subscribed
        """
        with self._lock:
            removed = self._subscribers.pop(token, None) is not None
        if removed:
            logger.debug(f"Subscriber #{token} removed")
        return removed

    def notify(self, event: LocaleChangedEvent) -> None:
        """
        Call every subscriber with `event`.

        Changes to the subscriber list made by a callback apply from the
        next notification on. A failing callback is logged and the
        remaining subscribers are still called.
        """
        with self._lock:
            subscribers = list(self._subscribers.items())

        for token, callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception(f"Locale change subscriber #{token} failed")

        logger.debug(f"Locale change {event.previous} -> {event.current}: {len(subscribers)} subscribers")

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def clear(self):
        with self._lock:
            self._subscribers.clear()

    def __repr__(self) -> str:
        return f"ChangeNotifier(subscribers={len(self._subscribers)})"

"""Signal notification channel: synchronous publish/subscribe for TradingSignals."""
import logging
import threading
from typing import Callable, Tuple

from ..shared.types import TradingSignal

logger = logging.getLogger(__name__)

SignalCallback = Callable[[TradingSignal], None]


class SignalChannel:
    """
    In-memory relay that broadcasts each new signal to its subscribers.

    Callbacks run synchronously in registration order during publish() and all
    receive the same (frozen) TradingSignal instance. A callback that raises is
    logged and does not stop delivery to the remaining subscribers.

    Thread-safe: mutations swap in a new tuple under a lock and publish()
    iterates the tuple it read, so callbacks may subscribe or unsubscribe while
    a delivery is in progress.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Tuple[SignalCallback, ...] = ()

    def subscribe(self, callback: SignalCallback) -> None:
        """
        Register a callback.

        Args:
            callback: Function called with every published signal.
        """
        with self._lock:
            self._subscribers = self._subscribers + (callback,)
        logger.debug(f"Subscribed {callback!r} ({len(self._subscribers)} subscribers)")

    def unsubscribe(self, callback: SignalCallback) -> None:
        """
        Remove every registration of a callback.

        Args:
            callback: Callback to remove.
        """
        with self._lock:
            remaining = tuple(cb for cb in self._subscribers if cb != callback)
            removed = len(self._subscribers) - len(remaining)
            self._subscribers = remaining
        if removed:
            logger.debug(f"Unsubscribed {callback!r}")
        else:
            logger.warning(f"Callback not found: {callback!r}")

    def publish(self, signal: TradingSignal) -> int:
        """
        Deliver a signal to all current subscribers.

        Args:
            signal: Signal to broadcast.

        Returns:
            Number of subscribers that handled the signal without raising.
        """
        with self._lock:
            subscribers = self._subscribers

        delivered = 0
        for callback in subscribers:
            try:
                callback(signal)
            except Exception:
                logger.exception(f"Error in signal subscriber {callback!r}")
            else:
                delivered += 1
        return delivered

    def clear(self) -> None:
        """Remove all subscribers."""
        with self._lock:
            self._subscribers = ()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

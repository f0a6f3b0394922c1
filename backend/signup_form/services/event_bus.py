"""Event bus — synchronous pub/sub routing signal changes to UI listeners."""

from collections import defaultdict
from itertools import count
from typing import Callable, Dict, Optional

import structlog

from signup_form.config import get_settings
from signup_form.models.events import SignalChangedEvent
from signup_form.models.signals import SignalValue

logger = structlog.get_logger()

# Type alias for signal listeners
SignalListener = Callable[[SignalValue], None]


class EventBus:
    """In-memory pub/sub keyed by signal name.

    Each subscribe() call is its own registration with its own token, even
    when the same callable is subscribed twice. Delivery is synchronous and
    in subscription order. If a listener raises, that registration is
    removed and the others still receive the value.
    """

    def __init__(self, max_history: Optional[int] = None):
        self._listeners: Dict[str, dict[int, SignalListener]] = defaultdict(dict)
        self._event_history: Dict[str, list[SignalChangedEvent]] = defaultdict(list)
        self._max_history = get_settings().EVENT_HISTORY_SIZE if max_history is None else max_history
        self._tokens = count(1)

    def subscribe(self, signal: str, listener: SignalListener) -> int:
        """Register a listener for changes of a signal.

        Returns:
            Token identifying this registration, for remove()
        """
        token = next(self._tokens)
        self._listeners[signal][token] = listener
        logger.debug("event_bus_subscribe", signal=signal, total_listeners=len(self._listeners[signal]))
        return token

    def remove(self, signal: str, token: int) -> None:
        """Remove one registration by its token."""
        listeners = self._listeners.get(signal)
        if not listeners:
            return
        listeners.pop(token, None)
        if not listeners:
            del self._listeners[signal]

    def unsubscribe(self, signal: str, listener: SignalListener) -> None:
        """Remove the oldest registration of a listener for a signal."""
        for token, registered in self._listeners.get(signal, {}).items():
            if registered == listener:
                self.remove(signal, token)
                return

    def listener_count(self, signal: str) -> int:
        return len(self._listeners.get(signal, {}))

    def deliver(self, signal: str, value: SignalValue, token: int) -> None:
        """Send a value to one registration with the same failure handling as publish()."""
        listener = self._listeners.get(signal, {}).get(token)
        if listener is None:
            return
        try:
            listener(value)
        except Exception as e:
            logger.warning("event_listener_failed", signal=signal, error=str(e))
            self.remove(signal, token)

    def publish(self, signal: str, value: SignalValue) -> None:
        """Publish a new signal value to all of its listeners."""
        history = self._event_history[signal]
        history.append(SignalChangedEvent(signal=signal, value=value))
        if len(history) > self._max_history:
            self._event_history[signal] = history[-self._max_history:]

        # Copy so listeners may unsubscribe while we iterate
        for token in list(self._listeners.get(signal, {})):
            self.deliver(signal, value, token)

    def get_history(self, signal: str) -> list[SignalChangedEvent]:
        """Get recent change events for a signal."""
        return list(self._event_history.get(signal, []))

    def cleanup(self) -> None:
        """Drop all listeners and history."""
        self._listeners.clear()
        self._event_history.clear()

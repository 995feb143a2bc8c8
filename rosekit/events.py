"""A typed publish/subscribe bus for engine events."""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Optional


class Event:
    """Base class for events carried by an EventBus."""


@dataclass
class KeyPressedEvent(Event):
    """A key went down."""

    key: int


class EventBus:
    """Delivers events to the callbacks registered for their exact type."""

    def __init__(self):
        self._subscribers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def listen(self, event_type: type, callback: Callable[[Any], None]) -> None:
        """Call ``callback`` with every event of ``event_type`` emitted later."""
        self._subscribers[event_type].append(callback)

    def emit(self, event_type: type, *args: Any, **kwargs: Any) -> Optional[Event]:
        """Build an event from the arguments and deliver it in registration order.

        The event is only built when someone listens for ``event_type``; it is
        returned, or None when there are no listeners.
        """
        callbacks = self._subscribers.get(event_type)
        if not callbacks:
            return None
        event = event_type(*args, **kwargs)
        for callback in list(callbacks):
            callback(event)
        return event

    def reset(self) -> None:
        """Drop every subscription."""
        self._subscribers.clear()
"""
Event loop: single-threaded, deterministic day-order processing.

Dispatches price events to registered handlers. No async; handler order is
the registration order.
"""

from collections.abc import Callable, Iterable

from macross.events import Event

Handler = Callable[[Event], None]


class EventLoop:
    """
    Deterministic event loop. Every handler sees every event, in
    registration order. Pure in-memory processing.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self.processed = 0

    def subscribe(self, handler: Handler) -> None:
        """Register a handler to be called for every event."""
        self._handlers.append(handler)

    def dispatch(self, event: Event) -> None:
        for h in self._handlers:
            h(event)
        self.processed += 1

    def run(self, events: Iterable[Event]) -> None:
        """Process events in the order given (callers supply day order)."""
        for event in events:
            self.dispatch(event)

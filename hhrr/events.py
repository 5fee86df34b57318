"""Events and the objects that apply them."""

from __future__ import annotations


class Event:
    """Something that happened in the domain."""

    def event_type(self) -> str:
        """The short name of the event type."""
        return type(self).__name__


class EventHandler:
    """Reacts to events."""

    def apply(self, event: Event) -> None:
        """Apply an event, reporting it on standard output."""
        print(f"Applying event: {event.event_type()}")


class Aggregate:
    """A domain object whose state is built from events."""

    def apply_event(self, event: Event) -> None:
        """Apply an event to the aggregate, reporting it on standard output."""
        print(f"Applying event to aggregate: {event.event_type()}")
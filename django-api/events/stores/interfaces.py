"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. List queries return
None when nothing matched; an empty list is a valid zero-match result.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventScheduleType, GeoRadius, Pagination


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_events(self, ids: list[str], pagination: Pagination) -> list[Event] | None:
        """Return events whose IDs are in ``ids``, or None if none match."""
        ...

    @abstractmethod
    def get_events_on_schedule(
        self, schedule_type: EventScheduleType, pagination: Pagination
    ) -> list[Event] | None:
        """Return events of a schedule type, or None if none match."""
        ...

    @abstractmethod
    def get_event_ids_near_location(
        self, radius: GeoRadius, pagination: Pagination
    ) -> list[str] | None:
        """Return IDs of events inside ``radius``, nearest first, or None."""
        ...

    @abstractmethod
    def create_event(self, event: Event) -> bool:
        """Persist a new event with its RSVPs. False if nothing was written."""
        ...

    @abstractmethod
    def post_event_rsvps(self, event: Event) -> bool:
        """Attach ``event.rsvps`` to the event ``event.id``. False if unchanged."""
        ...

    @abstractmethod
    def delete_event(self, event_id: str) -> bool:
        """Delete an event. False if no such event existed."""
        ...

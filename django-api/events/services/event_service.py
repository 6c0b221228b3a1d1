"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Decide which store query answers each request
- Return domain models or domain errors
"""

import logging
from typing import NoReturn

from events.domain import (
    CREATE_FIELDS,
    RSVP_FIELDS,
    UPDATE_FIELDS,
    Event,
    EventScheduleType,
    Pagination,
    SearchCriteria,
    SearchResult,
    SearchSource,
)
from events.domain.errors import (
    EventNotFoundError,
    EventNotModifiedError,
    MissingParametersError,
    NotImplementedYetError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _require_fields(event: Event, required: tuple[str, ...]) -> None:
    missing = event.missing_fields(required)
    if missing:
        logger.error("parameters missing %s", missing)
        raise MissingParametersError(missing)


def _found(events: list[Event] | None) -> list[Event]:
    if events is None:
        raise EventNotFoundError()
    return events


class EventService:
    """Service for event catalog and RSVP operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def get_single_event(self, event_id: str) -> Event:
        """Return the event with ``event_id``.

        Raises:
            EventNotFoundError: If the store has no such event.
        """
        events = self._store.get_events([event_id], Pagination(page_size=1, page_number=1))
        if not events:
            raise EventNotFoundError()
        return events[0]

    def get_events(self, ids: list[str], pagination: Pagination) -> list[Event]:
        """Return a page of the events named by ``ids``."""
        return _found(self._store.get_events(ids, pagination))

    def get_events_on_schedule(
        self, schedule_type: EventScheduleType, pagination: Pagination
    ) -> list[Event]:
        """Return a page of events of ``schedule_type``."""
        return _found(self._store.get_events_on_schedule(schedule_type, pagination))

    def resolve_search(
        self, criteria: SearchCriteria | None, pagination: Pagination
    ) -> SearchResult:
        """Run the composite search filters against the store.

        Without criteria every event is listed. Otherwise the schedule filter
        runs first and the location filter, when given, replaces its result.
        The location filter pages over candidate IDs, then re-fetches those
        IDs from the first page.
        """
        if criteria is None:
            events = self._store.get_events_on_schedule(EventScheduleType.ALL, pagination)
            return SearchResult(source=SearchSource.DEFAULT, events=events)

        result = SearchResult()
        if criteria.schedule_type is not None:
            events = self._store.get_events_on_schedule(criteria.schedule_type, pagination)
            result = SearchResult(source=SearchSource.SCHEDULE, events=events)

        if criteria.radius is not None:
            ids = self._store.get_event_ids_near_location(criteria.radius, pagination)
            if ids is not None:
                events = self._store.get_events(ids, pagination.first_page())
                result = SearchResult(source=SearchSource.LOCATION, events=events)

        logger.debug("search resolved by %s", result.source)
        return result

    def search_events(
        self, criteria: SearchCriteria | None, pagination: Pagination
    ) -> list[Event]:
        """Return the events matched by a composite search."""
        return _found(self.resolve_search(criteria, pagination).events)

    def create_event(self, event: Event) -> None:
        """Persist a new event.

        Raises:
            MissingParametersError: If any creation field is unset.
            EventNotModifiedError: If the store wrote nothing.
        """
        _require_fields(event, CREATE_FIELDS)
        if not self._store.create_event(event):
            raise EventNotModifiedError("create event")

    def post_event_rsvps(self, event: Event) -> None:
        """Attach ``event.rsvps`` to an existing event."""
        _require_fields(event, RSVP_FIELDS)
        if not self._store.post_event_rsvps(event):
            raise EventNotModifiedError("post rsvps")

    def update_event(self, event: Event) -> NoReturn:
        """Validate an update. Persisting updates is not implemented."""
        _require_fields(event, UPDATE_FIELDS)
        logger.info("perform put for event %s", event.id)
        raise NotImplementedYetError("event update")

    def delete_event(self, event_id: str) -> None:
        if not self._store.delete_event(event_id):
            raise EventNotModifiedError("delete event")

    def get_rsvps_for_event(self, event_id: str) -> NoReturn:
        raise NotImplementedYetError("rsvp retrieval for events")

    def get_rsvps_for_user(self, user_id: str) -> NoReturn:
        raise NotImplementedYetError("rsvp retrieval for users")

    def put_rsvp_for_event(self, event_id: str) -> NoReturn:
        raise NotImplementedYetError("rsvp update")

from events.domain.models import (
    CREATE_FIELDS,
    RSVP,
    RSVP_FIELDS,
    UPDATE_FIELDS,
    Event,
    EventScheduleType,
    SearchCriteria,
    SearchResult,
    SearchSource,
)
from events.domain.value_objects import GeoRadius, Pagination

__all__ = [
    "Event",
    "RSVP",
    "EventScheduleType",
    "SearchCriteria",
    "SearchResult",
    "SearchSource",
    "CREATE_FIELDS",
    "UPDATE_FIELDS",
    "RSVP_FIELDS",
    "GeoRadius",
    "Pagination",
]
